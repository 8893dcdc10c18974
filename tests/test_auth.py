from io import StringIO

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.management import CommandError, call_command
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken

from apps.api.common.auth_jwt import issue_token_pair
from apps.core.models import User

pytestmark = pytest.mark.django_db

REGISTER_URL = "/api/v1/auth/register/"
LOGIN_URL = "/api/v1/auth/login/"
LOGOUT_URL = "/api/v1/auth/logout/"
USER_URL = "/api/v1/auth/user/"
AVATAR_URL = "/api/v1/auth/user/avatar/"


class TestRegister:
    def test_register_returns_user_and_tokens(self, api_client):
        resp = api_client.post(REGISTER_URL, {
            "name": "Alice Smith",
            "username": "alice_s",
            "email": "Alice@Example.com",
            "password": "secret-pass-123",
        }, format="json")

        assert resp.status_code == 201
        body = resp.json()
        assert body["user"]["username"] == "alice_s"
        assert body["user"]["email"] == "alice@example.com"
        assert body["access"] and body["refresh"]
        assert User.objects.filter(username="alice_s").exists()

    def test_duplicate_email_is_a_field_error(self, api_client, user):
        resp = api_client.post(REGISTER_URL, {
            "name": "Other",
            "username": "other",
            "email": user.email.upper(),
            "password": "secret-pass-123",
        }, format="json")

        assert resp.status_code == 400
        body = resp.json()
        assert body["errors"]["email"] == ["This email is already registered."]
        assert body["detail"] == "This email is already registered."

    def test_username_rejects_symbols(self, api_client):
        resp = api_client.post(REGISTER_URL, {
            "name": "X",
            "username": "bad name!",
            "email": "x@example.com",
            "password": "secret-pass-123",
        }, format="json")

        assert resp.status_code == 400
        assert "username" in resp.json()["errors"]


class TestLogin:
    def test_login_with_email_and_password(self, api_client, user):
        resp = api_client.post(LOGIN_URL, {"email": user.email, "password": "secret-pass-123"}, format="json")

        assert resp.status_code == 200
        body = resp.json()
        assert body["user"]["id"] == user.id
        assert body["access"]

    def test_wrong_password_is_401(self, api_client, user):
        resp = api_client.post(LOGIN_URL, {"email": user.email, "password": "nope-nope"}, format="json")

        assert resp.status_code == 401
        assert resp.json() == {
            "detail": "Invalid credentials.",
            "errors": {"email": ["The provided credentials are incorrect."]},
        }

    def test_missing_password_is_validation_error(self, api_client, user):
        resp = api_client.post(LOGIN_URL, {"email": user.email}, format="json")

        assert resp.status_code == 400
        assert "password" in resp.json()["errors"]


class TestLogout:
    def test_logout_blacklists_refresh_token(self, auth_client, user):
        tokens = issue_token_pair(user)

        resp = auth_client.post(LOGOUT_URL, {"refresh": tokens["refresh"]}, format="json")

        assert resp.status_code == 204
        assert BlacklistedToken.objects.filter(token__user=user).count() == 1

    def test_logout_requires_authentication(self, api_client):
        resp = api_client.post(LOGOUT_URL, {"refresh": "x"}, format="json")
        assert resp.status_code == 401


class TestProfile:
    def test_get_current_user(self, auth_client, user):
        resp = auth_client.get(USER_URL)

        assert resp.status_code == 200
        assert resp.json()["email"] == user.email
        assert resp.json()["avatar_url"] is None

    def test_update_profile(self, auth_client, user):
        resp = auth_client.patch(USER_URL, {"name": "Alice B", "student_id": " 221-15-001 "}, format="json")

        assert resp.status_code == 200
        user.refresh_from_db()
        assert user.name == "Alice B"
        assert user.student_id == "221-15-001"

    def test_username_taken_by_someone_else(self, auth_client, other_user):
        resp = auth_client.patch(USER_URL, {"username": other_user.username.upper()}, format="json")

        assert resp.status_code == 400
        assert resp.json()["errors"]["username"] == ["This username is already taken."]


class TestAvatar:
    def test_upload_replaces_previous_avatar(self, auth_client, user):
        first = SimpleUploadedFile("me.png", b"\x89PNG\r\n\x1a\nfirst", content_type="image/png")
        second = SimpleUploadedFile("me2.png", b"\x89PNG\r\n\x1a\nsecond", content_type="image/png")

        assert auth_client.post(AVATAR_URL, {"avatar": first}, format="multipart").status_code == 200
        resp = auth_client.post(AVATAR_URL, {"avatar": second}, format="multipart")

        assert resp.status_code == 200
        assert resp.json()["avatar_url"].endswith("/me2.png")
        assert len(user.get_media(User.AVATAR_COLLECTION)) == 1

    def test_rejects_non_image(self, auth_client):
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")

        resp = auth_client.post(AVATAR_URL, {"avatar": upload}, format="multipart")

        assert resp.status_code == 400
        assert resp.json()["errors"]["avatar"] == ["The avatar must be a JPEG, PNG, GIF, or WebP image."]

    def test_rejects_large_image(self, auth_client, settings):
        settings.AVATAR_MAX_UPLOAD_BYTES = 10
        upload = SimpleUploadedFile("big.jpg", b"x" * 11, content_type="image/jpeg")

        resp = auth_client.post(AVATAR_URL, {"avatar": upload}, format="multipart")

        assert resp.status_code == 400
        assert resp.json()["errors"]["avatar"] == ["The avatar must not exceed 2MB."]


class TestEnsureDevUser:
    def test_creates_superuser(self):
        out = StringIO()
        call_command("ensure_dev_user", "--email=Admin@Localhost", "--password=secret123", stdout=out)

        admin = User.objects.get(email="admin@localhost")
        assert admin.is_superuser and admin.is_staff
        assert admin.check_password("secret123")
        assert "Created superuser" in out.getvalue()

    def test_resets_password_of_existing_user(self, user):
        out = StringIO()
        call_command("ensure_dev_user", f"--email={user.email}", "--password=new-secret", stdout=out)

        user.refresh_from_db()
        assert user.check_password("new-secret")
        assert user.is_superuser
        assert "Updated superuser" in out.getvalue()

    def test_requires_password(self):
        with pytest.raises(CommandError):
            call_command("ensure_dev_user", "--email=admin@localhost")
