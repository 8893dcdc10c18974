import json

import pytest
from django.core.cache import cache
from django.test import RequestFactory
from rest_framework import exceptions

from apps.api.common.auth_jwt import issue_token_pair
from apps.api.common.exceptions import api_exception_handler
from apps.api.common.middleware import UnhandledExceptionMiddleware
from apps.api.common.views import csrf_failure
from apps.core.services.online_users import OnlineUsersService


class TestExceptionHandler:
    def test_validation_error_becomes_error_bag(self):
        exc = exceptions.ValidationError({"name": ["Too short.", "Invalid."], "email": ["Required."]})

        resp = api_exception_handler(exc, {})

        assert resp.status_code == 400
        assert resp.data == {
            "detail": "Too short.",
            "errors": {"name": ["Too short.", "Invalid."], "email": ["Required."]},
        }

    def test_nested_and_list_errors_are_flattened(self):
        nested = api_exception_handler(exceptions.ValidationError({"meta": {"size": ["Too big."]}}), {})
        listed = api_exception_handler(exceptions.ValidationError(["Broken."]), {})

        assert nested.data["errors"] == {"meta": ["Too big."]}
        assert listed.data == {"detail": "Broken.", "errors": {"non_field_errors": ["Broken."]}}

    def test_other_errors_keep_detail(self):
        resp = api_exception_handler(exceptions.NotFound(), {})

        assert resp.status_code == 404
        assert resp.data == {"detail": "Not found."}

    def test_non_api_exceptions_are_left_alone(self):
        assert api_exception_handler(RuntimeError("boom"), {}) is None


class TestUnhandledExceptionMiddleware:
    def test_returns_json_500_with_cors_header(self, settings):
        settings.DEBUG = False
        request = RequestFactory().get("/api/v1/questions/", HTTP_ORIGIN="https://diuqbank.com")

        resp = UnhandledExceptionMiddleware(lambda r: None).process_exception(request, RuntimeError("boom"))

        assert resp.status_code == 500
        assert json.loads(resp.content) == {"detail": "Server error."}
        assert resp["Access-Control-Allow-Origin"] == "https://diuqbank.com"

    def test_debug_exposes_error(self, settings):
        settings.DEBUG = True
        request = RequestFactory().get("/")

        resp = UnhandledExceptionMiddleware(lambda r: None).process_exception(request, RuntimeError("boom"))

        assert json.loads(resp.content)["error"] == "boom"


@pytest.mark.django_db
class TestMaintenanceMode:
    def test_api_answers_503(self, api_client, settings):
        settings.MAINTENANCE_MODE = True

        resp = api_client.get("/api/v1/options/")

        assert resp.status_code == 503
        assert resp["Retry-After"] == "120"
        assert resp.json()["detail"] == "Service is temporarily unavailable for maintenance."

    def test_health_stays_available(self, api_client, settings):
        settings.MAINTENANCE_MODE = True

        resp = api_client.get("/health/")

        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"


@pytest.mark.django_db
class TestErrorPages:
    def test_unknown_path_is_json_404(self, client):
        resp = client.get("/definitely-not-here/")

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Not found."}

    def test_csrf_failure_is_419(self):
        resp = csrf_failure(RequestFactory().post("/admin/login/"), reason="CSRF token missing.")

        assert resp.status_code == 419


class TestOnlineUsersService:
    def test_counts_distinct_users_and_guests(self):
        service = OnlineUsersService(ttl=60)

        service.track_user(1)
        service.track_user(1)
        service.track_user(2)
        service.track_guest("abc")

        assert service.online_user_count() == 2
        assert service.online_count() == 3

    def test_expired_markers_are_not_counted(self):
        service = OnlineUsersService(ttl=60)
        service.track_user(1)
        service.track_user(2)

        cache.delete("user-online-1")

        assert service.online_user_count() == 1


@pytest.mark.django_db
def test_bearer_token_requests_count_as_users(api_client, user):
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token_pair(user)['access']}")

    assert api_client.get("/api/v1/auth/user/").status_code == 200

    assert OnlineUsersService().online_user_count() == 1
    assert OnlineUsersService().online_count() == 1
