import pytest
from django.core import mail

from apps.domains.contact.models import ContactFormSubmission

pytestmark = pytest.mark.django_db

CONTACT_URL = "/api/v1/contact/"

VALID = {
    "name": "Rahim",
    "email": "rahim@example.com",
    "message": "The CSE final for Fall 23 is missing a page.",
}


class TestContactForm:
    def test_stores_submission(self, api_client):
        resp = api_client.post(CONTACT_URL, VALID, format="json", HTTP_USER_AGENT="pytest-agent")

        assert resp.status_code == 201
        assert resp.json() == {"message": "Thank you for contacting us! We will get back to you soon."}
        submission = ContactFormSubmission.objects.get()
        assert submission.email == "rahim@example.com"
        assert submission.ip_address == "127.0.0.1"
        assert submission.user_agent == "pytest-agent"
        assert submission.is_read is False

    def test_forwarded_ip_wins(self, api_client):
        api_client.post(CONTACT_URL, VALID, format="json", HTTP_X_FORWARDED_FOR="203.0.113.7, 10.0.0.1")

        assert ContactFormSubmission.objects.get().ip_address == "203.0.113.7"

    @pytest.mark.parametrize("field, value, message", [
        ("message", "too short", "Your message must be at least 10 characters."),
        ("message", "x" * 5001, "Your message cannot exceed 5000 characters."),
        ("email", "not-an-email", "Please provide a valid email address."),
        ("name", "", "Please provide your name."),
        ("name", "n" * 256, "Your name cannot exceed 255 characters."),
    ])
    def test_validation_messages(self, api_client, field, value, message):
        resp = api_client.post(CONTACT_URL, {**VALID, field: value}, format="json")

        assert resp.status_code == 400
        assert resp.json()["errors"][field] == [message]
        assert not ContactFormSubmission.objects.exists()

    def test_admins_are_notified(self, api_client, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            api_client.post(CONTACT_URL, VALID, format="json")

        assert len(mail.outbox) == 1
        assert "Rahim" in mail.outbox[0].subject
        assert VALID["message"] in mail.outbox[0].body

    def test_is_throttled(self, api_client):
        statuses = [api_client.post(CONTACT_URL, VALID, format="json").status_code for _ in range(6)]

        assert statuses[:5] == [201] * 5
        assert statuses[5] == 429
