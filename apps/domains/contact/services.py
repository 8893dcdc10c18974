# apps/domains/contact/services.py
import logging

from django.db import transaction

from apps.domains.contact.models import ContactFormSubmission
from apps.support.messaging.tasks import send_admin_notification_task

logger = logging.getLogger(__name__)


def client_ip(request) -> str | None:
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip() or None
    return request.META.get("REMOTE_ADDR") or None


def store_submission(*, name: str, email: str, message: str, ip_address=None, user_agent="") -> ContactFormSubmission:
    submission = ContactFormSubmission.objects.create(
        name=name,
        email=email,
        message=message,
        ip_address=ip_address,
        user_agent=user_agent or "",
    )
    logger.info("contact submission stored id=%s", submission.pk)

    subject = f"New contact message from {name}"
    body = f"From: {name} <{email}>\n\n{message}\n"
    transaction.on_commit(lambda: send_admin_notification_task.delay(subject, body))
    return submission
