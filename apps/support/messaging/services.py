# apps/support/messaging/services.py
"""
Admin notification mail.

- recipients: settings.ADMIN_NOTIFICATION_EMAILS
- transport: Django EMAIL_BACKEND
"""

import logging

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


def get_admin_recipients() -> list[str]:
    return [e for e in (getattr(settings, "ADMIN_NOTIFICATION_EMAILS", None) or []) if e]


def send_admin_notification(subject: str, message: str) -> dict:
    """
    Mail every admin recipient.

    Returns:
        dict: {"status": "ok"|"skipped", "sent"?, "reason"?}
    """
    recipients = get_admin_recipients()
    if not recipients:
        logger.info("admin notification skipped (no recipients): %s", subject)
        return {"status": "skipped", "reason": "no_recipients"}

    prefix = getattr(settings, "SITE_NAME", "")
    full_subject = f"[{prefix}] {subject}" if prefix else subject
    sent = send_mail(
        full_subject,
        message,
        settings.DEFAULT_FROM_EMAIL,
        recipients,
        fail_silently=False,
    )
    logger.info("admin notification sent subject=%r recipients=%s", subject, len(recipients))
    return {"status": "ok", "sent": sent}
