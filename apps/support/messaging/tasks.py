# apps/support/messaging/tasks.py
from celery import shared_task

from apps.support.messaging.services import send_admin_notification


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def send_admin_notification_task(self, subject: str, message: str) -> dict:
    try:
        return send_admin_notification(subject, message)
    except Exception as e:
        raise self.retry(exc=e)
