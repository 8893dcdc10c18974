# apps/domains/reports/services/report_service.py
import logging

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.domains.questions.models import Question, UnderReviewReason
from apps.domains.reports.models import UserReport
from apps.support.messaging.tasks import send_admin_notification_task

logger = logging.getLogger(__name__)


def review_threshold() -> int:
    return int(getattr(settings, "REPORT_REVIEW_THRESHOLD", 3))


def _notify_admins(report: UserReport) -> None:
    question = report.question
    subject = f"New report on question #{question.pk}"
    message = (
        f"Question: {question.title}\n"
        f"Type: {report.get_type_display()}\n"
        f"Reported by: {report.user.email}\n"
        f"Details: {report.details or '-'}\n"
    )
    transaction.on_commit(lambda: send_admin_notification_task.delay(subject, message))


@transaction.atomic
def create_report(*, user, question: Question, report_type: str, details: str = "") -> UserReport:
    """
    Store a report and pull a published question back into review once it
    collects REPORT_REVIEW_THRESHOLD unreviewed reports.
    """
    report = UserReport.objects.create(
        user=user,
        question=question,
        type=report_type,
        details=details or "",
    )

    if question.is_published:
        pending = UserReport.objects.unreviewed().filter(question=question).count()
        if pending >= review_threshold():
            question.send_to_review(UnderReviewReason.MULTIPLE_USER_REPORTS)
            logger.info(
                "question sent to review question_id=%s reports=%s",
                question.pk,
                pending,
            )

    _notify_admins(report)
    return report


def _close_question_reports(question: Question) -> int:
    """Mark every open report on ``question`` reviewed; returns how many."""
    return UserReport.objects.unreviewed().filter(question=question).update(
        reviewed=True,
        updated_at=timezone.now(),
    )


@transaction.atomic
def publish_reported_question(report: UserReport) -> None:
    report.question.publish()
    closed = _close_question_reports(report.question)
    report.reviewed = True
    logger.info("reported question published question_id=%s closed_reports=%s", report.question_id, closed)


@transaction.atomic
def reject_reported_question(report: UserReport) -> None:
    report.question.reject()
    closed = _close_question_reports(report.question)
    report.reviewed = True
    logger.info("reported question rejected question_id=%s closed_reports=%s", report.question_id, closed)
