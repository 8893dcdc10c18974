# PATH: apps/domains/questions/services/submission_service.py
from __future__ import annotations

import logging

from django.db import transaction
from rest_framework.exceptions import ValidationError

from apps.domains.questions.models import Question, QuestionStatus, Submission, UnderReviewReason
from apps.domains.questions.models.question import QUESTION_FIELDS
from apps.domains.questions.services.question_cache import QuestionCacheService

logger = logging.getLogger(__name__)

DUPLICATE_SUBMISSION_MESSAGE = (
    "You have already submitted a PDF for this question. "
    "Please update your existing submission instead."
)


def determine_question_status(attrs: dict) -> tuple[str, str | None]:
    """
    A new question is published only when each of its four attributes
    already appears on some published question.
    """
    published = Question.objects.published()
    for field in QUESTION_FIELDS:
        if not published.filter(**{field: attrs[field]}).exists():
            return QuestionStatus.PENDING_REVIEW, UnderReviewReason.NEW_FILTER_OPTION
    return QuestionStatus.PUBLISHED, None


def find_or_create_question(attrs: dict) -> Question:
    lookup = {field: attrs[field] for field in QUESTION_FIELDS}
    question = Question.objects.filter(**lookup).first()
    if question:
        return question
    status, reason = determine_question_status(lookup)
    question, created = Question.objects.get_or_create(
        **lookup,
        defaults={"status": status, "under_review_reason": reason},
    )
    if created:
        logger.info("question created id=%s status=%s", question.pk, question.status)
    return question


class SubmissionService:
    """Submission create / update / delete for one user. Cache busting runs in signals."""

    def __init__(self, user):
        self.user = user

    def _ensure_single_submission(self, question: Question, exclude_id: int | None = None) -> None:
        qs = Submission.objects.filter(question=question, user=self.user)
        if exclude_id:
            qs = qs.exclude(pk=exclude_id)
        if qs.exists():
            raise ValidationError({"question": [DUPLICATE_SUBMISSION_MESSAGE]})

    def create(self, attrs: dict, pdf) -> Submission:
        with transaction.atomic():
            question = find_or_create_question(attrs)
            self._ensure_single_submission(question)
            submission = Submission.objects.create(question=question, user=self.user, views=0)
            submission.replace_pdf(pdf)

        logger.info("submission created id=%s question=%s user=%s", submission.pk, question.pk, self.user.pk)
        return submission

    def update(self, submission: Submission, attrs: dict, pdf=None) -> Submission:
        old_question_id = submission.question_id

        with transaction.atomic():
            if any(field in attrs for field in QUESTION_FIELDS):
                current = submission.question
                merged = {field: attrs.get(field, getattr(current, field)) for field in QUESTION_FIELDS}
                question = find_or_create_question(merged)
                if question.pk != submission.question_id:
                    self._ensure_single_submission(question, exclude_id=submission.pk)
                    # votes do not follow the submission to another question
                    submission.votes.all().delete()
                    submission.question = question
                    submission.save(update_fields=["question", "updated_at"])

            if pdf is not None:
                submission.replace_pdf(pdf)
                submission.save(update_fields=["updated_at"])

        if submission.question_id != old_question_id:
            QuestionCacheService().clear_question_cache(old_question_id)
            logger.info(
                "submission %s moved question %s -> %s",
                submission.pk, old_question_id, submission.question_id,
            )
        return submission

    def delete(self, submission: Submission) -> None:
        submission_id, question_id = submission.pk, submission.question_id
        submission.delete()
        logger.info("submission deleted id=%s question=%s user=%s", submission_id, question_id, self.user.pk)
