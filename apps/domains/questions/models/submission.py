from django.conf import settings
from django.contrib.contenttypes.fields import GenericRelation
from django.db import models
from django.db.models import Count, Q, Sum, Value
from django.db.models.functions import Coalesce

from apps.api.common.models import TimestampModel
from apps.support.media.conversions.pdf_watermark import WATERMARKED
from apps.support.media.mixins import HasMedia
from apps.support.media.services.pdf_url import resolve_pdf_url


class SubmissionQuerySet(models.QuerySet):
    def with_vote_counts(self):
        return self.annotate(
            upvote_count=Count("votes", filter=Q(votes__value=1), distinct=True),
            downvote_count=Count("votes", filter=Q(votes__value=-1), distinct=True),
            score=Coalesce(Sum("votes__value"), Value(0)),
        )


class Submission(HasMedia, TimestampModel):
    """A user's PDF for a question."""

    PDF_COLLECTION = "pdf"

    question = models.ForeignKey(
        "questions.Question",
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    views = models.PositiveIntegerField(default=0)

    media = GenericRelation("media.MediaFile")
    media_conversions = {PDF_COLLECTION: (WATERMARKED,)}

    objects = SubmissionQuerySet.as_manager()

    class Meta:
        app_label = "questions"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["question", "user"],
                name="uniq_submission_per_user_question",
            ),
        ]

    def __str__(self):
        return f"Submission #{self.pk} by {self.user_id}"

    # --------------------------------------------------
    # pdf
    # --------------------------------------------------

    @property
    def pdf_media(self):
        return self.get_first_media(self.PDF_COLLECTION)

    @property
    def pdf_url(self):
        return resolve_pdf_url(self.pdf_media)

    def replace_pdf(self, uploaded_file):
        return self.add_media(uploaded_file, self.PDF_COLLECTION, single_file=True)

    # --------------------------------------------------
    # votes
    # --------------------------------------------------

    def _set_vote(self, user, value: int):
        from apps.domains.questions.models.vote import Vote

        vote, _ = Vote.objects.update_or_create(
            submission=self,
            user=user,
            defaults={"value": value},
        )
        return vote

    def upvote(self, user):
        return self._set_vote(user, 1)

    def downvote(self, user):
        return self._set_vote(user, -1)

    def remove_vote(self, user) -> int:
        deleted, _ = self.votes.filter(user=user).delete()
        return deleted

    def get_user_vote(self, user):
        return self.votes.filter(user=user).values_list("value", flat=True).first()

    def vote_counts(self) -> dict:
        agg = self.votes.aggregate(
            upvote_count=Count("id", filter=Q(value=1)),
            downvote_count=Count("id", filter=Q(value=-1)),
        )
        return {
            "upvote_count": agg["upvote_count"] or 0,
            "downvote_count": agg["downvote_count"] or 0,
        }
