from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


class Vote(TimestampModel):
    UP = 1
    DOWN = -1

    submission = models.ForeignKey(
        "questions.Submission",
        on_delete=models.CASCADE,
        related_name="votes",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="votes",
    )
    value = models.SmallIntegerField(choices=[(UP, "Upvote"), (DOWN, "Downvote")])

    class Meta:
        app_label = "questions"
        constraints = [
            models.UniqueConstraint(
                fields=["submission", "user"],
                name="uniq_vote_per_user_submission",
            ),
        ]

    def __str__(self):
        return f"{self.user_id} -> {self.submission_id}: {self.value:+d}"
