# PATH: apps/domains/questions/migrations/0001_initial.py
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("published", "Published"),
                            ("pending_review", "Pending review"),
                            ("rejected", "Rejected"),
                            ("duplicate", "Duplicate"),
                        ],
                        db_index=True,
                        default="pending_review",
                        max_length=32,
                    ),
                ),
                (
                    "under_review_reason",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("duplicate", "Possible duplicate"),
                            ("new_user", "New user"),
                            ("new_filter_option", "New filter option"),
                            ("multiple_user_reports", "Multiple user reports"),
                        ],
                        max_length=32,
                        null=True,
                    ),
                ),
                ("duplicate_reason", models.TextField(blank=True, default="")),
                ("rejection_reason", models.TextField(blank=True, default="")),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="catalog.course")),
                ("department", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="catalog.department")),
                ("exam_type", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="catalog.examtype")),
                ("semester", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="catalog.semester")),
            ],
            options={"ordering": ["-created_at", "-id"]},
        ),
        migrations.AddConstraint(
            model_name="question",
            constraint=models.UniqueConstraint(
                fields=("department", "course", "semester", "exam_type"),
                name="uniq_question_attributes",
            ),
        ),
        migrations.CreateModel(
            name="Submission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("views", models.PositiveIntegerField(default=0)),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to="questions.question")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["-created_at", "-id"]},
        ),
        migrations.AddConstraint(
            model_name="submission",
            constraint=models.UniqueConstraint(fields=("question", "user"), name="uniq_submission_per_user_question"),
        ),
        migrations.CreateModel(
            name="Vote",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("value", models.SmallIntegerField(choices=[(1, "Upvote"), (-1, "Downvote")])),
                ("submission", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="votes", to="questions.submission")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="votes", to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.AddConstraint(
            model_name="vote",
            constraint=models.UniqueConstraint(fields=("submission", "user"), name="uniq_vote_per_user_submission"),
        ),
    ]
