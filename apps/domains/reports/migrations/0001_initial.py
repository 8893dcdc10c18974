# PATH: apps/domains/reports/migrations/0001_initial.py
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("questions", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserReport",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("duplicate_allow_request", "Duplicate allow request"),
                            ("inappropriate_pdf_for_community", "Inappropriate PDF for community"),
                            ("wrong_info_given_about_question", "Wrong info given about question"),
                            ("other", "Other"),
                        ],
                        max_length=64,
                    ),
                ),
                ("details", models.TextField(blank=True, default="")),
                ("reviewed", models.BooleanField(db_index=True, default=False)),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="reports", to="questions.question")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="reports", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["-created_at", "-id"]},
        ),
    ]
