# PATH: apps/support/media/migrations/0001_initial.py
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("contenttypes", "0002_remove_content_type_name"),
    ]

    operations = [
        migrations.CreateModel(
            name="MediaFile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("object_id", models.PositiveBigIntegerField()),
                ("collection_name", models.CharField(default="default", max_length=64)),
                ("disk", models.CharField(choices=[("r2", "Cloudflare R2"), ("local", "Local")], default="r2", max_length=16)),
                ("file_key", models.CharField(blank=True, default="", max_length=512)),
                ("file_name", models.CharField(max_length=255)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("mime_type", models.CharField(blank=True, default="", max_length=128)),
                ("size", models.PositiveBigIntegerField(default=0)),
                ("generated_conversions", models.JSONField(blank=True, default=dict)),
                (
                    "content_type",
                    models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="contenttypes.contenttype"),
                ),
            ],
            options={
                "db_table": "media",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["content_type", "object_id", "collection_name"], name="media_owner_collection_idx"),
                ],
            },
        ),
    ]
