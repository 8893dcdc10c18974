# PATH: apps/support/media/management/commands/clear_pdf_conversions.py
from django.core.management.base import BaseCommand
from django.db.models import Q

from apps.support.media.models import MediaFile
from apps.support.media.services.conversions import clear_conversions


class Command(BaseCommand):
    help = "Delete generated PDF conversions so they can be rebuilt"

    def add_arguments(self, parser):
        parser.add_argument("--media-id", type=int, action="append", dest="media_ids", help="Only these media (repeatable)")
        parser.add_argument("--dry-run", action="store_true")

    def handle(self, *args, **options):
        qs = MediaFile.objects.filter(Q(mime_type="application/pdf") | Q(file_name__iendswith=".pdf")).exclude(
            generated_conversions={}
        )
        if options["media_ids"]:
            qs = qs.filter(id__in=options["media_ids"])

        cleared = objects = 0
        for media in qs.order_by("id"):
            if options["dry_run"]:
                self.stdout.write(f"would clear media {media.id}: {media.generated_conversions}")
                continue
            objects += clear_conversions(media)
            cleared += 1

        self.stdout.write(self.style.SUCCESS(f"cleared conversions on {cleared} media ({objects} objects)"))
