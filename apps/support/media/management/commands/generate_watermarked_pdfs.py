# PATH: apps/support/media/management/commands/generate_watermarked_pdfs.py
from django.core.management.base import BaseCommand
from django.db.models import Q

from apps.support.media.conversions.pdf_watermark import WATERMARKED
from apps.support.media.models import MediaFile
from apps.support.media.services.conversions import generate_conversions
from apps.support.media.tasks import generate_pdf_conversions


class Command(BaseCommand):
    help = "Generate watermarked conversions for PDF media that do not have one yet"

    def add_arguments(self, parser):
        parser.add_argument("--force", action="store_true", help="Regenerate existing conversions")
        parser.add_argument("--sync", action="store_true", help="Run in this process instead of queueing")
        parser.add_argument("--limit", type=int, default=0, help="Process at most N media (0 = all)")

    def handle(self, *args, **options):
        force = options["force"]
        qs = MediaFile.objects.filter(Q(mime_type="application/pdf") | Q(file_name__iendswith=".pdf")).order_by("id")
        if options["limit"]:
            qs = qs[: options["limit"]]

        queued = generated = skipped = 0
        for media in qs:
            if media.has_generated_conversion(WATERMARKED) and not force:
                skipped += 1
                continue
            if options["sync"]:
                if generate_conversions(media, force=force):
                    generated += 1
                else:
                    skipped += 1
            else:
                generate_pdf_conversions.delay(media.id, force)
                queued += 1

        self.stdout.write(self.style.SUCCESS(
            f"watermarked pdfs: generated={generated} queued={queued} skipped={skipped}"
        ))
