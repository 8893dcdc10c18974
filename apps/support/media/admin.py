# PATH: apps/support/media/admin.py
from django.contrib import admin, messages

from apps.support.media.models import MediaFile
from apps.support.media.services.conversions import clear_conversions
from apps.support.media.tasks import generate_pdf_conversions


@admin.register(MediaFile)
class MediaFileAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "collection_name",
        "file_name",
        "mime_type",
        "size",
        "disk",
        "content_type",
        "object_id",
        "generated_conversions",
        "created_at",
    )
    list_filter = ("collection_name", "disk", "mime_type")
    search_fields = ("file_name", "file_key")
    readonly_fields = ("file_key", "generated_conversions", "created_at", "updated_at")
    actions = ["regenerate_conversions", "reset_conversions"]

    @admin.action(description="Regenerate watermarked PDF")
    def regenerate_conversions(self, request, queryset):
        for media in queryset:
            generate_pdf_conversions.delay(media.id, True)
        self.message_user(request, f"{queryset.count()} conversion(s) queued.", messages.SUCCESS)

    @admin.action(description="Clear generated conversions")
    def reset_conversions(self, request, queryset):
        for media in queryset:
            clear_conversions(media)
        self.message_user(request, "Conversions cleared.", messages.SUCCESS)
