# PATH: apps/domains/contact/admin.py
from django.contrib import admin, messages
from django.utils.text import Truncator

from apps.domains.contact.models import ContactFormSubmission


@admin.register(ContactFormSubmission)
class ContactFormSubmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "short_message", "is_read", "created_at")
    list_filter = ("is_read",)
    search_fields = ("name", "email", "message")
    readonly_fields = ("name", "email", "message", "ip_address", "user_agent", "created_at")
    actions = ["mark_read", "mark_unread"]

    @admin.display(description="Message")
    def short_message(self, obj):
        return Truncator(obj.message).chars(60)

    @admin.action(description="Mark selected as read")
    def mark_read(self, request, queryset):
        updated = queryset.update(is_read=True)
        self.message_user(request, f"{updated} message(s) marked read.", messages.SUCCESS)

    @admin.action(description="Mark selected as unread")
    def mark_unread(self, request, queryset):
        updated = queryset.update(is_read=False)
        self.message_user(request, f"{updated} message(s) marked unread.", messages.SUCCESS)
