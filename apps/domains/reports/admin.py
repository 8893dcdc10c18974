# PATH: apps/domains/reports/admin.py
from django.contrib import admin, messages

from apps.domains.reports.models import UserReport
from apps.domains.reports.services.report_service import (
    publish_reported_question,
    reject_reported_question,
)


@admin.register(UserReport)
class UserReportAdmin(admin.ModelAdmin):
    list_display = ("id", "question", "user", "type", "reviewed", "question_status", "created_at")
    list_filter = ("type", "reviewed", "question__status")
    search_fields = ("details", "user__email", "user__username", "question__course__name")
    list_select_related = (
        "user",
        "question",
        "question__department",
        "question__course",
        "question__semester",
        "question__exam_type",
    )
    raw_id_fields = ("user", "question")
    actions = ["publish_question", "reject_question", "mark_reviewed"]

    @admin.display(description="Question status", ordering="question__status")
    def question_status(self, obj):
        return obj.question.get_status_display()

    @admin.action(description="Publish question and close its reports")
    def publish_question(self, request, queryset):
        for report in queryset.select_related("question"):
            publish_reported_question(report)
        self.message_user(request, "Question(s) published.", messages.SUCCESS)

    @admin.action(description="Reject question and close its reports")
    def reject_question(self, request, queryset):
        for report in queryset.select_related("question"):
            reject_reported_question(report)
        self.message_user(request, "Question(s) rejected.", messages.WARNING)

    @admin.action(description="Mark selected reports reviewed")
    def mark_reviewed(self, request, queryset):
        updated = queryset.update(reviewed=True)
        self.message_user(request, f"{updated} report(s) marked reviewed.", messages.SUCCESS)
