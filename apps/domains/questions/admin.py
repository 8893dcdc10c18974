# PATH: apps/domains/questions/admin.py
from django import forms
from django.contrib import admin, messages
from django.db.models import Count
from django.utils.html import format_html

from apps.domains.questions.models import Question, QuestionStatus, Submission, Vote
from apps.domains.questions.services.duplicate_checker import QuestionDuplicateChecker

STATUS_COLORS = {
    QuestionStatus.PUBLISHED: "#16a34a",
    QuestionStatus.PENDING_REVIEW: "#d97706",
    QuestionStatus.REJECTED: "#dc2626",
    QuestionStatus.DUPLICATE: "#6b7280",
}


class QuestionAdminForm(forms.ModelForm):
    class Meta:
        model = Question
        fields = "__all__"

    def clean(self):
        cleaned = super().clean()
        keys = ("department", "course", "semester", "exam_type")
        if not all(cleaned.get(k) for k in keys):
            return cleaned
        if cleaned["course"].department_id != cleaned["department"].pk:
            self.add_error("course", "The selected course does not belong to the selected department.")
        if cleaned.get("status") != QuestionStatus.PUBLISHED:
            return cleaned
        duplicate = QuestionDuplicateChecker().check(
            {f"{k}_id": cleaned[k].pk for k in keys},
            current_question_id=self.instance.pk,
        )
        if duplicate:
            raise forms.ValidationError(
                f"A published question with these attributes already exists (#{duplicate.pk})."
            )
        return cleaned


class SubmissionInline(admin.TabularInline):
    model = Submission
    extra = 0
    fields = ("id", "user", "views", "created_at")
    readonly_fields = ("id", "created_at")
    raw_id_fields = ("user",)
    show_change_link = True


class VoteInline(admin.TabularInline):
    model = Vote
    extra = 0
    fields = ("user", "value", "created_at")
    readonly_fields = ("created_at",)
    raw_id_fields = ("user",)


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    form = QuestionAdminForm
    list_display = (
        "id",
        "department",
        "course",
        "semester",
        "exam_type",
        "status_badge",
        "under_review_reason",
        "submissions_count",
        "created_at",
    )
    list_filter = ("status", "under_review_reason", "department", "semester", "exam_type")
    search_fields = ("course__name", "department__name", "department__short_name", "semester__name")
    list_select_related = ("department", "course", "semester", "exam_type")
    autocomplete_fields = ("course",)
    inlines = [SubmissionInline]
    actions = ["publish_questions", "reject_questions", "mark_questions_duplicate"]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_submissions_count=Count("submissions", distinct=True))

    @admin.display(description="Submissions", ordering="_submissions_count")
    def submissions_count(self, obj):
        return obj._submissions_count

    @admin.display(description="Status", ordering="status")
    def status_badge(self, obj):
        return format_html(
            '<span style="color:#fff;background:{};padding:2px 6px;border-radius:4px">{}</span>',
            STATUS_COLORS.get(obj.status, "#6b7280"),
            obj.get_status_display(),
        )

    @admin.action(description="Publish selected questions")
    def publish_questions(self, request, queryset):
        for question in queryset:
            question.publish()
        self.message_user(request, f"{queryset.count()} question(s) published.", messages.SUCCESS)

    @admin.action(description="Reject selected questions")
    def reject_questions(self, request, queryset):
        for question in queryset:
            question.reject()
        self.message_user(request, f"{queryset.count()} question(s) rejected.", messages.SUCCESS)

    @admin.action(description="Mark selected questions as duplicate")
    def mark_questions_duplicate(self, request, queryset):
        for question in queryset:
            question.mark_duplicate()
        self.message_user(request, f"{queryset.count()} question(s) marked duplicate.", messages.SUCCESS)


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "question", "user", "views", "score", "created_at")
    list_select_related = (
        "question",
        "question__department",
        "question__course",
        "question__semester",
        "question__exam_type",
        "user",
    )
    list_filter = ("question__status",)
    search_fields = ("user__username", "user__email", "question__course__name")
    raw_id_fields = ("question", "user")
    readonly_fields = ("pdf_link",)
    inlines = [VoteInline]

    def get_queryset(self, request):
        return super().get_queryset(request).with_vote_counts()

    @admin.display(description="Score", ordering="score")
    def score(self, obj):
        return obj.score

    @admin.display(description="PDF")
    def pdf_link(self, obj):
        url = obj.pdf_url
        return format_html('<a href="{}" target="_blank">open</a>', url) if url else "-"


@admin.register(Vote)
class VoteAdmin(admin.ModelAdmin):
    list_display = ("id", "submission", "user", "value", "created_at")
    list_filter = ("value",)
    raw_id_fields = ("submission", "user")
