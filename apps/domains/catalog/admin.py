# PATH: apps/domains/catalog/admin.py
from django.contrib import admin
from django.db.models import Count

from apps.domains.catalog.models import Course, Department, ExamType, Semester
from apps.domains.catalog.services.options import clear_options_cache


class QuestionsCountMixin:
    """Annotates questions_count; saving or deleting drops the options cache."""

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_questions_count=Count("questions", distinct=True))

    @admin.display(description="Questions", ordering="_questions_count")
    def questions_count(self, obj):
        return obj._questions_count

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        clear_options_cache()

    def delete_model(self, request, obj):
        super().delete_model(request, obj)
        clear_options_cache()


@admin.register(Department)
class DepartmentAdmin(QuestionsCountMixin, admin.ModelAdmin):
    list_display = ("id", "name", "short_name", "courses_count", "questions_count")
    search_fields = ("name", "short_name")

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_courses_count=Count("courses", distinct=True))

    @admin.display(description="Courses", ordering="_courses_count")
    def courses_count(self, obj):
        return obj._courses_count


@admin.register(Course)
class CourseAdmin(QuestionsCountMixin, admin.ModelAdmin):
    list_display = ("id", "name", "department", "questions_count")
    list_filter = ("department",)
    search_fields = ("name", "department__name", "department__short_name")
    list_select_related = ("department",)


@admin.register(Semester)
class SemesterAdmin(QuestionsCountMixin, admin.ModelAdmin):
    list_display = ("id", "name", "questions_count")
    search_fields = ("name",)


@admin.register(ExamType)
class ExamTypeAdmin(QuestionsCountMixin, admin.ModelAdmin):
    list_display = ("id", "name", "questions_count")
    search_fields = ("name",)
