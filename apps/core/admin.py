# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count

from apps.core.models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = (
        "id",
        "username",
        "name",
        "email",
        "student_id",
        "submissions_count",
        "is_staff",
        "date_joined",
    )
    list_filter = ("is_staff", "is_superuser", "is_active")
    search_fields = ("username", "name", "email", "student_id")
    ordering = ("-id",)

    fieldsets = BaseUserAdmin.fieldsets + (
        ("Profile", {"fields": ("name", "student_id")}),
    )
    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("username", "name", "email", "password1", "password2"),
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_submissions_count=Count("submissions", distinct=True))

    @admin.display(description="Submissions", ordering="_submissions_count")
    def submissions_count(self, obj):
        return obj._submissions_count
