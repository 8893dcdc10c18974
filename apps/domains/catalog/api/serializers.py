from rest_framework import serializers

from apps.domains.catalog.models import Course, Department, ExamType, Semester
from apps.domains.catalog.services.semester_names import (
    SEMESTER_NAME_PATTERN,
    normalize_semester_name,
)


class DepartmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ["id", "name", "short_name"]


class CourseSerializer(serializers.ModelSerializer):
    department_id = serializers.PrimaryKeyRelatedField(
        source="department",
        queryset=Department.objects.all(),
        error_messages={
            "required": "A department is required.",
            "does_not_exist": "The selected department does not exist.",
        },
    )
    name = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "The course name is required.",
            "blank": "The course name is required.",
            "max_length": "The course name must not exceed 255 characters.",
        },
    )

    class Meta:
        model = Course
        fields = ["id", "department_id", "name"]
        # find-or-create in the view replaces the unique-together check
        validators = []


class SemesterSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=255)

    class Meta:
        model = Semester
        fields = ["id", "name"]

    def to_internal_value(self, data):
        if hasattr(data, "copy"):
            data = data.copy()
        if isinstance(data.get("name"), str):
            data["name"] = normalize_semester_name(data["name"])
        return super().to_internal_value(data)

    def validate_name(self, value):
        if not SEMESTER_NAME_PATTERN.match(value):
            raise serializers.ValidationError(
                "The semester name must be in the format: Fall 20, Spring 23, Summer 25, or Short 25. "
                "If you believe this is a valid semester name, please contact us via our contact page."
            )
        if Semester.objects.filter(name__iexact=value).exists():
            raise serializers.ValidationError("This semester already exists.")
        return value


class ExamTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = ExamType
        fields = ["id", "name"]
