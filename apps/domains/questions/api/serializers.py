from rest_framework import serializers

from apps.core.serializers import PublicUserSerializer
from apps.domains.catalog.models import Course, Department, ExamType, Semester
from apps.domains.questions.models import Question, Submission
from apps.domains.questions.selectors import get_top_submissions
from apps.support.media.validators import validate_pdf_upload


# ------------------------------------
# nested catalog refs
# ------------------------------------

class DepartmentRefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ["id", "name", "short_name"]


class NamedRefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()


# ------------------------------------
# Question
# ------------------------------------

class QuestionBriefSerializer(serializers.ModelSerializer):
    department = DepartmentRefSerializer(read_only=True)
    course = NamedRefSerializer(read_only=True)
    semester = NamedRefSerializer(read_only=True)
    exam_type = NamedRefSerializer(read_only=True)

    class Meta:
        model = Question
        fields = ["id", "department", "course", "semester", "exam_type", "status", "created_at"]


class QuestionIndexSerializer(QuestionBriefSerializer):
    max_views = serializers.SerializerMethodField()

    class Meta(QuestionBriefSerializer.Meta):
        fields = ["id", "department", "course", "semester", "exam_type", "max_views", "created_at"]

    def get_max_views(self, obj):
        return int(getattr(obj, "max_views", None) or 0)


class PublicSubmissionSerializer(serializers.ModelSerializer):
    user = PublicUserSerializer(read_only=True)
    pdf_url = serializers.SerializerMethodField()
    upvote_count = serializers.IntegerField(read_only=True, default=0)
    downvote_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Submission
        fields = ["id", "user", "pdf_url", "views", "upvote_count", "downvote_count", "created_at"]

    def get_pdf_url(self, obj):
        return obj.pdf_url


class QuestionDetailSerializer(QuestionBriefSerializer):
    title = serializers.CharField(read_only=True)
    submissions = serializers.SerializerMethodField()

    class Meta(QuestionBriefSerializer.Meta):
        fields = ["id", "title", "department", "course", "semester", "exam_type", "created_at", "submissions"]

    def get_submissions(self, obj):
        return PublicSubmissionSerializer(get_top_submissions(obj), many=True).data


# ------------------------------------
# Submission (owner views)
# ------------------------------------

class SubmissionSerializer(serializers.ModelSerializer):
    question = QuestionBriefSerializer(read_only=True)
    pdf_url = serializers.SerializerMethodField()
    upvote_count = serializers.IntegerField(read_only=True, default=0)
    downvote_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Submission
        fields = [
            "id",
            "question",
            "views",
            "pdf_url",
            "upvote_count",
            "downvote_count",
            "created_at",
            "updated_at",
        ]

    def get_pdf_url(self, obj):
        return obj.pdf_url


COURSE_DEPARTMENT_MESSAGE = "The selected course does not belong to the selected department."


def _pk_field(queryset, label: str, article: str = "A"):
    return serializers.PrimaryKeyRelatedField(
        queryset=queryset,
        error_messages={
            "required": f"{article} {label} is required.",
            "null": f"{article} {label} is required.",
            "does_not_exist": f"The selected {label} does not exist.",
            "incorrect_type": f"The selected {label} does not exist.",
        },
    )


class SubmissionWriteSerializer(serializers.Serializer):
    """
    Create: all four ids + pdf.
    Update (partial): any subset, at least one field.
    """
    department_id = _pk_field(Department.objects.all(), "department")
    course_id = _pk_field(Course.objects.all(), "course")
    semester_id = _pk_field(Semester.objects.all(), "semester")
    exam_type_id = _pk_field(ExamType.objects.all(), "exam type", "An")
    pdf = serializers.FileField(
        validators=[validate_pdf_upload],
        error_messages={
            "required": "A PDF file is required.",
            "invalid": "The upload must be a valid file.",
            "empty": "The upload must be a valid file.",
        },
    )

    def validate(self, attrs):
        if self.partial and not attrs:
            raise serializers.ValidationError({"pdf": ["At least one field must be provided for update."]})

        if "department_id" in attrs or "course_id" in attrs:
            question = getattr(self.instance, "question", None)
            department = attrs.get("department_id") or getattr(question, "department", None)
            course = attrs.get("course_id") or getattr(question, "course", None)
            if department is not None and course is not None and course.department_id != department.pk:
                raise serializers.ValidationError({"course_id": [COURSE_DEPARTMENT_MESSAGE]})
        return attrs

    def question_attributes(self) -> dict:
        """validated ids only (model instances -> pk)."""
        return {
            name: value.pk
            for name, value in self.validated_data.items()
            if name != "pdf"
        }


class QuestionIndexParamsSerializer(serializers.Serializer):
    per_page = serializers.IntegerField(required=False, min_value=1, max_value=100, default=15)
    page = serializers.IntegerField(required=False, min_value=1, default=1)

