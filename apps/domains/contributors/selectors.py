# apps/domains/contributors/selectors.py
from django.contrib.auth import get_user_model
from django.db.models import Count, QuerySet, Sum
from django.db.models.functions import Coalesce

from apps.domains.catalog.models import Course, Department, ExamType, Semester
from apps.domains.questions.models import Question, QuestionStatus

User = get_user_model()


def _with_contribution_counts(qs: QuerySet) -> QuerySet:
    return qs.annotate(
        submissions_count=Count("submissions", distinct=True),
        total_views=Coalesce(Sum("submissions__views"), 0),
    )


def get_contributors() -> QuerySet:
    """Users with at least one submission, most submissions first."""
    return (
        _with_contribution_counts(User.objects.all())
        .filter(submissions_count__gt=0)
        .prefetch_related("media")
        .order_by("-submissions_count", "-total_views", "id")
    )


def get_contributor(username: str):
    return (
        _with_contribution_counts(User.objects.filter(username=username))
        .prefetch_related("media")
        .first()
    )


def get_contributor_questions(contributor, viewer=None) -> QuerySet:
    qs = Question.objects.filter(submissions__user=contributor)
    is_self = viewer is not None and viewer.is_authenticated and viewer.pk == contributor.pk
    if not is_self:
        qs = qs.filter(status=QuestionStatus.PUBLISHED)
    return qs.distinct().with_relations().order_by("-created_at", "-id")


def get_site_stats() -> dict:
    return {
        "questions": Question.objects.published().count(),
        "departments": Department.objects.count(),
        "courses": Course.objects.count(),
        "semesters": Semester.objects.count(),
        "exam_types": ExamType.objects.count(),
        "users": User.objects.count(),
        "contributors": User.objects.filter(submissions__isnull=False).distinct().count(),
    }
