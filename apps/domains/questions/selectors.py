# PATH: apps/domains/questions/selectors.py
from django.db.models import QuerySet

from apps.domains.questions.models import Question, Submission

SHOW_SUBMISSIONS_LIMIT = 30


def get_published_questions(**filters) -> QuerySet:
    """Published questions, newest first, with relations and max submission views."""
    return (
        Question.objects.published()
        .filtered(**filters)
        .with_relations()
        .with_max_views()
        .order_by("-created_at", "-id")
    )


def get_published_question(question_id: int):
    return Question.objects.published().with_relations().filter(pk=question_id).first()


def get_top_submissions(question: Question, limit: int = SHOW_SUBMISSIONS_LIMIT) -> list:
    """Highest score first (ties: oldest first) with up/down counts and media."""
    return list(
        Submission.objects.filter(question=question)
        .with_vote_counts()
        .select_related("user")
        .prefetch_related("media")
        .order_by("-score", "created_at", "id")[:limit]
    )


def get_submissions_with_counts() -> QuerySet:
    """Submissions with question relations, vote counts and media. N+1 safe."""
    return (
        Submission.objects.select_related(
            "question",
            "question__department",
            "question__course",
            "question__semester",
            "question__exam_type",
        )
        .with_vote_counts()
        .prefetch_related("media")
    )


def get_user_submissions(user) -> QuerySet:
    return get_submissions_with_counts().filter(user=user).order_by("-created_at", "-id")
