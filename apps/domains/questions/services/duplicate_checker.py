# PATH: apps/domains/questions/services/duplicate_checker.py
from __future__ import annotations

from apps.domains.questions.models import Question


class QuestionDuplicateChecker:
    """
    Finds the published question a set of attributes would duplicate.
    The oldest match wins; the question being edited is never its own duplicate.
    """

    def check(self, attributes: dict, current_question_id: int | None = None) -> Question | None:
        first_match = (
            Question.objects.published()
            .filter(
                department_id=attributes["department_id"],
                course_id=attributes["course_id"],
                semester_id=attributes["semester_id"],
                exam_type_id=attributes["exam_type_id"],
            )
            .order_by("created_at", "id")
            .first()
        )
        if first_match is None:
            return None
        if current_question_id is not None and first_match.id == current_question_id:
            return None
        return first_match
