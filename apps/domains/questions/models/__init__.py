from .enums import QuestionStatus, UnderReviewReason
from .question import Question
from .submission import Submission
from .vote import Vote

__all__ = [
    "QuestionStatus",
    "UnderReviewReason",
    "Question",
    "Submission",
    "Vote",
]
