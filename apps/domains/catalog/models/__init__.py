from .department import Department
from .course import Course
from .semester import Semester
from .exam_type import ExamType

__all__ = [
    "Department",
    "Course",
    "Semester",
    "ExamType",
]
