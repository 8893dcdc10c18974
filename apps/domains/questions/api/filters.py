import django_filters

from apps.domains.catalog.models import Course, Department, ExamType, Semester
from apps.domains.questions.models import Question


class QuestionFilter(django_filters.FilterSet):
    """
    ?department_id=&course_id=&semester_id=&exam_type_id=
    Unknown ids are validation errors.
    """
    department_id = django_filters.ModelChoiceFilter(field_name="department", queryset=Department.objects.all())
    course_id = django_filters.ModelChoiceFilter(field_name="course", queryset=Course.objects.all())
    semester_id = django_filters.ModelChoiceFilter(field_name="semester", queryset=Semester.objects.all())
    exam_type_id = django_filters.ModelChoiceFilter(field_name="exam_type", queryset=ExamType.objects.all())

    class Meta:
        model = Question
        fields = ["department_id", "course_id", "semester_id", "exam_type_id"]

    def cleaned_ids(self) -> dict:
        """{filter_name: pk | None} once is_valid() passed."""
        return {
            name: (value.pk if value is not None else None)
            for name, value in self.form.cleaned_data.items()
        }
