from django.urls import path

from apps.domains.catalog.api.views import CourseCreateView, OptionsView, SemesterCreateView

urlpatterns = [
    path("options/", OptionsView.as_view(), name="catalog-options"),
    path("courses/", CourseCreateView.as_view(), name="catalog-course-create"),
    path("semesters/", SemesterCreateView.as_view(), name="catalog-semester-create"),
]
