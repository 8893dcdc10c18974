import logging

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.catalog.api.serializers import CourseSerializer, SemesterSerializer
from apps.domains.catalog.models import Course
from apps.domains.catalog.services.options import clear_options_cache, get_options

logger = logging.getLogger(__name__)


class OptionsView(APIView):
    """GET /options/ departments, courses, semesters (latest first), exam types."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(get_options())


class CourseCreateView(APIView):
    """POST /courses/ create, or return the course of the same name in that department."""
    permission_classes = [IsAuthenticated]
    throttle_scope = "uploads"

    @swagger_auto_schema(request_body=CourseSerializer)
    def post(self, request):
        serializer = CourseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        department = serializer.validated_data["department"]
        name = serializer.validated_data["name"].strip()

        existing = Course.objects.filter(department=department, name__iexact=name).first()
        if existing:
            return Response(CourseSerializer(existing).data, status=status.HTTP_200_OK)

        course = Course.objects.create(department=department, name=name)
        clear_options_cache()
        logger.info("course created id=%s department=%s by user=%s", course.pk, department.pk, request.user.pk)
        return Response(CourseSerializer(course).data, status=status.HTTP_201_CREATED)


class SemesterCreateView(APIView):
    """POST /semesters/ name normalised then checked against "Fall 23" style."""
    permission_classes = [IsAuthenticated]
    throttle_scope = "uploads"

    @swagger_auto_schema(request_body=SemesterSerializer)
    def post(self, request):
        serializer = SemesterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        semester = serializer.save()
        clear_options_cache()
        logger.info("semester created id=%s name=%s by user=%s", semester.pk, semester.name, request.user.pk)
        return Response(SemesterSerializer(semester).data, status=status.HTTP_201_CREATED)
