from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.questions.models import Question
from apps.domains.reports.api.serializers import UserReportSerializer
from apps.domains.reports.services.report_service import create_report


class QuestionReportView(APIView):
    """
    POST /questions/{question_id}/reports/
    """
    permission_classes = [IsAuthenticated]
    throttle_scope = "uploads"

    @swagger_auto_schema(request_body=UserReportSerializer, responses={201: UserReportSerializer})
    def post(self, request, question_id):
        question = Question.objects.filter(pk=question_id).first()
        if question is None:
            raise NotFound()

        serializer = UserReportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        report = create_report(
            user=request.user,
            question=question,
            report_type=serializer.validated_data["type"],
            details=serializer.validated_data.get("details", ""),
        )
        return Response(UserReportSerializer(report).data, status=status.HTTP_201_CREATED)
