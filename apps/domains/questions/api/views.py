import logging

from django.db.models import F
from django_filters.utils import translate_validation
from drf_yasg.utils import swagger_auto_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from apps.core.permissions import IsOwner
from apps.domains.questions.api.filters import QuestionFilter
from apps.domains.questions.api.serializers import (
    QuestionDetailSerializer,
    QuestionIndexParamsSerializer,
    QuestionIndexSerializer,
    SubmissionSerializer,
    SubmissionWriteSerializer,
)
from apps.domains.questions.models import Submission
from apps.domains.questions.selectors import (
    get_published_question,
    get_published_questions,
    get_submissions_with_counts,
    get_user_submissions,
)
from apps.domains.questions.services.question_cache import QuestionCacheService
from apps.domains.questions.services.submission_service import SubmissionService

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Public questions
# --------------------------------------------------

class QuestionViewSet(viewsets.GenericViewSet):
    """
    GET /questions/       published, filtered, paginated (cached)
    GET /questions/{id}/  published only, top submissions (cached)
    """
    permission_classes = [AllowAny]
    serializer_class = QuestionIndexSerializer

    def get_queryset(self):
        return get_published_questions()

    @swagger_auto_schema(query_serializer=QuestionIndexParamsSerializer)
    def list(self, request):
        params = QuestionIndexParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        filterset = QuestionFilter(request.query_params, queryset=self.get_queryset())
        if not filterset.is_valid():
            raise translate_validation(filterset.errors)

        key_params = {**filterset.cleaned_ids(), **params.validated_data}

        def build():
            page = self.paginate_queryset(filterset.qs)
            data = QuestionIndexSerializer(page, many=True).data
            return self.get_paginated_response(data).data

        return Response(QuestionCacheService().get_index(key_params, build))

    def retrieve(self, request, pk=None):
        question = get_published_question(pk)
        if question is None:
            raise NotFound()
        data = QuestionCacheService().get_show(
            question.pk,
            lambda: QuestionDetailSerializer(question).data,
        )
        return Response(data)


# --------------------------------------------------
# Submissions (owner) + votes
# --------------------------------------------------

UPLOAD_ACTIONS = {"create", "partial_update", "destroy"}
VOTE_ACTIONS = {"vote", "upvote", "downvote"}


class SubmissionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    permission_classes = [IsAuthenticated, IsOwner]
    serializer_class = SubmissionSerializer
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @property
    def throttle_scope(self):
        action_name = getattr(self, "action", None)
        if action_name in UPLOAD_ACTIONS:
            return "uploads"
        if action_name in VOTE_ACTIONS:
            return "votes"
        return None

    def get_permissions(self):
        # voting / view counting target other users' submissions
        if self.action == "views":
            return [AllowAny()]
        if self.action in VOTE_ACTIONS:
            return [IsAuthenticated()]
        return super().get_permissions()

    def get_queryset(self):
        if self.action == "list":
            return get_user_submissions(self.request.user)
        return get_submissions_with_counts()

    def _reload(self, submission: Submission) -> Submission:
        return get_submissions_with_counts().get(pk=submission.pk)

    # ---------------- write ----------------

    @swagger_auto_schema(request_body=SubmissionWriteSerializer)
    def create(self, request):
        serializer = SubmissionWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission = SubmissionService(request.user).create(
            serializer.question_attributes(),
            serializer.validated_data["pdf"],
        )
        return Response(SubmissionSerializer(self._reload(submission)).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(request_body=SubmissionWriteSerializer)
    def partial_update(self, request, pk=None):
        submission = self.get_object()
        serializer = SubmissionWriteSerializer(submission, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        submission = SubmissionService(request.user).update(
            submission,
            serializer.question_attributes(),
            serializer.validated_data.get("pdf"),
        )
        return Response(SubmissionSerializer(self._reload(submission)).data)

    def destroy(self, request, pk=None):
        submission = self.get_object()
        SubmissionService(request.user).delete(submission)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"], url_path="views")
    def views(self, request, pk=None):
        submission = self._get_published_submission(pk)
        Submission.objects.filter(pk=submission.pk).update(views=F("views") + 1)
        submission.refresh_from_db(fields=["views"])
        return Response({"views": submission.views})

    # ---------------- votes ----------------

    def _get_published_submission(self, pk) -> Submission:
        submission = Submission.objects.select_related("question").filter(pk=pk).first()
        if submission is None or not submission.question.is_published:
            raise NotFound()
        return submission

    def _get_votable_submission(self, pk) -> Submission:
        submission = self._get_published_submission(pk)
        if submission.user_id == self.request.user.id:
            raise PermissionDenied("You cannot vote on your own submission.")
        return submission

    def _vote_response(self, submission: Submission, value: int) -> Response:
        return Response({"vote": value, **submission.vote_counts()})

    @action(detail=True, methods=["get", "delete"], url_path="vote")
    def vote(self, request, pk=None):
        submission = self._get_published_submission(pk)
        if request.method == "DELETE":
            submission.remove_vote(request.user)
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response({"vote": submission.get_user_vote(request.user)})

    @action(detail=True, methods=["post"])
    def upvote(self, request, pk=None):
        submission = self._get_votable_submission(pk)
        vote = submission.upvote(request.user)
        return self._vote_response(submission, vote.value)

    @action(detail=True, methods=["post"])
    def downvote(self, request, pk=None):
        submission = self._get_votable_submission(pk)
        vote = submission.downvote(request.user)
        return self._vote_response(submission, vote.value)
