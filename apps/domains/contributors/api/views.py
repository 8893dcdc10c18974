from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.pagination import ContributorPagination
from apps.core.services.online_users import OnlineUsersService
from apps.domains.contributors.api.serializers import ContributorSerializer
from apps.domains.contributors.selectors import (
    get_contributor,
    get_contributor_questions,
    get_contributors,
    get_site_stats,
)
from apps.domains.questions.api.serializers import QuestionBriefSerializer


class ContributorListView(ListAPIView):
    permission_classes = [AllowAny]
    serializer_class = ContributorSerializer
    pagination_class = ContributorPagination

    def get_queryset(self):
        return get_contributors()


class ContributorDetailView(APIView):
    """
    GET /contributors/{username}/

    Published questions for everyone, every status on one's own profile.
    """
    permission_classes = [AllowAny]

    def get(self, request, username):
        contributor = get_contributor(username)
        if contributor is None:
            raise NotFound()

        paginator = ContributorPagination()
        page = paginator.paginate_queryset(
            get_contributor_questions(contributor, viewer=request.user),
            request,
            view=self,
        )
        questions = paginator.get_paginated_response(QuestionBriefSerializer(page, many=True).data).data
        return Response({
            "contributor": ContributorSerializer(contributor).data,
            "questions": questions,
        })


class StatsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({
            **get_site_stats(),
            "online_users": OnlineUsersService().online_count(),
        })
