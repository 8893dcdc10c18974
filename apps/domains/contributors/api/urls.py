from django.urls import path

from apps.domains.contributors.api.views import (
    ContributorDetailView,
    ContributorListView,
    StatsView,
)

urlpatterns = [
    path("contributors/", ContributorListView.as_view(), name="contributors"),
    path("contributors/<str:username>/", ContributorDetailView.as_view(), name="contributor-detail"),
    path("stats/", StatsView.as_view(), name="stats"),
]
