# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Auth / account
    # =========================
    path("auth/", include("apps.core.urls")),

    # =========================
    # Domain APIs
    # =========================
    path("", include("apps.domains.catalog.api.urls")),
    path("", include("apps.domains.questions.api.urls")),
    path("", include("apps.domains.reports.api.urls")),
    path("", include("apps.domains.contributors.api.urls")),
    path("contact/", include("apps.domains.contact.api.urls")),
]
