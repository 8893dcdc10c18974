from django.urls import path

from apps.domains.contact.api.views import ContactFormView

urlpatterns = [
    path("", ContactFormView.as_view(), name="contact"),
]
