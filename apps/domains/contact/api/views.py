from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.contact.api.serializers import ContactFormSerializer
from apps.domains.contact.services import client_ip, store_submission

THANK_YOU_MESSAGE = "Thank you for contacting us! We will get back to you soon."


class ContactFormView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_scope = "contact"

    @swagger_auto_schema(request_body=ContactFormSerializer)
    def post(self, request):
        serializer = ContactFormSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store_submission(
            **serializer.validated_data,
            ip_address=client_ip(request),
            user_agent=request.META.get("HTTP_USER_AGENT", ""),
        )
        return Response({"message": THANK_YOU_MESSAGE}, status=status.HTTP_201_CREATED)
