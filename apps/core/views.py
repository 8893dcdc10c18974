# apps/core/views.py

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from apps.api.common.auth_jwt import EmailTokenObtainSerializer, issue_token_pair
from apps.core.serializers import (
    AvatarSerializer,
    LogoutSerializer,
    ProfileSerializer,
    RegisterSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()


def _auth_payload(user, request) -> dict:
    return {
        "user": UserSerializer(user, context={"request": request}).data,
        **issue_token_pair(user),
    }


# --------------------------------------------------
# Register / Login / Logout
# --------------------------------------------------

class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=RegisterSerializer)
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("user registered id=%s", user.pk)
        return Response(_auth_payload(user, request), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    throttle_scope = "login"

    @swagger_auto_schema(request_body=EmailTokenObtainSerializer)
    def post(self, request):
        serializer = EmailTokenObtainSerializer(data=request.data)
        if not serializer.is_valid():
            errors = serializer.errors
            if "email" in errors and "password" not in errors and errors["email"][0].code == "authorization":
                return Response(
                    {"detail": "Invalid credentials.", "errors": {"email": [str(e) for e in errors["email"]]}},
                    status=status.HTTP_401_UNAUTHORIZED,
                )
            serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        return Response(_auth_payload(user, request))


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(request_body=LogoutSerializer)
    def post(self, request):
        serializer = LogoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            RefreshToken(serializer.validated_data["refresh"]).blacklist()
        except TokenError:
            # already expired / blacklisted: the session is over either way
            pass
        return Response(status=status.HTTP_204_NO_CONTENT)


# --------------------------------------------------
# Current user
# --------------------------------------------------

class UserView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user, context={"request": request}).data)

    @swagger_auto_schema(request_body=ProfileSerializer)
    def patch(self, request):
        serializer = ProfileSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(UserSerializer(user, context={"request": request}).data)


class AvatarView(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    throttle_scope = "uploads"

    @swagger_auto_schema(request_body=AvatarSerializer)
    def post(self, request):
        serializer = AvatarSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = request.user
        with transaction.atomic():
            user.add_media(serializer.validated_data["avatar"], User.AVATAR_COLLECTION, single_file=True)
        return Response(UserSerializer(user, context={"request": request}).data)
