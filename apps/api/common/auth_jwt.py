# Email + password login that issues a simplejwt pair.
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken

User = get_user_model()


def issue_token_pair(user) -> dict:
    refresh = RefreshToken.for_user(user)
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


class EmailTokenObtainSerializer(serializers.Serializer):
    """Look the user up by email (case-insensitive) and check the password."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        email = attrs["email"].strip()
        user = User.objects.filter(email__iexact=email).first()
        if not user or not user.check_password(attrs["password"]):
            raise serializers.ValidationError(
                {"email": ["The provided credentials are incorrect."]},
                code="authorization",
            )
        if not user.is_active:
            raise serializers.ValidationError(
                {"email": ["This account is disabled."]},
                code="authorization",
            )
        attrs["user"] = user
        return attrs
