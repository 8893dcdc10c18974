# apps/core/serializers.py

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from apps.support.media.validators import validate_avatar_upload

User = get_user_model()

USERNAME_REGEX = r"^[a-zA-Z0-9_]+$"


# ------------------------------------
# User
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    avatar_url = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "username",
            "email",
            "student_id",
            "avatar_url",
            "is_staff",
            "date_joined",
        ]
        read_only_fields = fields

    def get_avatar_url(self, obj):
        return obj.avatar_url


class PublicUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["name", "username"]


# ------------------------------------
# Register / Profile
# ------------------------------------

class RegisterSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=255)
    username = serializers.RegexField(
        USERNAME_REGEX,
        min_length=3,
        max_length=150,
        error_messages={"invalid": "The username may only contain letters, numbers and underscores."},
        validators=[UniqueValidator(queryset=User.objects.all(), message="This username is already taken.")],
    )
    email = serializers.EmailField(
        max_length=255,
        validators=[UniqueValidator(queryset=User.objects.all(), lookup="iexact", message="This email is already registered.")],
    )
    password = serializers.CharField(write_only=True, min_length=8, trim_whitespace=False)

    class Meta:
        model = User
        fields = ["name", "username", "email", "password"]

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data["username"],
            email=validated_data["email"].lower(),
            password=validated_data["password"],
            name=validated_data["name"],
        )


class ProfileSerializer(serializers.ModelSerializer):
    username = serializers.RegexField(
        USERNAME_REGEX,
        min_length=3,
        max_length=150,
        required=False,
        error_messages={"invalid": "The username may only contain letters, numbers and underscores."},
    )
    student_id = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)

    class Meta:
        model = User
        fields = ["name", "username", "student_id"]
        extra_kwargs = {"name": {"required": False, "max_length": 255}}

    def _other_users(self):
        return User.objects.exclude(pk=self.instance.pk)

    def validate_username(self, value):
        if self._other_users().filter(username__iexact=value).exists():
            raise serializers.ValidationError("This username is already taken.")
        return value

    def validate_student_id(self, value):
        value = (value or "").strip() or None
        if value and self._other_users().filter(student_id=value).exists():
            raise serializers.ValidationError("This student ID is already in use.")
        return value


class AvatarSerializer(serializers.Serializer):
    avatar = serializers.FileField(
        validators=[validate_avatar_upload],
        error_messages={"required": "An avatar image is required."},
    )


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField()
