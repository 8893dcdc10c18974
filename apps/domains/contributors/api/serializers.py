from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class ContributorSerializer(serializers.ModelSerializer):
    submissions_count = serializers.IntegerField(read_only=True)
    total_views = serializers.IntegerField(read_only=True)
    avatar_url = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["name", "username", "avatar_url", "submissions_count", "total_views"]

    def get_avatar_url(self, obj):
        return obj.avatar_url
