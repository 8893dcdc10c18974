from rest_framework import serializers

from apps.domains.reports.models import UserReport, UserReportType


class UserReportSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(choices=UserReportType.choices)
    details = serializers.CharField(required=False, allow_blank=True, max_length=2000)

    class Meta:
        model = UserReport
        fields = [
            "id",
            "question_id",
            "type",
            "details",
            "reviewed",
            "created_at",
        ]
        read_only_fields = ["id", "question_id", "reviewed", "created_at"]
