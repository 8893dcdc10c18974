from rest_framework import serializers


class ContactFormSerializer(serializers.Serializer):
    name = serializers.CharField(
        max_length=255,
        error_messages={
            "required": "Please provide your name.",
            "blank": "Please provide your name.",
            "max_length": "Your name cannot exceed 255 characters.",
        },
    )
    email = serializers.EmailField(
        max_length=255,
        error_messages={
            "required": "Please provide your email address.",
            "blank": "Please provide your email address.",
            "invalid": "Please provide a valid email address.",
            "max_length": "Your email cannot exceed 255 characters.",
        },
    )
    message = serializers.CharField(
        min_length=10,
        max_length=5000,
        error_messages={
            "required": "Please provide a message.",
            "blank": "Please provide a message.",
            "min_length": "Your message must be at least 10 characters.",
            "max_length": "Your message cannot exceed 5000 characters.",
        },
    )
