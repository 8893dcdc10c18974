from django.apps import AppConfig


class MediaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.support.media"
    label = "media"
    verbose_name = "Media library"

    def ready(self):
        import apps.support.media.signals  # noqa: F401
