from django.apps import AppConfig


class ContributorsConfig(AppConfig):
    name = "apps.domains.contributors"
    label = "contributors"
    verbose_name = "Contributors"
