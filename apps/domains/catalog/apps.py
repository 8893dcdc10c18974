from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.domains.catalog"
    label = "catalog"
    verbose_name = "Catalog (departments / courses / semesters / exam types)"
