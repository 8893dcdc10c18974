# apps/api/celery.py

from celery import Celery

# DJANGO_SETTINGS_MODULE is injected by the caller (manage.py, wsgi, worker env)

app = Celery("qbank")

app.config_from_object(
    "django.conf:settings",
    namespace="CELERY",
)

# discover tasks.py modules of INSTALLED_APPS
app.autodiscover_tasks()
