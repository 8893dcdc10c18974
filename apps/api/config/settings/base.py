# PATH: apps/api/config/settings/base.py

from pathlib import Path
from datetime import timedelta
import os

# ==================================================
# BASE
# ==================================================

BASE_DIR = Path(__file__).resolve().parents[4]

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DEBUG = True
ALLOWED_HOSTS = ["*"]

AUTH_USER_MODEL = "core.User"

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
SITE_NAME = os.getenv("SITE_NAME", "DIU QBank")


# ==================================================
# INSTALLED APPS
# ==================================================

INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Common / Core
    "apps.api.common",
    "apps.core",

    # support
    "apps.support.media",
    "apps.support.messaging",

    # Domain Apps
    "apps.domains.catalog",
    "apps.domains.questions",
    "apps.domains.reports",
    "apps.domains.contact",
    "apps.domains.contributors",

    # REST
    "rest_framework",
    "rest_framework_simplejwt",
    "rest_framework_simplejwt.token_blacklist",
    "django_filters",

    # Swagger
    "drf_yasg",

    # CORS
    "corsheaders",
]

# ==================================================
# MIDDLEWARE
# ==================================================

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",

    "apps.api.common.middleware.MaintenanceModeMiddleware",
    "apps.core.middleware.online_users.OnlineUsersMiddleware",
    "apps.api.common.middleware.UnhandledExceptionMiddleware",
]

# ==================================================
# URL / WSGI / ASGI
# ==================================================

ROOT_URLCONF = "apps.api.config.urls"

CSRF_FAILURE_VIEW = "apps.api.common.views.csrf_failure"

WSGI_APPLICATION = "apps.api.config.wsgi.application"
ASGI_APPLICATION = "apps.api.config.asgi.application"

# ==================================================
# TEMPLATES
# ==================================================

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

# ==================================================
# DATABASE
# ==================================================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("DB_NAME"),
        "USER": os.getenv("DB_USER"),
        "PASSWORD": os.getenv("DB_PASSWORD"),
        "HOST": os.getenv("DB_HOST"),
        "PORT": os.getenv("DB_PORT", "5432"),
    }
}

# ==================================================
# CACHE
# ==================================================

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "qbank-default",
    }
}

# ==================================================
# AUTH
# ==================================================

AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
]

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"
    },
]

# ==================================================
# GLOBAL
# ==================================================

LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Dhaka"

USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "storage" / "media"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ==================================================
# DRF
# ==================================================

REST_FRAMEWORK = {
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [
        # JWT first: unauthenticated API calls answer 401 with WWW-Authenticate
        "rest_framework_simplejwt.authentication.JWTAuthentication",
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PAGINATION_CLASS": "apps.api.common.pagination.PerPagePagination",
    "PAGE_SIZE": 15,
    "EXCEPTION_HANDLER": "apps.api.common.exceptions.api_exception_handler",
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.ScopedRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "login": "5/min",
        "uploads": "10/min",
        "votes": "30/min",
        "contact": "5/min",
    },
}

# ==================================================
# JWT
# ==================================================

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(days=30),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=60),
    "AUTH_HEADER_TYPES": ("Bearer",),
    "ROTATE_REFRESH_TOKENS": False,
    "BLACKLIST_AFTER_ROTATION": True,
}

# ==================================================
# CORS
# ==================================================

CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# ==================================================
# CELERY / REDIS
# ==================================================

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", f"{REDIS_URL}/0")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", f"{REDIS_URL}/1")

CELERY_ACCEPT_CONTENT = ["json"]
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"

CELERY_TASK_DEFAULT_QUEUE = "default"

CELERY_TIMEZONE = TIME_ZONE

CELERY_TASK_ACKS_LATE = True
CELERY_TASK_REJECT_ON_WORKER_LOST = True
CELERY_WORKER_PREFETCH_MULTIPLIER = 1

# ==================================================
# MAIL (admin notifications)
# ==================================================

EMAIL_BACKEND = os.getenv(
    "EMAIL_BACKEND",
    "django.core.mail.backends.console.EmailBackend",
)
DEFAULT_FROM_EMAIL = os.getenv("DEFAULT_FROM_EMAIL", "no-reply@diuqbank.com")

ADMIN_NOTIFICATION_EMAILS = [
    e.strip()
    for e in os.getenv("ADMIN_NOTIFICATION_EMAILS", "").split(",")
    if e.strip()
]

# ==================================================
# MAINTENANCE
# ==================================================

MAINTENANCE_MODE = os.getenv("MAINTENANCE_MODE", "0") == "1"

# ==================================================
# LOGGING
# ==================================================

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "[{levelname}] {asctime} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO"),
    },
}

# ------------------------------------------------------------------
# Cloudflare R2
# ------------------------------------------------------------------
R2_ACCESS_KEY = os.environ.get("R2_ACCESS_KEY")
R2_SECRET_KEY = os.environ.get("R2_SECRET_KEY")
R2_ENDPOINT = os.environ.get("R2_ENDPOINT")
R2_PUBLIC_BASE_URL = os.environ.get("R2_PUBLIC_BASE_URL")
R2_BUCKET = os.environ.get("R2_BUCKET")

# "r2" in deployments, "local" (default_storage) for development
MEDIA_DISK = os.getenv("MEDIA_DISK", "r2")

# ------------------------------------------------------------------
# PDF media
# ------------------------------------------------------------------
PDF_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
AVATAR_MAX_UPLOAD_BYTES = 2 * 1024 * 1024

PDF_TEMPORARY_URL_TTL_SECONDS = int(os.getenv("PDF_TEMPORARY_URL_TTL_SECONDS", "3600"))

WATERMARK_SITE_URL = os.getenv("WATERMARK_SITE_URL", "https://diuqbank.com")

PDF_COMPRESSION = {
    "enabled": os.getenv("PDF_COMPRESSION_ENABLED", "1") == "1",
    "ghostscript": {
        "compatibility_level": "1.4",
        # /screen, /ebook, /printer, /prepress
        "pdf_settings": os.getenv("PDF_COMPRESSION_PROFILE", "/prepress"),
        "color_image_resolution": 150,
        "grayscale_image_resolution": 150,
        "monochrome_image_resolution": 300,
        "timeout": 120,
    },
    "min_reduction_threshold": 0.1,
    "max_file_size": 50 * 1024 * 1024,
}

# ------------------------------------------------------------------
# Moderation
# ------------------------------------------------------------------
REPORT_REVIEW_THRESHOLD = int(os.getenv("REPORT_REVIEW_THRESHOLD", "3"))

QUESTION_INDEX_CACHE_TTL = 120
QUESTION_SHOW_CACHE_TTL = 300
ONLINE_USER_TTL_SECONDS = 5 * 60
