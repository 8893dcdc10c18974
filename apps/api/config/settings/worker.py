# apps/api/config/settings/worker.py

from .base import *
import os

# the worker needs no URLConf
ROOT_URLCONF = None

# ==================================================
# Celery (required on workers)
# ==================================================

CELERY_BROKER_URL = os.environ["CELERY_BROKER_URL"]
CELERY_RESULT_BACKEND = os.environ["CELERY_RESULT_BACKEND"]

# ==================================================
# PDF conversion
# ==================================================

# Ghostscript is installed on the worker image only
PDF_COMPRESSION["enabled"] = os.getenv("PDF_COMPRESSION_ENABLED", "1") == "1"

MEDIA_DISK = "r2"
