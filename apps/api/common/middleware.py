# apps/api/common/middleware.py
# Unhandled view exceptions become a 500 JSON body.
# Responses built in process_exception skip CorsMiddleware, so CORS headers are added here.
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def _add_cors_headers_to_response(request, response):
    """
    Add CORS headers to responses built outside the normal chain
    so browsers can read 500/503 bodies.
    """
    origin = (request.META.get("HTTP_ORIGIN") or "").strip()
    allowed = getattr(settings, "CORS_ALLOWED_ORIGINS", []) or []
    if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False) and origin:
        response["Access-Control-Allow-Origin"] = origin
    elif origin and origin in allowed:
        response["Access-Control-Allow-Origin"] = origin
    elif allowed:
        response["Access-Control-Allow-Origin"] = allowed[0]
    if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
        response["Access-Control-Allow-Credentials"] = "true"
    return response


class UnhandledExceptionMiddleware:
    """Turn unhandled exceptions into a 500 JSON body with CORS headers attached."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception("Unhandled exception: %s", exception)
        body = {"detail": "Server error."}
        if settings.DEBUG:
            body["error"] = str(exception)
        resp = JsonResponse(body, status=500)
        return _add_cors_headers_to_response(request, resp)


class MaintenanceModeMiddleware:
    """503 for everything except admin and health while MAINTENANCE_MODE is on."""

    ALLOWED_PREFIXES = ("/admin/", "/health/")

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if getattr(settings, "MAINTENANCE_MODE", False) and not request.path.startswith(self.ALLOWED_PREFIXES):
            resp = JsonResponse(
                {"detail": "Service is temporarily unavailable for maintenance."},
                status=503,
            )
            resp["Retry-After"] = "120"
            return _add_cors_headers_to_response(request, resp)
        return self.get_response(request)
