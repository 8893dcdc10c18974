"""
Common API views
"""
from django.http import JsonResponse
from django.db import connection


def health_check(request):
    """
    Health check endpoint

    Returns:
        - 200: everything is fine
        - 503: database connection failed
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")

        return JsonResponse({
            "status": "healthy",
            "service": "qbank-api",
            "database": "connected",
        }, status=200)
    except Exception as e:
        return JsonResponse({
            "status": "unhealthy",
            "service": "qbank-api",
            "database": "disconnected",
            "error": str(e),
        }, status=503)


# --------------------------------------------------
# Django-level error handlers (non-DRF paths)
# --------------------------------------------------

def permission_denied(request, exception=None):
    return JsonResponse({"detail": "You do not have permission to access this page."}, status=403)


def page_not_found(request, exception=None):
    return JsonResponse({"detail": "Not found."}, status=404)


def server_error(request):
    return JsonResponse({"detail": "Server error."}, status=500)


def csrf_failure(request, reason=""):
    # 419 mirrors "page expired" for stale sessions
    return JsonResponse({"detail": "Page expired. Please refresh and try again."}, status=419)
