# apps/core/middleware/online_users.py
import hashlib
import logging

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework.exceptions import AuthenticationFailed

from apps.core.services.online_users import OnlineUsersService

logger = logging.getLogger(__name__)


def _guest_fingerprint(request) -> str:
    session_key = getattr(getattr(request, "session", None), "session_key", None)
    if session_key:
        return session_key
    raw = "{}|{}".format(
        request.META.get("REMOTE_ADDR", ""),
        request.META.get("HTTP_USER_AGENT", ""),
    )
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()


class OnlineUsersMiddleware:
    """
    Record the visitor as online for ONLINE_USER_TTL_SECONDS.
    Session users come from AuthenticationMiddleware, API users from the bearer token.
    """

    SKIP_PREFIXES = ("/admin/jsi18n/", "/static/", "/health/")

    def __init__(self, get_response):
        self.get_response = get_response
        self.service = OnlineUsersService()
        self.jwt = JWTAuthentication()

    def __call__(self, request):
        if not request.path.startswith(self.SKIP_PREFIXES):
            self._track(request)
        return self.get_response(request)

    def _resolve_user_id(self, request):
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            return user.pk
        try:
            result = self.jwt.authenticate(request)
        except (InvalidToken, TokenError, AuthenticationFailed):
            return None
        return result[0].pk if result else None

    def _track(self, request):
        user_id = self._resolve_user_id(request)
        if user_id:
            self.service.track_user(user_id)
        else:
            self.service.track_guest(_guest_fingerprint(request))
