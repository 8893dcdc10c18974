#apps/core/permissions.py

from rest_framework.permissions import BasePermission


class IsOwner(BasePermission):
    """
    Object-level: obj.user must be the requester.
    """
    message = "You do not own this resource."

    def has_object_permission(self, request, view, obj):
        return getattr(obj, "user_id", None) == getattr(request.user, "id", None)
