from django.contrib.auth.models import AbstractUser, Group, Permission
from django.contrib.contenttypes.fields import GenericRelation
from django.db import models

from apps.support.media.mixins import HasMedia


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(HasMedia, AbstractUser):
    """
    Custom User model
    - AUTH_USER_MODEL = core.User
    - login by email, username is the public handle
    - avatar stored in the "avatar" media collection
    """

    AVATAR_COLLECTION = "avatar"

    name = models.CharField(max_length=255, blank=True, default="")
    email = models.EmailField(unique=True)
    student_id = models.CharField(max_length=64, unique=True, blank=True, null=True)

    # avoid reverse accessor clashes with auth.User
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    media = GenericRelation("media.MediaFile")

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username

    @property
    def avatar_url(self):
        media = self.get_first_media(self.AVATAR_COLLECTION)
        return media.get_full_url() if media else None
