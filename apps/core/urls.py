# apps/core/urls.py

from django.urls import path

from apps.core.views import (
    AvatarView,
    LoginView,
    LogoutView,
    RegisterView,
    UserView,
)

urlpatterns = [
    path("register/", RegisterView.as_view(), name="auth-register"),
    path("login/", LoginView.as_view(), name="auth-login"),
    path("logout/", LogoutView.as_view(), name="auth-logout"),
    path("user/", UserView.as_view(), name="auth-user"),
    path("user/avatar/", AvatarView.as_view(), name="auth-user-avatar"),
]
