from django.urls import re_path

from .auth_views_mongo import (
    MongoEngineTokenObtainPairView,
    MongoEngineTokenRefreshView,
    RegisterView,
)

urlpatterns = [
    re_path(r"^register/?$", RegisterView.as_view(), name="auth-register"),
    re_path(r"^login/?$", MongoEngineTokenObtainPairView.as_view(), name="auth-login"),
    re_path(r"^refresh/?$", MongoEngineTokenRefreshView.as_view(), name="auth-refresh"),
]
