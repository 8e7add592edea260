from django.urls import re_path

from .auth_views_mongo import VerifyAdminPasswordView

urlpatterns = [
    re_path(r"^verify-admin-password/?$", VerifyAdminPasswordView.as_view(), name="verify-admin-password"),
]
