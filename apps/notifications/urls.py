from django.urls import re_path

from .mongo_views import AdminNotificationView

urlpatterns = [
    re_path(r"^notifications/?$", AdminNotificationView.as_view(), name="admin-notifications"),
]
