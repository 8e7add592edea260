from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("api/auth/", include("apps.users.auth_urls")),
    path("api/admin/", include("apps.users.admin_urls")),
    path("api/admin/", include("apps.notifications.urls")),
    path("api/property/", include("apps.properties.urls")),
]
