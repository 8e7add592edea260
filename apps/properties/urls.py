from django.urls import re_path

from .mongo_views import PropertyViewSet

property_detail = PropertyViewSet.as_view({
    "get": "retrieve",
    "put": "update",
    "patch": "partial_update",
    "delete": "destroy",
})

urlpatterns = [
    re_path(r"^list/?$", PropertyViewSet.as_view({"get": "list"}), name="property-list"),
    re_path(r"^search/?$", PropertyViewSet.as_view({"get": "search"}), name="property-search"),
    re_path(r"^admin-list/?$", PropertyViewSet.as_view({"get": "admin_list"}), name="property-admin-list"),
    re_path(r"^add/?$", PropertyViewSet.as_view({"post": "create"}), name="property-add"),
    re_path(r"^(?P<pk>[0-9a-fA-F]{24})/related/?$", PropertyViewSet.as_view({"get": "related"}), name="property-related"),
    re_path(r"^(?P<pk>[^/.]+)/?$", property_detail, name="property-detail"),
]
