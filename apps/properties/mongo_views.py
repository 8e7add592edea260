from __future__ import annotations

import json
import logging
import re

from django.http import QueryDict
from rest_framework import permissions, response, status, viewsets

from apps.utils import api_error, api_success, get_pagination_params, paginate_queryset, parse_object_id

from .filters import SearchParams, filter_properties, paginate, related_properties
from .mongo_models import Property
from .mongo_serializers import PropertySerializer, missing_required_fields

logger = logging.getLogger(__name__)

ADMIN_SORTS = {
    "price-asc": "price",
    "price-desc": "-price",
    "newest": "-created_at",
}

ADMIN_ACTIONS = ("admin_list", "create", "update", "partial_update", "destroy")
LIST_FIELDS = ("images", "videos")

def _get_property(pk):
    object_id = parse_object_id(pk)
    if object_id is None:
        return None
    return Property.objects(id=object_id).first()

def _parse_features(raw):
    if isinstance(raw, str):
        try:
            raw = json.loads(raw or "[]")
        except ValueError:
            return []
    if not isinstance(raw, list):
        return []
    return [str(feature).strip() for feature in raw if str(feature).strip()]

def _payload(data) -> dict:
    if isinstance(data, QueryDict):
        return {
            key: data.getlist(key) if key in LIST_FIELDS else data.get(key)
            for key in data.keys()
        }
    return dict(data)

class PropertyViewSet(viewsets.ViewSet):

    def get_permissions(self):
        if self.action in ADMIN_ACTIONS:
            return [permissions.IsAdminUser()]
        return [permissions.AllowAny()]

    def list(self, request):
        properties = Property.objects(visible=True).order_by("-created_at")
        return response.Response(PropertySerializer(properties, many=True).data)

    def search(self, request):
        params = SearchParams.from_query(request.query_params)
        properties = list(Property.objects(visible=True).order_by("-created_at"))
        filtered = filter_properties(properties, params)
        page_items, total_pages = paginate(filtered, params.page)
        return api_success(
            properties=PropertySerializer(page_items, many=True).data,
            total=len(filtered),
            page=params.page,
            pages=total_pages,
        )

    def admin_list(self, request):
        queryset = Property.objects.all()

        search = request.query_params.get("search")
        if search:
            pattern = re.escape(search)
            queryset = queryset.filter(
                __raw__={"$or": [
                    {"title": {"$regex": pattern, "$options": "i"}},
                    {"city": {"$regex": pattern, "$options": "i"}},
                    {"state": {"$regex": pattern, "$options": "i"}},
                    {"category": {"$regex": pattern, "$options": "i"}},
                ]}
            )

        property_type = request.query_params.get("type")
        if property_type:
            queryset = queryset.filter(type=property_type)

        queryset = queryset.order_by(ADMIN_SORTS.get(request.query_params.get("sort"), "created_at"))

        page, limit = get_pagination_params(request)
        properties, total_count, _ = paginate_queryset(queryset, page, limit)
        return api_success(
            properties=PropertySerializer(properties, many=True).data,
            total=total_count,
        )

    def retrieve(self, request, pk=None):
        prop = _get_property(pk)
        if prop is None:
            return api_error(None, status_code=status.HTTP_404_NOT_FOUND, message="Property not found")
        return api_success(property=PropertySerializer(prop).data)

    def related(self, request, pk=None):
        prop = _get_property(pk)
        if prop is None:
            return api_error(None, status_code=status.HTTP_404_NOT_FOUND, message="Property not found")
        candidates = Property.objects(
            visible=True,
            id__ne=prop.id,
            __raw__={"$or": [{"category": prop.category}, {"city": prop.city}]},
        ).order_by("-created_at")
        return api_success(properties=PropertySerializer(related_properties(prop, candidates), many=True).data)

    def create(self, request):
        data = _payload(request.data)
        if missing_required_fields(data):
            return api_error(None, message="Please fill in all required fields.")

        features = _parse_features(data.get("features"))
        if not features:
            return api_error(None, message="Please add at least one feature.")
        data["features"] = features

        images = data.get("images") or []
        if isinstance(images, str):
            images = [images]
        if not images:
            return api_error(None, message="Please upload at least one image.")
        data["images"] = images

        serializer = PropertySerializer(data=data)
        serializer.is_valid(raise_exception=True)
        prop = serializer.save(user_id=str(request.user.id))
        logger.info("Property %s created by %s", prop.id, request.user.id)

        return api_success(
            message=f"Property uploaded successfully with {len(prop.images)} images!",
            property=PropertySerializer(prop).data,
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):
        prop = _get_property(pk)
        if prop is None:
            return api_error(None, status_code=status.HTTP_404_NOT_FOUND, message="Property not found")

        serializer = PropertySerializer(prop, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        prop = serializer.save()
        return api_success(property=PropertySerializer(prop).data)

    def partial_update(self, request, pk=None):
        visible = request.data.get("visible")
        if not isinstance(visible, bool):
            return api_error(None, message="Missing 'visible' field")

        prop = _get_property(pk)
        if prop is None:
            return api_error(None, status_code=status.HTTP_404_NOT_FOUND, message="Not found")

        prop.visible = visible
        prop.save()
        return api_success(
            message=f"Property visibility set to {'true' if visible else 'false'}",
            property=PropertySerializer(prop).data,
        )

    def destroy(self, request, pk=None):
        prop = _get_property(pk)
        if prop is None:
            return api_error(None, status_code=status.HTTP_404_NOT_FOUND, message="Not found")

        prop.delete()
        logger.info("Property %s deleted by %s", pk, request.user.id)
        return api_success(message="Property deleted")
