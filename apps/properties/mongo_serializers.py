from __future__ import annotations

from rest_framework import serializers

from .mongo_models import PROPERTY_TYPES, Property

REQUIRED_FIELDS = ("title", "description", "price", "country", "state", "city", "address", "category")

class PropertySerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    userId = serializers.CharField(source="user_id", read_only=True, allow_null=True)
    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    price = serializers.FloatField(min_value=0)
    type = serializers.ChoiceField(choices=PROPERTY_TYPES, required=False, allow_null=True)
    category = serializers.CharField(max_length=255)
    bedrooms = serializers.IntegerField(required=False, min_value=0, default=0)
    bathrooms = serializers.IntegerField(required=False, min_value=0, default=0)
    toilets = serializers.IntegerField(required=False, min_value=0, default=0)
    area = serializers.FloatField(required=False, min_value=0, default=0)
    country = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    city = serializers.CharField(max_length=100)
    address = serializers.CharField(max_length=500)
    features = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False, default=list)
    images = serializers.ListField(child=serializers.URLField(), required=False, default=list)
    videos = serializers.ListField(child=serializers.URLField(), required=False, default=list)
    visible = serializers.BooleanField(required=False, default=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    def get_id(self, obj):
        return str(obj.id)

    def validate_features(self, value):
        cleaned = []
        for feature in value:
            feature = feature.strip()
            if feature and feature not in cleaned:
                cleaned.append(feature)
        return cleaned

    def create(self, validated_data):
        return Property(**validated_data).save()

    def update(self, instance, validated_data):
        for key, value in validated_data.items():
            setattr(instance, key, value)
        instance.save()
        return instance

def missing_required_fields(data) -> list:
    return [field for field in REQUIRED_FIELDS if data.get(field) in (None, "")]
