from __future__ import annotations

from rest_framework import serializers

from .mongo_models import User

class UserSerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.EmailField()
    isAdmin = serializers.BooleanField(source="is_admin", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    def get_id(self, obj):
        return str(obj.id)

class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)

    def validate_email(self, value):
        if User.objects(email=value).first():
            raise serializers.ValidationError("Email is already registered.")
        return value

    def create(self, validated_data):
        password = validated_data.pop("password")
        name = validated_data.get("name") or validated_data["email"].split("@", 1)[0]
        user = User(name=name, email=validated_data["email"])
        user.set_password(password)
        user.save()
        return user

class AdminPasswordSerializer(serializers.Serializer):
    password = serializers.CharField(required=False, allow_blank=True, default="")
