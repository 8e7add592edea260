from rest_framework import serializers

class NotificationSerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    userId = serializers.CharField(source="user_id", allow_null=True, read_only=True)
    type = serializers.CharField(read_only=True)
    message = serializers.CharField(read_only=True)
    relatedId = serializers.CharField(source="related_id", allow_null=True, read_only=True)
    link = serializers.CharField(allow_null=True, read_only=True)
    isRead = serializers.BooleanField(source="is_read", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    def get_id(self, obj):
        return str(obj.id) if obj.id is not None else "placeholder"

class MarkReadSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
