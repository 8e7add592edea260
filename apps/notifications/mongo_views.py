from __future__ import annotations

import logging

from mongoengine.errors import OperationError
from pymongo.errors import PyMongoError
from rest_framework import permissions, status
from rest_framework.views import APIView

from apps.utils import api_error, api_success

from .exceptions import NotificationAggregationError
from .mongo_serializers import MarkReadSerializer, NotificationSerializer
from .services import NotificationAggregator, mark_read

logger = logging.getLogger(__name__)

class AdminNotificationView(APIView):
    """Admin notification feed: ``GET`` lists, ``PATCH`` marks one record as read."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        user_id = str(request.user.id)
        try:
            notifications = NotificationAggregator().aggregate_and_list(user_id)
        except (NotificationAggregationError, PyMongoError, OperationError):
            logger.exception("Error fetching notifications for user %s", user_id)
            return api_error("Server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return api_success(NotificationSerializer(notifications, many=True).data)

    def patch(self, request):
        serializer = MarkReadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        notification_id = serializer.validated_data.get("id")
        if not notification_id:
            return api_error("Notification ID required", status_code=status.HTTP_400_BAD_REQUEST)

        try:
            notification = mark_read(notification_id)
        except (PyMongoError, OperationError):
            logger.exception("Error marking notification %s as read", notification_id)
            return api_error("Failed to mark as read", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if notification is None:
            return api_error("Notification not found", status_code=status.HTTP_404_NOT_FOUND)

        return api_success(NotificationSerializer(notification).data)
