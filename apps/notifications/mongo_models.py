from __future__ import annotations

from datetime import datetime

import mongoengine as me
from mongoengine import fields

NOTIFICATION_TYPES = ("order", "stock", "review", "user", "message", "system")

class Notification(me.Document):

    meta = {
        "collection": "notifications",
        "indexes": [
            {"fields": ["user_id", "type", "message"], "unique": True},
            ("user_id", "-created_at"),
            "is_read",
        ],
        "strict": False,
    }

    user_id = fields.StringField(required=True, db_field="userId")
    type = fields.StringField(required=True, choices=NOTIFICATION_TYPES)
    message = fields.StringField(required=True)
    related_id = fields.StringField(null=True, db_field="relatedId")
    link = fields.StringField(null=True)
    is_read = fields.BooleanField(default=False, db_field="isRead")

    created_at = fields.DateTimeField(default=datetime.utcnow, db_field="createdAt")
    updated_at = fields.DateTimeField(default=datetime.utcnow, db_field="updatedAt")

    def save(self, *args, **kwargs):
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    @classmethod
    def placeholder(cls) -> "Notification":
        """Unsaved stand-in shown when a feed is empty."""
        return cls(
            type="info",
            message="No notifications yet.",
            is_read=True,
            created_at=datetime.utcnow(),
        )

    def __str__(self) -> str:
        return f"[{self.type}] {self.message}"
