from __future__ import annotations

from datetime import datetime

import mongoengine as me
from mongoengine import fields

class Contact(me.Document):
    """A message sent through the public contact form."""

    meta = {
        "collection": "contacts",
        "indexes": [("read", "archived"), "-created_at"],
        "strict": False,
    }

    name = fields.StringField(required=True, max_length=255)
    email = fields.EmailField()
    subject = fields.StringField(max_length=255, default="")
    message = fields.StringField(default="")
    read = fields.BooleanField(default=False)
    archived = fields.BooleanField(default=False)

    created_at = fields.DateTimeField(default=datetime.utcnow, db_field="createdAt")
    updated_at = fields.DateTimeField(default=datetime.utcnow, db_field="updatedAt")

    def save(self, *args, **kwargs):
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"Message from {self.name}"
