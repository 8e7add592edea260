from __future__ import annotations

from datetime import datetime

import mongoengine as me
from mongoengine import fields

PROPERTY_TYPES = ("Sale", "Rent", "Shortlet")

class Property(me.Document):

    meta = {
        "collection": "properties",
        "indexes": ["type", "category", "city", "state", "-created_at", "visible"],
        "strict": False,
    }

    user_id = fields.StringField(db_field="userId")
    title = fields.StringField(required=True, max_length=255)
    description = fields.StringField(required=True)
    price = fields.FloatField(required=True, min_value=0)
    type = fields.StringField(choices=PROPERTY_TYPES, null=True)
    category = fields.StringField(required=True, max_length=255)

    bedrooms = fields.IntField(default=0, min_value=0)
    bathrooms = fields.IntField(default=0, min_value=0)
    toilets = fields.IntField(default=0, min_value=0)
    area = fields.FloatField(default=0, min_value=0)

    country = fields.StringField(required=True, max_length=100)
    state = fields.StringField(required=True, max_length=100)
    city = fields.StringField(required=True, max_length=100)
    address = fields.StringField(required=True, max_length=500)

    features = fields.ListField(fields.StringField(), default=list)
    images = fields.ListField(fields.StringField(), default=list)
    videos = fields.ListField(fields.StringField(), default=list)
    visible = fields.BooleanField(default=True)

    created_at = fields.DateTimeField(default=datetime.utcnow, db_field="createdAt")
    updated_at = fields.DateTimeField(default=datetime.utcnow, db_field="updatedAt")

    def save(self, *args, **kwargs):
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.title
