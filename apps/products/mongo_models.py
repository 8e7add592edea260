from __future__ import annotations

from datetime import datetime

import mongoengine as me
from mongoengine import fields

class Product(me.Document):

    meta = {
        "collection": "products",
        "indexes": ["name", "stock"],
        "strict": False,
    }

    name = fields.StringField(required=True, max_length=255)
    description = fields.StringField()
    price = fields.DecimalField(default=0.0, precision=2)
    stock = fields.IntField(default=0)
    images = fields.ListField(fields.StringField(), default=list)

    created_at = fields.DateTimeField(default=datetime.utcnow, db_field="createdAt")
    updated_at = fields.DateTimeField(default=datetime.utcnow, db_field="updatedAt")

    def save(self, *args, **kwargs):
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name

class ProductReview(me.Document):

    meta = {
        "collection": "reviews",
        "indexes": ["product_id", "approved", "created_at"],
        "strict": False,
    }

    product_id = fields.ObjectIdField(required=True, db_field="productId")
    user_id = fields.ObjectIdField(null=True, db_field="userId")
    rating = fields.IntField(min_value=1, max_value=5, default=5)
    comment = fields.StringField(default="")
    approved = fields.BooleanField(default=False)

    created_at = fields.DateTimeField(default=datetime.utcnow, db_field="createdAt")
    updated_at = fields.DateTimeField(default=datetime.utcnow, db_field="updatedAt")

    def save(self, *args, **kwargs):
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"Review for {self.product_id}"
