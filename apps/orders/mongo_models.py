from __future__ import annotations

from datetime import datetime

import mongoengine as me
from mongoengine import fields

ORDER_STATUSES = ("Pending", "Processing", "Shipped", "Delivered", "Cancelled")

class Order(me.Document):

    meta = {
        "collection": "orders",
        "indexes": ["order_id", "-created_at", "order_status"],
        "strict": False,
    }

    order_id = fields.StringField(required=True, max_length=64, db_field="orderId")
    user_id = fields.ObjectIdField(null=True, db_field="userId")
    order_status = fields.StringField(default="Pending", choices=ORDER_STATUSES, db_field="orderStatus")
    total_price = fields.DecimalField(default=0.0, precision=2, db_field="totalPrice")

    created_at = fields.DateTimeField(default=datetime.utcnow, db_field="createdAt")
    updated_at = fields.DateTimeField(default=datetime.utcnow, db_field="updatedAt")

    def save(self, *args, **kwargs):
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"Order {self.order_id}"
