from __future__ import annotations

from datetime import datetime

import bcrypt
import mongoengine as me
from mongoengine import fields

class User(me.Document):

    meta = {
        "collection": "users",
        "indexes": ["email", "-created_at"],
        "strict": False,
    }

    name = fields.StringField(db_field="name")
    email = fields.EmailField(required=True, unique=True, db_field="email")
    password = fields.StringField(required=False, db_field="password")
    is_admin = fields.BooleanField(default=False, required=True, db_field="isAdmin")
    is_active = fields.BooleanField(default=True, required=True, db_field="isActive")

    created_at = fields.DateTimeField(default=datetime.utcnow, db_field="createdAt")
    updated_at = fields.DateTimeField(default=datetime.utcnow, db_field="updatedAt")

    def save(self, *args, **kwargs):
        self.updated_at = datetime.utcnow()
        return super().save(*args, **kwargs)

    def check_password(self, raw_password: str) -> bool:
        if not self.password:
            return False
        return bcrypt.checkpw(raw_password.encode("utf-8"), self.password.encode("utf-8"))

    def set_password(self, raw_password: str) -> None:
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(raw_password.encode("utf-8"), salt)
        self.password = hashed.decode("utf-8")

    @property
    def is_staff(self) -> bool:
        return self.is_admin

    @property
    def is_superuser(self) -> bool:
        return self.is_admin

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_anonymous(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name or self.email
