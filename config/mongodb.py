from __future__ import annotations

import logging

import certifi
import mongoengine
from django.conf import settings

logger = logging.getLogger(__name__)

def connect_mongodb() -> None:
    mongo_uri = getattr(settings, "MONGO_URI", "mongodb://localhost:27017/cusceda")
    db_name = getattr(settings, "MONGODB_DB_NAME", "cusceda")

    connect_kwargs = {
        "db": db_name,
        "host": mongo_uri,
        "alias": "default",
    }

    if getattr(settings, "MONGODB_MOCK", False):
        import mongomock

        connect_kwargs["host"] = "mongodb://localhost"
        connect_kwargs["mongo_client_class"] = mongomock.MongoClient
    elif mongo_uri.startswith("mongodb+srv://"):
        connect_kwargs["tlsCAFile"] = certifi.where()

    try:
        mongoengine.connect(**connect_kwargs)
        logger.info("Connected to MongoDB: %s", db_name)
    except Exception as e:
        logger.error("MongoDB connection error: %s", e)
        raise
