from __future__ import annotations

from .settings import *  # noqa: F401,F403

SECRET_KEY = "test-secret-key"
DEBUG = False

MONGODB_MOCK = True
MONGODB_DB_NAME = "cusceda_test"

SUPER_ADMIN_PASSWORD = "let-me-in"

# mongomock is not thread-safe, keep the pool to one worker.
NOTIFICATION_AGGREGATION_WORKERS = 1

LOGGING["root"]["level"] = "WARNING"  # noqa: F405
