"""Polling client for the admin notification feed.

The client loads the feed once, then re-fetches it on a fixed interval. Every
poll replaces the whole list; identifiers that were not present in the previous
poll raise one combined alert.
"""
from __future__ import annotations

import enum
import logging
import threading
from typing import Callable, Iterable, List, Optional

import requests

from .routes import link_for

logger = logging.getLogger(__name__)

POLL_INTERVAL = 30
FEED_PATH = "/api/admin/notifications"

class FeedState(enum.Enum):
    LOADING = "loading"
    READY = "ready"

def diff_new_ids(previous: frozenset, notifications: Iterable[dict]) -> frozenset:
    return frozenset(n.get("id") for n in notifications) - previous

def alert_message(count: int) -> str:
    return f"You have {count} new notification(s)!"

def navigation_path(notification: dict) -> Optional[str]:
    return link_for(notification.get("type"), notification.get("relatedId"))

class NotificationFeedClient:

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        session: requests.Session | None = None,
        poll_interval: float = POLL_INTERVAL,
        on_alert: Callable[[str], None] | None = None,
        on_navigate: Callable[[str], None] | None = None,
        timeout: float = 10.0,
    ):
        self.url = base_url.rstrip("/") + FEED_PATH
        self.session = session or requests.Session()
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"
        self.poll_interval = poll_interval
        self.timeout = timeout
        self.on_alert = on_alert or (lambda message: logger.info(message))
        self.on_navigate = on_navigate

        self.state = FeedState.LOADING
        self.notifications: List[dict] = []
        self.seen_ids: frozenset = frozenset()

        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def fetch(self) -> Optional[List[dict]]:
        """Return the current feed, or None when the request failed."""
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Notification poll failed: %s", exc)
            return None

        if not payload.get("success"):
            logger.warning("Notification poll rejected (%s): %s", response.status_code, payload.get("error"))
            return None
        return payload.get("data") or []

    def poll(self, notify: bool = True) -> frozenset:
        """Run one poll cycle and return the ids that were new in it.

        A failed fetch leaves the rendered list and the seen ids untouched.
        """
        notifications = self.fetch()
        if notifications is None:
            self.state = FeedState.READY
            return frozenset()

        new_ids = diff_new_ids(self.seen_ids, notifications)
        if notify and new_ids:
            self.on_alert(alert_message(len(new_ids)))

        self.seen_ids = frozenset(n.get("id") for n in notifications)
        self.notifications = notifications
        self.state = FeedState.READY
        return new_ids

    def start(self) -> None:
        self.poll(notify=False)
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="notification-poller", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.timeout)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self.poll_interval):
            self.poll(notify=True)

    def mark_read(self, notification_id: str) -> bool:
        try:
            response = self.session.patch(self.url, json={"id": notification_id}, timeout=self.timeout)
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error marking notification %s as read: %s", notification_id, exc)
            return False

        if not payload.get("success"):
            logger.error("Failed to mark notification %s as read: %s", notification_id, payload.get("error"))
            return False
        return True

    def open(self, notification: dict) -> Optional[str]:
        """Mark ``notification`` read locally and remotely, then navigate to it.

        The local flag is not rolled back when the remote call fails.
        """
        notification_id = notification.get("id")
        self.notifications = [
            {**n, "isRead": True} if n.get("id") == notification_id else n
            for n in self.notifications
        ]
        self.mark_read(notification_id)

        path = navigation_path(notification)
        if path is None:
            logger.info("No action defined for notification type %s", notification.get("type"))
        elif self.on_navigate is not None:
            self.on_navigate(path)
        return path
