"""Aggregation of business events into per-admin notification records.

An aggregation pass reads five event sources, turns every qualifying event into
a candidate notification and inserts the candidates that are not stored yet.
Records are keyed on ``(user_id, type, message)``: an existing record is never
modified by a pass, so its read state and timestamp survive re-runs.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from django.conf import settings
from mongoengine.errors import NotUniqueError

from apps.utils import parse_object_id

from . import sources
from .exceptions import NotificationAggregationError
from .mongo_models import Notification
from .routes import link_for

logger = logging.getLogger(__name__)

ORDER_STATUS_ALERTS = ("Shipped", "Delivered", "Cancelled")

@dataclass(frozen=True)
class Candidate:
    type: str
    message: str
    created_at: datetime
    related_id: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        return self.type, self.message

@dataclass(frozen=True)
class SyncReport:
    candidates: int
    inserted: int
    failed: int

def order_candidates(orders) -> List[Candidate]:
    candidates = []
    for order in orders:
        related_id = str(order.id)
        candidates.append(
            Candidate("order", f"New order {order.order_id} received.", order.created_at, related_id)
        )
        if order.order_status in ORDER_STATUS_ALERTS:
            candidates.append(
                Candidate(
                    "order",
                    f"Order {order.order_id} has been {order.order_status}.",
                    order.updated_at,
                    related_id,
                )
            )
    return candidates

def stock_candidates(products) -> List[Candidate]:
    return [
        Candidate("stock", f"Only {product.stock} units left of {product.name}.", product.updated_at, str(product.id))
        for product in products
    ]

def review_candidates(reviews) -> List[Candidate]:
    return [
        Candidate(
            "review",
            f"New review submitted for {product_name or 'a product'}.",
            review.created_at,
            str(review.id),
        )
        for review, product_name in reviews
    ]

def user_candidates(users) -> List[Candidate]:
    return [
        Candidate("user", f"{user.name or 'A user'} just signed up.", user.created_at, str(user.id))
        for user in users
    ]

def message_candidates(contacts) -> List[Candidate]:
    return [
        Candidate("message", f"New support message from {contact.name}.", contact.created_at, str(contact.id))
        for contact in contacts
    ]

Reader = Tuple[Callable[[], Iterable], Callable[[Iterable], List[Candidate]]]

def default_readers() -> Dict[str, Reader]:
    return {
        "orders": (sources.recent_orders, order_candidates),
        "stock": (sources.low_stock_products, stock_candidates),
        "reviews": (sources.pending_reviews, review_candidates),
        "users": (sources.recent_users, user_candidates),
        "messages": (sources.unread_contacts, message_candidates),
    }

def unique_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    seen = set()
    unique = []
    for candidate in candidates:
        if candidate.key in seen:
            continue
        seen.add(candidate.key)
        unique.append(candidate)
    return unique

class NotificationAggregator:

    def __init__(self, max_workers: int | None = None, readers: Dict[str, Reader] | None = None):
        self.max_workers = max_workers or getattr(settings, "NOTIFICATION_AGGREGATION_WORKERS", 8)
        self.readers = readers if readers is not None else default_readers()

    def collect_candidates(self) -> List[Candidate]:
        """Read every source concurrently; any failed read fails the whole pass."""
        candidates: List[Candidate] = []
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="notification-read") as pool:
            futures = {name: pool.submit(read) for name, (read, _) in self.readers.items()}
            for name, future in futures.items():
                try:
                    snapshot = future.result()
                except Exception as exc:
                    logger.error("Notification source %s failed: %s", name, exc, exc_info=exc)
                    raise NotificationAggregationError(name) from exc
                build = self.readers[name][1]
                candidates.extend(build(snapshot))
        return unique_candidates(candidates)

    def upsert(self, user_id: str, candidate: Candidate) -> bool:
        """Insert ``candidate`` unless its dedup key is already stored.

        Returns True when a new record was created.
        """
        try:
            result = Notification.objects(
                user_id=user_id,
                type=candidate.type,
                message=candidate.message,
            ).update_one(
                upsert=True,
                full_result=True,
                set_on_insert__related_id=candidate.related_id,
                set_on_insert__link=link_for(candidate.type, candidate.related_id),
                set_on_insert__is_read=False,
                set_on_insert__created_at=candidate.created_at,
                set_on_insert__updated_at=datetime.utcnow(),
            )
        except NotUniqueError:
            # Another pass inserted the same key first.
            return False
        return result.upserted_id is not None

    def sync(self, user_id: str, candidates: List[Candidate]) -> SyncReport:
        """Upsert all candidates concurrently and wait for every one to settle."""
        inserted = failed = 0
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="notification-upsert") as pool:
            futures = {pool.submit(self.upsert, user_id, candidate): candidate for candidate in candidates}
            wait(futures)

        for future, candidate in futures.items():
            exc = future.exception()
            if exc is not None:
                failed += 1
                logger.error(
                    "Failed to upsert %s notification %r for user %s: %s",
                    candidate.type,
                    candidate.message,
                    user_id,
                    exc,
                    exc_info=exc,
                )
            elif future.result():
                inserted += 1

        return SyncReport(candidates=len(candidates), inserted=inserted, failed=failed)

    def list_feed(self, user_id: str) -> List[Notification]:
        return list(Notification.objects(user_id=user_id).order_by("-created_at"))

    def aggregate_and_list(self, user_id: str) -> List[Notification]:
        candidates = self.collect_candidates()
        report = self.sync(user_id, candidates)
        if report.failed:
            logger.warning(
                "%d of %d notification upserts failed for user %s",
                report.failed,
                report.candidates,
                user_id,
            )
        else:
            logger.debug("Notification pass for user %s inserted %d records", user_id, report.inserted)

        notifications = self.list_feed(user_id)
        if not notifications:
            return [Notification.placeholder()]
        return notifications

def mark_read(notification_id) -> Optional[Notification]:
    """Flag one notification as read; None when no record has that id."""
    object_id = parse_object_id(notification_id)
    if object_id is None:
        return None
    return Notification.objects(id=object_id).modify(
        new=True,
        set__is_read=True,
        set__updated_at=datetime.utcnow(),
    )
