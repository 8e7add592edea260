"""Admin panel pages a notification points to, by notification type."""
from __future__ import annotations

from typing import Optional

NAVIGATION_ROUTES = {
    "order": "/admin/orders/{related_id}",
    "stock": "/admin/products/{related_id}",
    "user": "/admin/users/{related_id}",
    "review": "/admin/reviews/{related_id}",
    "message": "/admin/messages",
    "mail": "/admin/messages",
}

def link_for(type_: Optional[str], related_id: Optional[str]) -> Optional[str]:
    route = NAVIGATION_ROUTES.get(type_)
    if route is None:
        return None
    return route.format(related_id=related_id)
