"""Read-only queries against the collections that feed the admin notifications."""
from __future__ import annotations

from typing import List, Optional, Tuple

from apps.contacts.mongo_models import Contact
from apps.orders.mongo_models import Order
from apps.products.mongo_models import Product, ProductReview
from apps.users.mongo_models import User

RECENT_ORDER_LIMIT = 10
LOW_STOCK_THRESHOLD = 5
RECENT_USER_LIMIT = 5

def recent_orders(limit: int = RECENT_ORDER_LIMIT) -> List[Order]:
    return list(Order.objects.order_by("-created_at").limit(limit))

def low_stock_products(threshold: int = LOW_STOCK_THRESHOLD) -> List[Product]:
    return list(Product.objects(stock__lte=threshold))

def pending_reviews() -> List[Tuple[ProductReview, Optional[str]]]:
    """Unapproved reviews paired with the name of the reviewed product.

    The name is None when the product no longer exists.
    """
    reviews = list(ProductReview.objects(approved=False))
    product_ids = {review.product_id for review in reviews if review.product_id}
    names = {
        product.id: product.name
        for product in Product.objects(id__in=list(product_ids)).only("name")
    } if product_ids else {}
    return [(review, names.get(review.product_id)) for review in reviews]

def recent_users(limit: int = RECENT_USER_LIMIT) -> List[User]:
    return list(User.objects.order_by("-created_at").limit(limit))

def unread_contacts() -> List[Contact]:
    return list(Contact.objects(read=False, archived=False))
