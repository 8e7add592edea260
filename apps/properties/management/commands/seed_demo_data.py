import random
from datetime import datetime, timedelta

from django.core.management.base import BaseCommand

from apps.contacts.mongo_models import Contact
from apps.orders.mongo_models import ORDER_STATUSES, Order
from apps.products.mongo_models import Product, ProductReview
from apps.properties.mongo_models import PROPERTY_TYPES, Property
from apps.users.mongo_models import User

CITIES = [
    ("Lagos", "Lekki"),
    ("Lagos", "Ikeja"),
    ("Abuja", "Maitama"),
    ("Rivers", "Port Harcourt"),
    ("Oyo", "Ibadan"),
]

CATEGORIES = [
    "Detached Houses",
    "Apartments",
    "Terraced Duplexes",
    "Office Spaces",
    "Farmland",
    "Serviced Properties",
]

FEATURES = [
    "Swimming Pool",
    "24/7 Power",
    "Parking Space",
    "Gated Community",
    "Fitted Kitchen",
    "CCTV",
    "Gym",
]

class Command(BaseCommand):
    help = "Fill an empty database with demo listings and the events that feed admin notifications"

    def add_arguments(self, parser):
        parser.add_argument("--properties", type=int, default=30)
        parser.add_argument("--admin-email", default="admin@example.com")
        parser.add_argument("--admin-password", default="Admin123!")
        parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")

    def handle(self, *args, **options):
        rng = random.Random(options["seed"])
        now = datetime.utcnow()

        admin = User.objects(email=options["admin_email"]).first()
        if admin is None:
            admin = User(name="Site Admin", email=options["admin_email"], is_admin=True)
            admin.set_password(options["admin_password"])
            admin.save()

        for idx in range(options["properties"]):
            state, city = rng.choice(CITIES)
            Property(
                user_id=str(admin.id),
                title=f"{rng.randint(2, 6)} Bedroom {rng.choice(CATEGORIES)} in {city}",
                description="Demo listing.",
                price=float(rng.randint(50, 900) * 100_000),
                type=rng.choice(PROPERTY_TYPES),
                category=rng.choice(CATEGORIES),
                bedrooms=rng.randint(1, 6),
                bathrooms=rng.randint(1, 5),
                toilets=rng.randint(1, 6),
                area=float(rng.randint(80, 1200)),
                country="Nigeria",
                state=state,
                city=city,
                address=f"{rng.randint(1, 99)} Demo Street, {city}",
                features=rng.sample(FEATURES, k=3),
                images=[f"https://images.example.com/properties/{idx}.jpg"],
                created_at=now - timedelta(days=idx),
            ).save()

        products = []
        for name in ("Door Lock", "Smoke Detector", "Solar Panel"):
            product = Product(name=name, price=rng.randint(10, 500), stock=rng.randint(0, 12))
            product.save()
            products.append(product)

        for idx in range(12):
            Order(
                order_id=f"ORD-{1000 + idx}",
                order_status=rng.choice(ORDER_STATUSES),
                total_price=rng.randint(10, 500),
                created_at=now - timedelta(hours=idx),
            ).save()

        ProductReview(product_id=rng.choice(products).id, rating=4, comment="Works well.").save()
        Contact(name="Ada Obi", email="ada@example.com", subject="Viewing", message="Is the Lekki flat available?").save()

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {options['properties']} properties, {len(products)} products and 12 orders "
                f"(admin: {admin.email})."
            )
        )
