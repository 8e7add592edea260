from __future__ import annotations

from datetime import datetime, timedelta
from io import StringIO

from bson import ObjectId
from django.core.management import call_command

from apps.contacts.mongo_models import Contact
from apps.orders.mongo_models import Order
from apps.products.mongo_models import Product, ProductReview
from apps.properties.mongo_models import Property
from apps.users.mongo_models import User
from apps.utils.testing import MongoTestCase

BASE_URL = "/api/property"

def make_property(**overrides):
    values = {
        "title": "3 Bedroom Flat",
        "description": "Bright and airy.",
        "price": 1_500_000.0,
        "type": "Sale",
        "category": "Apartments",
        "bedrooms": 3,
        "country": "Nigeria",
        "state": "Lagos",
        "city": "Lekki",
        "address": "1 Admiralty Way",
        "features": ["Parking Space"],
        "images": ["https://images.example.com/1.jpg"],
    }
    values.update(overrides)
    prop = Property(**values)
    prop.save()
    return prop

def listing_payload(**overrides):
    payload = {
        "title": "Duplex with a view",
        "description": "Four bedrooms.",
        "price": "4500000",
        "type": "Sale",
        "category": "Terraced Duplexes",
        "bedrooms": 4,
        "country": "Nigeria",
        "state": "Lagos",
        "city": "Ikeja",
        "address": "9 Allen Avenue",
        "features": '["Gym", " ", "CCTV", "Gym"]',
        "images": ["https://images.example.com/a.jpg", "https://images.example.com/b.jpg"],
    }
    payload.update(overrides)
    return payload

class PropertyTestCase(MongoTestCase):
    documents = (Property, User)

    def setUp(self):
        super().setUp()
        self.admin = User(id=ObjectId(), name="Admin", email="admin@example.com", is_admin=True)
        self.member = User(id=ObjectId(), name="Member", email="member@example.com")

class PublicPropertyViewTests(PropertyTestCase):

    def test_list_returns_visible_listings_newest_first(self):
        now = datetime.utcnow()
        older = make_property(title="Older", created_at=now - timedelta(days=1))
        newer = make_property(title="Newer", created_at=now)
        make_property(title="Hidden", visible=False)

        response = self.api.get(f"{BASE_URL}/list")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([p["id"] for p in response.json()], [str(newer.id), str(older.id)])

    def test_search_filters_and_paginates(self):
        for idx in range(30):
            make_property(title=f"Flat {idx}", bedrooms=idx % 4)
        make_property(title="Mansion", bedrooms=3, visible=False)

        response = self.api.get(f"{BASE_URL}/search", {"bedrooms": "3", "page": "1"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["total"], 7)
        self.assertEqual(body["page"], 1)
        self.assertEqual(body["pages"], 1)
        self.assertEqual(len(body["properties"]), 7)

    def test_search_second_page(self):
        for idx in range(30):
            make_property(title=f"Flat {idx}", price=float(100_000 + idx))

        body = self.api.get(f"{BASE_URL}/search", {"page": "2", "sort": "asc price"}).json()

        self.assertEqual(body["total"], 30)
        self.assertEqual(body["pages"], 2)
        self.assertEqual([p["title"] for p in body["properties"]], [f"Flat {idx}" for idx in range(25, 30)])

    def test_retrieve(self):
        prop = make_property()

        response = self.api.get(f"{BASE_URL}/{prop.id}")

        self.assertEqual(response.status_code, 200)
        data = response.json()["property"]
        self.assertEqual(data["title"], "3 Bedroom Flat")
        self.assertEqual(data["features"], ["Parking Space"])

    def test_retrieve_missing_or_malformed_id(self):
        for pk in (str(ObjectId()), "nope"):
            response = self.api.get(f"{BASE_URL}/{pk}")
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.json(), {"success": False, "message": "Property not found"})

    def test_related(self):
        prop = make_property(category="Farmland", city="Ibadan")
        same_category = make_property(category="Farmland", city="Kano")
        same_city = make_property(category="Apartments", city="Ibadan")
        make_property(category="Apartments", city="Kano")
        make_property(category="Farmland", visible=False)

        response = self.api.get(f"{BASE_URL}/{prop.id}/related")

        self.assertEqual(response.status_code, 200)
        ids = {p["id"] for p in response.json()["properties"]}
        self.assertEqual(ids, {str(same_category.id), str(same_city.id)})

class AdminPropertyViewTests(PropertyTestCase):

    def test_admin_actions_require_authentication(self):
        prop = make_property()

        self.assertEqual(self.api.get(f"{BASE_URL}/admin-list").status_code, 401)
        self.assertEqual(self.api.post(f"{BASE_URL}/add", listing_payload(), format="json").status_code, 401)
        self.assertEqual(self.api.delete(f"{BASE_URL}/{prop.id}").status_code, 401)

    def test_admin_actions_are_forbidden_for_members(self):
        prop = make_property()
        self.api.force_authenticate(user=self.member)

        response = self.api.patch(f"{BASE_URL}/{prop.id}", {"visible": False}, format="json")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"error": "Forbidden"})
        prop.reload()
        self.assertTrue(prop.visible)

    def test_admin_list_includes_hidden_and_searches(self):
        make_property(title="Lekki Loft")
        make_property(title="Hidden Lekki Villa", visible=False)
        make_property(title="Abuja Office", city="Maitama", state="Abuja")
        self.api.force_authenticate(user=self.admin)

        body = self.api.get(f"{BASE_URL}/admin-list", {"search": "lekki"}).json()

        self.assertEqual(body["total"], 2)
        self.assertEqual(
            sorted(p["title"] for p in body["properties"]),
            ["Hidden Lekki Villa", "Lekki Loft"],
        )

    def test_admin_list_sort_and_limit(self):
        for price in (3.0, 1.0, 2.0):
            make_property(price=price)
        self.api.force_authenticate(user=self.admin)

        body = self.api.get(f"{BASE_URL}/admin-list", {"sort": "price-desc", "limit": "2"}).json()

        self.assertEqual(body["total"], 3)
        self.assertEqual([p["price"] for p in body["properties"]], [3.0, 2.0])

    def test_create(self):
        self.api.force_authenticate(user=self.admin)

        response = self.api.post(f"{BASE_URL}/add", listing_payload(), format="json")

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Property uploaded successfully with 2 images!")
        self.assertEqual(body["property"]["features"], ["Gym", "CCTV"])
        self.assertEqual(body["property"]["price"], 4500000.0)
        stored = Property.objects.get()
        self.assertEqual(stored.user_id, str(self.admin.id))
        self.assertTrue(stored.visible)

    def test_create_rejects_incomplete_listings(self):
        self.api.force_authenticate(user=self.admin)
        cases = [
            (listing_payload(city=""), "Please fill in all required fields."),
            (listing_payload(features="[]"), "Please add at least one feature."),
            (listing_payload(features="not json"), "Please add at least one feature."),
            (listing_payload(images=[]), "Please upload at least one image."),
        ]

        for payload, message in cases:
            response = self.api.post(f"{BASE_URL}/add", payload, format="json")
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json(), {"success": False, "message": message})

        self.assertEqual(Property.objects.count(), 0)

    def test_create_rejects_invalid_type(self):
        self.api.force_authenticate(user=self.admin)

        response = self.api.post(f"{BASE_URL}/add", listing_payload(type="Auction"), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("type", response.json()["error"])

    def test_update(self):
        prop = make_property()
        self.api.force_authenticate(user=self.admin)

        response = self.api.put(f"{BASE_URL}/{prop.id}", {"price": 2_000_000, "bedrooms": 5}, format="json")

        self.assertEqual(response.status_code, 200)
        prop.reload()
        self.assertEqual(prop.price, 2_000_000)
        self.assertEqual(prop.bedrooms, 5)
        self.assertEqual(prop.title, "3 Bedroom Flat")

    def test_toggle_visibility(self):
        prop = make_property()
        self.api.force_authenticate(user=self.admin)

        response = self.api.patch(f"{BASE_URL}/{prop.id}", {"visible": False}, format="json")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Property visibility set to false")
        prop.reload()
        self.assertFalse(prop.visible)

    def test_toggle_visibility_requires_boolean(self):
        prop = make_property()
        self.api.force_authenticate(user=self.admin)

        response = self.api.patch(f"{BASE_URL}/{prop.id}", {"visible": "no"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Missing 'visible' field")

    def test_delete(self):
        prop = make_property()
        self.api.force_authenticate(user=self.admin)

        response = self.api.delete(f"{BASE_URL}/{prop.id}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(Property.objects.count(), 0)
        self.assertEqual(self.api.delete(f"{BASE_URL}/{prop.id}").status_code, 404)

class SeedDemoDataCommandTests(MongoTestCase):
    documents = (Property, User, Product, ProductReview, Order, Contact)

    def test_seeds_listings_and_notification_sources(self):
        out = StringIO()

        call_command("seed_demo_data", "--properties", "5", "--seed", "7", stdout=out)

        self.assertEqual(Property.objects.count(), 5)
        self.assertEqual(Order.objects.count(), 12)
        self.assertEqual(Product.objects.count(), 3)
        self.assertEqual(ProductReview.objects.count(), 1)
        self.assertEqual(Contact.objects.count(), 1)
        admin = User.objects.get(email="admin@example.com")
        self.assertTrue(admin.is_admin)
        self.assertTrue(admin.check_password("Admin123!"))
        self.assertIn("Seeded 5 properties", out.getvalue())
