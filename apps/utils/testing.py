from __future__ import annotations

from django.test import SimpleTestCase
from rest_framework.test import APIClient

class MongoTestCase(SimpleTestCase):
    """Test case that starts every test with empty collections.

    The connection is the mongomock client opened by ``config.test_settings``.
    """

    documents: tuple = ()

    def setUp(self):
        super().setUp()
        for document in self.documents:
            document.drop_collection()
        self.api = APIClient()
