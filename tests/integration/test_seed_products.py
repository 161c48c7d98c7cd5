from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.management.commands.seed_products import SEED_PRODUCTS
from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestSeedProducts:
    def test_seeds_demo_products(self):
        out = StringIO()
        call_command("seed_products", stdout=out)
        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert f"products={len(SEED_PRODUCTS)}" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_products", stdout=StringIO())
        out = StringIO()
        call_command("seed_products", stdout=out)
        assert Product.objects.count() == len(SEED_PRODUCTS)
        assert f"skipped={len(SEED_PRODUCTS)}" in out.getvalue()

    def test_seeded_products_are_served(self, api_client):
        call_command("seed_products", stdout=StringIO())
        data = api_client.get("/api/products").json()["data"]
        assert len(data) == len(SEED_PRODUCTS)
        assert any(item["available"] is False for item in data)


class TestApiDocs:
    def test_schema_lists_product_routes(self, api_client):
        response = api_client.get("/docs/schema", HTTP_ACCEPT="application/json")
        assert response.status_code == 200
        assert b"/api/products" in response.content
