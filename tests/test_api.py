"""
HTTP-level tests for the FastAPI app.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.store import store
from scripts.seed_data import seed


@pytest.fixture
def client():
    store.clear()
    seed(store)
    yield TestClient(app)
    store.clear()


def payload(seller_id="S-1", sku="A"):
    return {
        "sellers": [{"id": "S-1", "first_name": "Ann", "last_name": "Lee"}],
        "products": [{"sku": "A", "purchase_price": 10}],
        "purchase_records": [{
            "seller_id": seller_id,
            "total_amount": 50,
            "items": [{"sku": sku, "quantity": 1, "discount": 0, "sale_price": 50}],
        }],
    }


class TestSellers:
    def test_list_sellers(self, client):
        resp = client.get("/api/v1/sellers")
        assert resp.status_code == 200
        assert len(resp.json()["sellers"]) == 5

    def test_unknown_seller_404(self, client):
        assert client.get("/api/v1/sellers/nobody").status_code == 404
        assert client.get("/api/v1/sellers/nobody/report").status_code == 404

    def test_seller_report_row(self, client):
        resp = client.get("/api/v1/sellers/seller_1/report")
        assert resp.status_code == 200
        body = resp.json()
        assert body["seller_id"] == "seller_1"
        assert body["total"] == 5
        assert 0 <= body["rank"] < 5


class TestReports:
    def test_report_over_store(self, client):
        resp = client.get("/api/v1/reports/sales")
        assert resp.status_code == 200
        rows = resp.json()["report"]
        assert len(rows) == 5
        profits = [row["profit"] for row in rows]
        assert profits == sorted(profits, reverse=True)

    def test_report_over_posted_dataset(self, client):
        resp = client.post("/api/v1/reports/sales", json=payload())
        assert resp.status_code == 200
        [row] = resp.json()["report"]
        assert row["name"] == "Ann Lee"
        assert row["revenue"] == 50
        assert row["profit"] == 40
        assert row["bonus"] == 6
        assert row["top_products"] == [{"sku": "A", "quantity": 1}]

    def test_invalid_input_is_422(self, client):
        body = payload()
        body["products"] = []
        resp = client.post("/api/v1/reports/sales", json=body)
        assert resp.status_code == 422
        assert "products" in resp.json()["detail"]

    def test_unknown_product_is_422(self, client):
        resp = client.post("/api/v1/reports/sales", json=payload(sku="ZZZ"))
        assert resp.status_code == 422
        assert "ZZZ" in resp.json()["detail"]

    def test_empty_store_is_422(self, client):
        store.clear()
        assert client.get("/api/v1/reports/sales").status_code == 422


class TestAdmin:
    def test_reseed(self, client):
        store.clear()
        resp = client.post("/api/v1/admin/seed")
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "seeded",
            "sellers": 5,
            "products": 20,
            "purchase_records": 300,
        }
