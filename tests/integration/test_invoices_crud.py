"""
Invoices CRUD against a real PostgreSQL database
Runs only when TEST_DATABASE_URL points at a disposable database
"""

import os

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config.settings import Settings

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set"),
]


@pytest.fixture
def db_client():
    """Client with a live pool; the invoices table is emptied before and after each test"""
    settings = Settings(env="QA", database_url=TEST_DATABASE_URL, db_pool_min_size=1, db_pool_max_size=4)
    with TestClient(create_app(settings)) as client:
        _delete_all(client)
        yield client
        _delete_all(client)


def _delete_all(client: TestClient):
    for invoice in client.get("/invoices").json():
        client.delete(f"/invoices/{invoice['ID']}")


def _by_id(client: TestClient):
    return {invoice["ID"]: invoice for invoice in client.get("/invoices").json()}


@pytest.mark.crud
class TestInvoicesCRUD:

    def test_full_crud_cycle(self, db_client):
        invoice = {
            "ID": 1, "BillNo": "B1", "SlipNo": "S1", "CustomerID": "C1",
            "CustomerName": "Acme", "Products": "Widget", "Number": 2,
            "UnitPrice": 9.5, "Date": "2024-01-01"
        }

        # === CREATE ===
        assert db_client.post("/invoices", json=invoice).status_code == 200
        assert db_client.get("/invoices").json() == [invoice]

        # === UPDATE ===
        assert db_client.put("/invoices/1", json={"Number": 5}).status_code == 200
        assert db_client.get("/invoices").json() == [{**invoice, "Number": 5}]

        # === DELETE ===
        response = db_client.delete("/invoices/1")
        assert response.json()["result"]["meta"]["changes"] == 1
        assert db_client.get("/invoices").json() == []

    def test_round_trip_preserves_all_fields(self, db_client, data_factory):
        invoice = data_factory.generate_invoice()

        db_client.post("/invoices", json=invoice)

        assert _by_id(db_client)[invoice["ID"]] == invoice
        assert db_client.get(f"/invoices/{invoice['ID']}").json() == [invoice]

    def test_duplicate_id_fails_and_keeps_original(self, db_client, data_factory):
        original = data_factory.generate_invoice()
        db_client.post("/invoices", json=original)

        duplicate = data_factory.generate_invoice(ID=original["ID"], CustomerName="Impostor Ltd")
        response = db_client.post("/invoices", json=duplicate)

        assert response.status_code == 500
        assert "error" in response.json()
        assert _by_id(db_client)[original["ID"]] == original

    @pytest.mark.parametrize("field", ["ID", "BillNo", "Number", "Date"])
    def test_missing_field_writes_nothing(self, db_client, data_factory, field):
        invoice = data_factory.generate_invoice()
        invoice[field] = None

        response = db_client.post("/invoices", json=invoice)

        assert response.status_code == 400
        assert db_client.get("/invoices").json() == []

    def test_blank_string_patch_leaves_value(self, db_client, data_factory):
        invoice = data_factory.generate_invoice()
        db_client.post("/invoices", json=invoice)

        response = db_client.put(f"/invoices/{invoice['ID']}", json={"BillNo": "  ", "UnitPrice": 0})

        assert response.status_code == 200
        stored = _by_id(db_client)[invoice["ID"]]
        assert stored["BillNo"] == invoice["BillNo"]
        assert stored["UnitPrice"] == 0

    def test_empty_patch_writes_nothing(self, db_client, data_factory):
        invoice = data_factory.generate_invoice()
        db_client.post("/invoices", json=invoice)

        response = db_client.put(f"/invoices/{invoice['ID']}", json={"BillNo": "", "Products": " "})

        assert response.status_code == 400
        assert _by_id(db_client)[invoice["ID"]] == invoice

    def test_delete_missing_id_succeeds(self, db_client, data_factory):
        invoice = data_factory.generate_invoice()
        db_client.post("/invoices", json=invoice)

        response = db_client.delete("/invoices/123456789")

        assert response.status_code == 200
        assert response.json()["result"]["meta"]["changes"] == 0
        assert list(_by_id(db_client)) == [invoice["ID"]]

    def test_batch_commit_failures_are_independent(self, db_client, data_factory):
        """One request per changed grid row; a bad row does not affect the others"""
        first = data_factory.generate_invoice()
        second = data_factory.generate_invoice()
        db_client.post("/invoices", json=first)
        db_client.post("/invoices", json=second)

        responses = [
            db_client.put(f"/invoices/{first['ID']}", json={"CustomerName": "Updated Co"}),
            db_client.put(f"/invoices/{second['ID']}", json={"Number": "not a number"}),
            db_client.post("/invoices", json=first),
        ]

        assert [r.status_code for r in responses] == [200, 400, 500]
        stored = _by_id(db_client)
        assert stored[first["ID"]]["CustomerName"] == "Updated Co"
        assert stored[second["ID"]] == second

    def test_health_reports_connected(self, db_client):
        response = db_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"
