"""API test fixtures.

Every test gets a fresh container (new in-memory repositories and event
bus) and a TestClient running the real application lifespan.
"""

import pytest
from fastapi.testclient import TestClient

from invoice_approval.core.container import reset_container
from invoice_approval.main import app


@pytest.fixture
def client():
    """TestClient over a clean container."""
    reset_container()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    reset_container()


def submit_invoice(
    client: TestClient,
    invoice_number: str = "INV-2024-0001",
    amount: str = "1500.50",
    submitter_id: str = "user-1",
    supervisor_id: str = "sup-1",
):
    """POST /api/v1/invoices with a valid default body."""
    return client.post(
        "/api/v1/invoices",
        json={
            "invoice_number": invoice_number,
            "amount": amount,
            "submitter_id": submitter_id,
            "supervisor_id": supervisor_id,
        },
    )


def pending_approval_id(client: TestClient, **invoice_fields: str) -> str:
    """Submit an invoice and return its approval id."""
    invoice_id = submit_invoice(client, **invoice_fields).json()["invoice_id"]
    return client.get(f"/api/v1/invoices/{invoice_id}/approval").json()["id"]
