import pytest

from app.services.customer_service import CustomerService


@pytest.mark.asyncio
async def test_unhandled_error_is_internal_server_error(lenient_client, monkeypatch):
    async def broken_list(self):
        raise RuntimeError("storage unavailable")

    monkeypatch.setattr(CustomerService, "list_customers", broken_list)

    resp = await lenient_client.get("/api/v1/customers")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}


@pytest.mark.asyncio
async def test_failed_request_rolls_back_its_writes(lenient_client, customer_id, monkeypatch):
    async def update_then_fail(self, customer_id, name, email):
        customer = await self.get_customer(customer_id)
        customer.name = name
        customer.email = email
        await self.db.flush()
        raise RuntimeError("storage failure after write")

    with monkeypatch.context() as m:
        m.setattr(CustomerService, "update_customer", update_then_fail)
        resp = await lenient_client.put(
            f"/api/v1/customers/{customer_id}",
            json={"name": "Changed", "email": "changed@acme.com"},
        )
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}

    resp = await lenient_client.get(f"/api/v1/customers/{customer_id}")
    assert resp.status_code == 200
    assert resp.json() == {"id": customer_id, "name": "Acme", "email": "a@acme.com"}
