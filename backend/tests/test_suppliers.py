"""Tests for supplier administration endpoints."""

from techstock.models.supplier import Supplier
from tests.conftest import bearer, login_user


def test_add_and_list_suppliers(auth_client, admin_user):
    """Admins can add suppliers and see them ordered by name."""
    test_client, _ = auth_client
    headers = bearer(admin_user.id, role="admin")

    for name in ("Zeta Components", "Acme Parts"):
        response = test_client.post("/api/suppliers", json={"name": name}, headers=headers)
        assert response.status_code == 201
        assert response.json()["message"] == "Supplier added successfully"
        assert isinstance(response.json()["supplier_id"], int)

    response = test_client.get("/api/suppliers", headers=headers)

    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["Acme Parts", "Zeta Components"]
    assert set(response.json()[0]) == {"supplier_id", "name"}


def test_admin_login_token_grants_access(auth_client, admin_user):
    """A token from the login endpoint carries the admin role."""
    test_client, _ = auth_client
    token = login_user(test_client, "admin@techstock.com", "AdminPass1").json()["token"]

    response = test_client.get("/api/suppliers", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200


def test_add_supplier_stores_contact(auth_client, admin_user):
    test_client, db_session_maker = auth_client

    response = test_client.post(
        "/api/suppliers",
        json={"name": "Acme Parts", "contact": "sales@acme.com"},
        headers=bearer(admin_user.id, role="admin"),
    )

    db = db_session_maker()
    supplier = db.query(Supplier).filter(Supplier.id == response.json()["supplier_id"]).one()
    assert supplier.contact == "sales@acme.com"
    db.close()


def test_add_supplier_requires_name(auth_client, admin_user):
    test_client, _ = auth_client

    response = test_client.post(
        "/api/suppliers", json={"contact": "x"}, headers=bearer(admin_user.id, role="admin")
    )

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_suppliers_require_admin(auth_client):
    test_client, _ = auth_client

    assert test_client.get("/api/suppliers").status_code == 401
    assert test_client.get("/api/suppliers", headers=bearer(5, role="user")).status_code == 403
    response = test_client.post(
        "/api/suppliers", json={"name": "Acme"}, headers=bearer(5, role="user")
    )
    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"
