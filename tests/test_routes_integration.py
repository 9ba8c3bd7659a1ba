"""Integration tests for API routes."""
from fastapi import status


PRODUCT = {"type": "a", "name": "Widget", "price": 9.99}
PRODUCT_2 = {"type": "a", "name": "Gadget", "price": 25.5}
CUSTOMER = {
    "name": "John",
    "address": {"street": "Street", "number": 123, "zip": "12345", "city": "City"},
}


class TestServiceRoutes:
    def test_root(self, test_client):
        response = test_client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "running"

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"
        assert "X-Request-ID" in response.headers


class TestProductRoutes:
    """Test product endpoints."""

    def test_create_product(self, test_client):
        response = test_client.post("/product", json=PRODUCT)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"]
        assert data["name"] == PRODUCT["name"]
        assert data["price"] == PRODUCT["price"]

    def test_create_product_without_type_fails(self, test_client):
        response = test_client.post("/product", json={"name": "Widget"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"]["message"] == "Product type not supported"

    def test_create_invalid_product_reports_every_error(self, test_client):
        response = test_client.post("/product", json={"type": "a", "name": "", "price": -10})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        detail = response.json()["detail"]
        assert detail["type"] == "NotificationError"
        assert [e["message"] for e in detail["details"]["errors"]] == [
            "Name is required",
            "Price must be greater than zero",
        ]

    def test_list_products(self, test_client):
        assert test_client.post("/product", json=PRODUCT).status_code == status.HTTP_200_OK
        assert test_client.post("/product", json=PRODUCT_2).status_code == status.HTTP_200_OK

        response = test_client.get("/product")

        assert response.status_code == status.HTTP_200_OK
        products = response.json()["products"]
        assert len(products) == 2
        assert products[0]["name"] == PRODUCT["name"]
        assert products[0]["price"] == PRODUCT["price"]
        assert products[1]["name"] == PRODUCT_2["name"]
        assert products[1]["price"] == PRODUCT_2["price"]

    def test_find_product(self, test_client):
        created = test_client.post("/product", json=PRODUCT).json()

        response = test_client.get(f"/product/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    def test_find_unknown_product(self, test_client):
        response = test_client.get("/product/missing")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"]["type"] == "NotFoundError"

    def test_update_product(self, test_client):
        created = test_client.post("/product", json=PRODUCT).json()

        response = test_client.put(f"/product/{created['id']}", json={"name": "Widget 2", "price": 12.0})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": created["id"], "name": "Widget 2", "price": 12.0}
        assert test_client.get(f"/product/{created['id']}").json()["name"] == "Widget 2"


class TestCustomerRoutes:
    """Test customer endpoints."""

    def test_create_customer(self, test_client):
        response = test_client.post("/customer", json=CUSTOMER)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "John"
        assert data["address"] == CUSTOMER["address"]

    def test_create_customer_without_name_fails(self, test_client):
        response = test_client.post("/customer", json={**CUSTOMER, "name": ""})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"]["message"] == "customer: Name is required"

    def test_create_customer_without_address_is_rejected(self, test_client):
        response = test_client.post("/customer", json={"name": "John"})

        assert response.status_code == 422

    def test_list_customers(self, test_client):
        test_client.post("/customer", json=CUSTOMER)
        test_client.post("/customer", json={**CUSTOMER, "name": "Jane"})

        response = test_client.get("/customer")

        assert response.status_code == status.HTTP_200_OK
        assert [c["name"] for c in response.json()["customers"]] == ["John", "Jane"]

    def test_update_customer(self, test_client):
        created = test_client.post("/customer", json=CUSTOMER).json()
        new_address = {"street": "Other", "number": 1, "zip": "54321", "city": "Town"}

        response = test_client.put(
            f"/customer/{created['id']}",
            json={"name": "John Updated", "address": new_address},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": created["id"], "name": "John Updated", "address": new_address}

    def test_find_unknown_customer(self, test_client):
        response = test_client.get("/customer/missing")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"]["message"] == "Customer not found"
