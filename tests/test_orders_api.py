"""Integration tests for Order API endpoints via TestClient."""

import pytest

pytestmark = pytest.mark.api


@pytest.fixture()
def seeded(users, products):
    return users, products


def _create_order(client, headers, product_id="xx99-mark-two", quantity=2):
    """Helper: POST /orders and return the order payload."""
    response = client.post(
        "/orders",
        json={"items": [{"product_id": product_id, "quantity": quantity}]},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["order"]


class TestAuthentication:
    def test_missing_token(self, client, seeded):
        response = client.get("/orders")
        assert response.status_code == 401
        assert response.json()["status"] == "fail"

    def test_garbage_token(self, client, seeded):
        response = client.get("/orders", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token. Please log in again."


class TestCreateOrder:
    def test_create_order(self, client, seeded, headers):
        response = client.post(
            "/orders",
            json={"items": [{"product_id": "xx99-mark-two", "quantity": 2}]},
            headers=headers["alice"],
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        order = body["data"]["order"]
        assert order["status"] == "active"
        assert len(order["order_products"]) == 1
        assert order["order_products"][0]["quantity"] == 2
        assert order["order_products"][0]["product"]["product_name"] == "XX99 Mark II Headphones"

    def test_second_active_order_is_rejected(self, client, seeded, headers):
        _create_order(client, headers["alice"])

        response = client.post(
            "/orders",
            json={"items": [{"product_id": "zx9-speaker", "quantity": 1}]},
            headers=headers["alice"],
        )

        assert response.status_code == 400
        assert response.json()["message"] == "You already have an active order"

    def test_empty_items(self, client, seeded, headers):
        response = client.post("/orders", json={"items": []}, headers=headers["alice"])
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid input data.")

    def test_non_positive_quantity(self, client, seeded, headers):
        response = client.post(
            "/orders",
            json={"items": [{"product_id": "xx99-mark-two", "quantity": 0}]},
            headers=headers["alice"],
        )
        assert response.status_code == 400

    def test_unknown_product(self, client, seeded, headers):
        response = client.post(
            "/orders",
            json={"items": [{"product_id": "missing", "quantity": 1}]},
            headers=headers["alice"],
        )
        assert response.status_code == 404
        assert response.json()["message"] == "One or more products not found"


class TestReadOrders:
    def test_list_my_orders(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])

        response = client.get("/orders", headers=headers["alice"])

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["active_order"]["id"] == order["id"]
        assert data["completed_orders"] == []

    def test_owner_can_read_order(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.get(f"/orders/{order['id']}", headers=headers["alice"])
        assert response.status_code == 200
        assert response.json()["data"]["order"]["id"] == order["id"]

    def test_admin_can_read_any_order(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.get(f"/orders/{order['id']}", headers=headers["admin"])
        assert response.status_code == 200

    def test_other_user_is_forbidden(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.get(f"/orders/{order['id']}", headers=headers["bob"])
        assert response.status_code == 403

    def test_missing_order(self, client, seeded, headers):
        response = client.get("/orders/12345", headers=headers["alice"])
        assert response.status_code == 404

    def test_invalid_order_id(self, client, seeded, headers):
        response = client.get("/orders/abc", headers=headers["alice"])
        assert response.status_code == 400


class TestUpdateStatus:
    def test_admin_completes_order(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])

        response = client.patch(f"/orders/{order['id']}", json={"status": "complete"}, headers=headers["admin"])

        assert response.status_code == 200
        assert response.json()["data"]["order"]["status"] == "complete"

        listing = client.get("/orders", headers=headers["alice"]).json()["data"]
        assert listing["active_order"] is None
        assert [o["id"] for o in listing["completed_orders"]] == [order["id"]]

    def test_non_admin_is_forbidden(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.patch(f"/orders/{order['id']}", json={"status": "complete"}, headers=headers["alice"])
        assert response.status_code == 403

    def test_unknown_status_value(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.patch(f"/orders/{order['id']}", json={"status": "shipped"}, headers=headers["admin"])
        assert response.status_code == 400

    def test_completed_order_rejects_item_changes(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        client.patch(f"/orders/{order['id']}", json={"status": "complete"}, headers=headers["admin"])

        response = client.post(
            f"/orders/{order['id']}/items",
            json={"product_id": "zx9-speaker", "quantity": 1},
            headers=headers["alice"],
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot modify a completed order"


class TestOrderItems:
    def test_add_existing_product_merges_quantity(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])

        response = client.post(
            f"/orders/{order['id']}/items",
            json={"product_id": "xx99-mark-two", "quantity": 3},
            headers=headers["alice"],
        )

        assert response.status_code == 200
        items = response.json()["data"]["order"]["order_products"]
        assert len(items) == 1
        assert items[0]["quantity"] == 5

    def test_add_item_to_someone_elses_order(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.post(
            f"/orders/{order['id']}/items",
            json={"product_id": "zx9-speaker", "quantity": 1},
            headers=headers["bob"],
        )
        assert response.status_code == 403

    def test_update_item_quantity(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        item_id = order["order_products"][0]["id"]

        response = client.patch(
            f"/orders/{order['id']}/items/{item_id}",
            json={"quantity": 4},
            headers=headers["alice"],
        )

        assert response.status_code == 200
        assert response.json()["data"]["order"]["order_products"][0]["quantity"] == 4

    def test_update_unknown_item(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.patch(
            f"/orders/{order['id']}/items/999",
            json={"quantity": 4},
            headers=headers["alice"],
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Order item not found"

    def test_remove_one_of_two_items(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        client.post(
            f"/orders/{order['id']}/items",
            json={"product_id": "zx9-speaker", "quantity": 1},
            headers=headers["alice"],
        )
        item_id = order["order_products"][0]["id"]

        response = client.delete(f"/orders/{order['id']}/items/{item_id}", headers=headers["alice"])

        assert response.status_code == 200
        items = response.json()["data"]["order"]["order_products"]
        assert [item["product_id"] for item in items] == ["zx9-speaker"]

    def test_removing_last_item_deletes_order(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        item_id = order["order_products"][0]["id"]

        response = client.delete(f"/orders/{order['id']}/items/{item_id}", headers=headers["alice"])

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Order deleted because it had no items"
        assert body["data"]["order"] is None

        assert client.get(f"/orders/{order['id']}", headers=headers["alice"]).status_code == 404

    def test_invalid_item_id(self, client, seeded, headers):
        order = _create_order(client, headers["alice"])
        response = client.delete(f"/orders/{order['id']}/items/abc", headers=headers["alice"])
        assert response.status_code == 400
