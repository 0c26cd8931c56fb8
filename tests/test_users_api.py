"""Integration tests for profile and user administration endpoints via TestClient."""

import pytest

pytestmark = pytest.mark.api


class TestProfile:
    def test_get_profile(self, client, users, headers):
        response = client.get("/users/profile", headers=headers["alice"])

        assert response.status_code == 200
        assert response.json()["data"]["user"]["first_name"] == "Alice"

    def test_update_name(self, client, users, headers):
        response = client.patch("/users/profile", json={"first_name": "Alicia"}, headers=headers["alice"])

        assert response.status_code == 200
        user = response.json()["data"]["user"]
        assert user["first_name"] == "Alicia"
        assert user["last_name"] == "Archer"

    def test_update_email_to_one_in_use(self, client, users, headers):
        response = client.patch("/users/profile", json={"email": "bob@example.com"}, headers=headers["alice"])

        assert response.status_code == 400
        assert response.json()["message"] == "Email already in use"

    def test_keeping_own_email_is_allowed(self, client, users, headers):
        response = client.patch("/users/profile", json={"email": "alice@example.com"}, headers=headers["alice"])
        assert response.status_code == 200


class TestAdministration:
    def test_admin_lists_users(self, client, users, headers):
        response = client.get("/users/admin/users", headers=headers["admin"])

        assert response.status_code == 200
        body = response.json()
        assert body["results"] == 3
        assert [u["email"] for u in body["data"]["users"]] == [
            "alice@example.com",
            "bob@example.com",
            "admin@example.com",
        ]

    def test_regular_user_cannot_list_users(self, client, users, headers):
        response = client.get("/users/admin/users", headers=headers["alice"])
        assert response.status_code == 403

    def test_get_user(self, client, users, headers):
        response = client.get(f"/users/admin/users/{users['bob'].id}", headers=headers["admin"])

        assert response.status_code == 200
        assert response.json()["data"]["user"]["email"] == "bob@example.com"

    def test_get_missing_user(self, client, users, headers):
        response = client.get("/users/admin/users/999", headers=headers["admin"])

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_promote_user_to_admin(self, client, users, headers, products):
        response = client.patch(
            f"/users/admin/users/{users['bob'].id}/role",
            json={"role": "admin"},
            headers=headers["admin"],
        )

        assert response.status_code == 200
        assert response.json()["data"]["user"]["role"] == "admin"

        created = client.post("/products", json={
            "id": "zx7-speaker",
            "product_name": "ZX7 Speaker",
            "price": 3500.0,
            "category": "speakers",
            "image_name": "zx7-speaker.jpg",
        }, headers=headers["bob"])
        assert created.status_code == 201

    def test_unknown_role(self, client, users, headers):
        response = client.patch(
            f"/users/admin/users/{users['bob'].id}/role",
            json={"role": "owner"},
            headers=headers["admin"],
        )
        assert response.status_code == 400
