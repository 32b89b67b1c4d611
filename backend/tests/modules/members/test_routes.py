"""
Tests for member API endpoints.
"""


class TestMemberRoutes:
    def test_apply_and_list_pending(self, client):
        response = client.post("/members", json={"name": "Tenant", "email": "tenant@example.com"})
        assert response.status_code == 200
        assert response.json()["inserted_id"]

        pending = client.get("/members/pending").json()
        assert pending["count"] == 1
        assert pending["data"][0]["status"] == "pending"

    def test_apply_requires_fields(self, client):
        response = client.post("/members", json={"name": "Tenant"})
        assert response.status_code == 400
        assert response.json()["message"] == "Name and Email are required"

    def test_activate_promotes_user(self, client, store):
        user_id = store.seed("users", email="tenant@example.com", role="user")
        member_id = client.post(
            "/members", json={"name": "Tenant", "email": "tenant@example.com"}
        ).json()["inserted_id"]

        response = client.patch(f"/members/{member_id}", json={"status": "active"})

        assert response.status_code == 200
        assert response.json()["role_updated"] is True
        assert store.get("users", user_id)["role"] == "member"
        assert client.get("/members").json()["data"][0]["status"] == "active"

    def test_activate_twice_is_404(self, client):
        member_id = client.post(
            "/members", json={"name": "Tenant", "email": "tenant@example.com"}
        ).json()["inserted_id"]
        client.patch(f"/members/{member_id}", json={"status": "active"})

        response = client.patch(f"/members/{member_id}", json={"status": "active"})

        assert response.status_code == 404

    def test_missing_status(self, client):
        response = client.patch("/members/44444444-4444-4444-4444-444444444444", json={})
        assert response.status_code == 400
        assert response.json()["message"] == "Status field is missing in request body"
