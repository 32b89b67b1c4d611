"""
Tests for apartment, coupon and announcement endpoints.
"""


class TestApartmentRoutes:
    def test_create_and_list(self, client):
        response = client.post(
            "/apartments", json={"apartmentNo": "A-101", "floor": 1, "block": "A", "rent": 1200}
        )
        assert response.status_code == 200

        listing = client.get("/apartments").json()
        assert listing["count"] == 1
        assert listing["data"][0]["apartment_no"] == "A-101"

    def test_missing_fields(self, client):
        assert client.post("/apartments", json={"block": "A"}).status_code == 400


class TestCouponRoutes:
    def test_create_and_list(self, client):
        response = client.post(
            "/coupons", json={"code": "SPRING", "discount": 10, "description": "Spring discount"}
        )
        assert response.status_code == 200
        assert client.get("/coupons").json()["data"][0]["code"] == "SPRING"


class TestAnnouncementRoutes:
    def test_create_and_list(self, client):
        response = client.post("/announcements", json={"title": "Lift", "description": "Tuesday"})
        assert response.status_code == 200
        data = client.get("/announcements").json()["data"]
        assert data[0]["title"] == "Lift"
        assert data[0]["date"]

    def test_requires_title(self, client):
        assert client.post("/announcements", json={}).status_code == 400
