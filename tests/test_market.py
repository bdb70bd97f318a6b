"""Competitor prices, stats, market insights, price history and the other
user-owned resources."""

from datetime import datetime

import pytest

from dealflip import storage


def test_refresh_competitor_price_appends_history(client, users, monkeypatch):
    created = client.post(
        "/api/competitor-prices",
        json={"userId": users[0], "platform": "eBay", "title": "Air Jordan 1", "price": 189.99},
    ).json()

    class FrozenClock:
        @staticmethod
        def utcnow():
            return datetime(2030, 3, 4, 5, 6, 7)

    monkeypatch.setattr(storage, "datetime", FrozenClock)

    response = client.post(f"/api/competitor-prices/{created['id']}/refresh")

    assert response.status_code == 200
    assert response.json()["lastChecked"].startswith("2030-03-04T05:06:07")

    history = client.get(f"/api/price-history/competitor-{created['id']}").json()
    assert len(history) == 1
    assert history[0]["price"] == 189.99
    assert history[0]["source"] == "eBay"


def test_refresh_missing_competitor_price_is_404(client):
    response = client.post("/api/competitor-prices/77/refresh")

    assert response.status_code == 404
    assert response.json() == {"message": "Competitor price not found"}


def test_competitor_rating_is_bounded(client, users):
    response = client.post(
        "/api/competitor-prices",
        json={"userId": users[0], "platform": "eBay", "title": "Thing", "price": 10, "rating": 7},
    )

    assert response.status_code == 400


def test_stats_are_scoped_to_user(client, users):
    alex, sam = users
    client.post("/api/stats", json={"userId": alex, "name": "Active Deals", "value": 24})
    client.post("/api/stats", json={"userId": sam, "name": "Active Deals", "value": 3})

    rows = client.get(f"/api/stats/user/{alex}").json()

    assert len(rows) == 1
    assert rows[0]["userId"] == alex
    assert rows[0]["value"] == 24


def test_patch_stat(client, users):
    stat = client.post(
        "/api/stats", json={"userId": users[0], "name": "Profit (30d)", "value": 2856, "change": 12.4}
    ).json()

    patched = client.patch(f"/api/stats/{stat['id']}", json={"value": 3000}).json()

    assert patched["value"] == 3000
    assert patched["change"] == 12.4
    assert client.patch("/api/stats/999", json={"value": 1}).status_code == 404


def test_market_insights_create_and_list(client):
    response = client.post(
        "/api/market-insights",
        json={
            "title": "Sneaker prices trending up",
            "description": "+8.3% in the last 14 days",
            "changePercentage": 8.3,
            "iconType": "trend-up",
            "colorType": "gold",
        },
    )

    assert response.status_code == 201
    insights = client.get("/api/market-insights").json()
    assert [i["title"] for i in insights] == ["Sneaker prices trending up"]


def test_price_history_is_ordered_by_date(client):
    for date, price in (("2026-10-03T00:00:00", 180), ("2026-10-01T00:00:00", 200), ("2026-10-02T00:00:00", 190)):
        response = client.post(
            "/api/price-history", json={"productId": "jordan-1", "date": date, "price": price}
        )
        assert response.status_code == 201

    history = client.get("/api/price-history/jordan-1").json()

    assert [p["price"] for p in history] == [200, 190, 180]
    assert client.get("/api/price-history/unknown").json() == []


@pytest.mark.parametrize(
    "path, payload",
    [
        ("/api/listing-templates", {"name": "eBay sneakers", "template": "{title} - {condition}"}),
        (
            "/api/generated-listings",
            {"title": "Air Jordan 1", "description": "Great pair", "platform": "eBay", "suggestedPrice": 240},
        ),
        ("/api/sourcing-settings", {"name": "Local thrift", "platforms": ["Craigslist"], "radiusMiles": 25}),
    ],
)
def test_user_owned_resources_round_trip(client, users, path, payload):
    alex, sam = users

    created = client.post(path, json={"userId": alex, **payload})
    assert created.status_code == 201, created.text
    row = created.json()
    for key, value in payload.items():
        assert row[key] == value

    assert [r["id"] for r in client.get(f"{path}/user/{alex}").json()] == [row["id"]]
    assert client.get(f"{path}/user/{sam}").json() == []

    assert client.delete(f"{path}/{row['id']}").status_code == 204
    assert client.get(f"{path}/{row['id']}").status_code == 404


def test_current_user_uses_header_or_demo_user(client, users):
    alex, sam = users

    default = client.get("/api/auth/user")
    explicit = client.get("/api/auth/user", headers={"X-User-Id": str(sam)})

    assert default.status_code == 200
    assert default.json()["id"] == alex
    assert "password" not in default.json()
    assert explicit.json()["username"] == "sam"


def test_current_user_missing_is_404(client):
    response = client.get("/api/auth/user", headers={"X-User-Id": "42"})

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "healthy"
    assert body["app"] == "DealFlip"
