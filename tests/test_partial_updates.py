"""PATCH bodies are validated like create bodies: a rejected update is a 400
and leaves the row readable and unchanged."""

import pytest


ITEM = {
    "title": "Le Creuset Dutch Oven",
    "category": "Home Goods",
    "purchasePrice": 95,
    "purchaseDate": "2026-09-01",
}

RESOURCES = {
    "/api/deals": {"title": "Mid-Century Chair", "currentPrice": 120},
    "/api/inventory": ITEM,
    "/api/notifications": {"title": "Price drop", "message": "Down 10%"},
    "/api/deal-alerts": {"name": "Chairs", "keywords": ["chair"], "sources": ["craigslist"]},
    "/api/competitor-prices": {"platform": "eBay", "title": "Eames chair", "price": 450},
    "/api/listing-templates": {"name": "Furniture", "template": "{title}"},
    "/api/generated-listings": {
        "title": "Eames chair",
        "description": "Walnut veneer",
        "platform": "eBay",
        "suggestedPrice": 480,
    },
    "/api/sourcing-settings": {"name": "Estate sales", "platforms": ["Craigslist"]},
}


def _create(client, path, user_id):
    if path == "/api/sales":
        item = client.post("/api/inventory", json={"userId": user_id, **ITEM}).json()
        payload = {"userId": user_id, "inventoryItemId": item["id"], "salePrice": 150, "saleDate": "2026-10-01"}
    else:
        payload = {"userId": user_id, **RESOURCES[path]}
    response = client.post(path, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.parametrize(
    "path, body, field",
    [
        ("/api/deals", {"title": None}, "title"),
        ("/api/deals", {"isHotDeal": None}, "isHotDeal"),
        ("/api/deals", {"currentPrice": "cheap"}, "currentPrice"),
        ("/api/inventory", {"category": None}, "category"),
        ("/api/inventory", {"purchasePrice": None}, "purchasePrice"),
        ("/api/inventory", {"status": "lost"}, "status"),
        ("/api/sales", {"salePrice": None}, "salePrice"),
        ("/api/sales", {"saleDate": None}, "saleDate"),
        ("/api/notifications", {"message": None}, "message"),
        ("/api/notifications", {"read": None}, "read"),
        ("/api/deal-alerts", {"keywords": None}, "keywords"),
        ("/api/deal-alerts", {"keywords": []}, "keywords"),
        ("/api/deal-alerts", {"sources": None}, "sources"),
        ("/api/deal-alerts", {"name": None}, "name"),
        ("/api/competitor-prices", {"price": None}, "price"),
        ("/api/listing-templates", {"template": None}, "template"),
        ("/api/generated-listings", {"suggestedPrice": None}, "suggestedPrice"),
        ("/api/generated-listings", {"published": None}, "published"),
        ("/api/sourcing-settings", {"platforms": None}, "platforms"),
        ("/api/sourcing-settings", {"scanIntervalMinutes": 0}, "scanIntervalMinutes"),
    ],
)
def test_invalid_patch_is_400_and_row_survives(client, users, path, body, field):
    row = _create(client, path, users[0])

    response = client.patch(f"{path}/{row['id']}", json=body)

    assert response.status_code == 400, response.text
    assert f'at "{field}"' in response.json()["message"]

    after = client.get(f"{path}/{row['id']}")
    assert after.status_code == 200
    assert after.json()[field] == row[field]
    assert client.get(f"{path}/user/{users[0]}").status_code == 200


def test_null_is_still_allowed_on_optional_columns(client, users):
    deal = _create(client, "/api/deals", users[0])

    response = client.patch(f"/api/deals/{deal['id']}", json={"currentPrice": None, "description": None})

    assert response.status_code == 200
    assert response.json()["currentPrice"] is None
    assert response.json()["title"] == deal["title"]


def test_null_rejection_message(client, users):
    deal = _create(client, "/api/deals", users[0])

    response = client.patch(f"/api/deals/{deal['id']}", json={"title": None})

    assert response.json() == {"message": 'Validation error: Value error, may not be null at "title"'}
