"""Inventory, sales and the per-user summary."""

from dealflip.models import InventoryItem, SalesRecord


def _add_item(client, user_id, **overrides):
    payload = {
        "userId": user_id,
        "title": "Sony WH-1000XM4",
        "category": "Electronics",
        "purchasePrice": 180,
        "purchaseDate": "2026-09-01",
        "estimatedValue": 240,
        "condition": "Like New",
        **overrides,
    }
    response = client.post("/api/inventory", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_inventory_item_defaults(client, users):
    item = _add_item(client, users[0])

    assert item["status"] == "in_inventory"
    assert item["tags"] == []
    assert item["estimatedValue"] == 240


def test_inventory_item_requires_category(client, users):
    response = client.post(
        "/api/inventory",
        json={"userId": users[0], "title": "Mystery", "purchasePrice": 5, "purchaseDate": "2026-09-01"},
    )

    assert response.status_code == 400
    assert 'at "category"' in response.json()["message"]


def test_recording_sale_marks_item_sold(client, users):
    item = _add_item(client, users[0])

    response = client.post(
        "/api/sales",
        json={
            "userId": users[0],
            "inventoryItemId": item["id"],
            "salePrice": 260,
            "saleDate": "2026-10-01",
            "platformSold": "eBay",
            "fees": 33.8,
            "shippingCost": 12,
        },
    )

    assert response.status_code == 201, response.text
    sale = response.json()
    assert sale["profit"] == 260 - 180 - 33.8 - 12

    item_after = client.get(f"/api/inventory/{item['id']}").json()
    assert item_after["status"] == "sold"


def test_sale_keeps_profit_when_given(client, users):
    item = _add_item(client, users[0])

    response = client.post(
        "/api/sales",
        json={
            "userId": users[0],
            "inventoryItemId": item["id"],
            "salePrice": 200,
            "saleDate": "2026-10-01",
            "profit": 5,
        },
    )

    assert response.status_code == 201
    assert response.json()["profit"] == 5


def test_sale_for_missing_item_is_404_and_writes_nothing(client, users, db):
    response = client.post(
        "/api/sales",
        json={"userId": users[0], "inventoryItemId": 404, "salePrice": 10, "saleDate": "2026-10-01"},
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Inventory item not found"}
    assert db.query(SalesRecord).count() == 0


def test_deleting_item_removes_its_sales(client, users, db):
    item = _add_item(client, users[0])
    client.post(
        "/api/sales",
        json={"userId": users[0], "inventoryItemId": item["id"], "salePrice": 300, "saleDate": "2026-10-02"},
    )

    assert client.delete(f"/api/inventory/{item['id']}").status_code == 204
    assert db.query(InventoryItem).count() == 0
    assert db.query(SalesRecord).count() == 0


def test_inventory_list_is_scoped_to_user(client, users):
    alex, sam = users
    _add_item(client, alex, title="Alex's headphones")
    _add_item(client, sam, title="Sam's headphones")

    rows = client.get(f"/api/inventory/user/{alex}").json()

    assert [r["title"] for r in rows] == ["Alex's headphones"]
    assert all(r["userId"] == alex for r in rows)


def test_inventory_summary(client, users):
    alex, sam = users
    _add_item(client, alex, title="Headphones", estimatedValue=240)
    _add_item(client, alex, title="Speaker", estimatedValue=None, purchasePrice=60)
    _add_item(client, alex, title="Dutch Oven", category="Home Goods", estimatedValue=180)
    sold = _add_item(client, alex, title="Sold Jacket", category="Apparel", estimatedValue=75)
    _add_item(client, sam, title="Not mine", estimatedValue=1000)
    client.post(
        "/api/sales",
        json={"userId": alex, "inventoryItemId": sold["id"], "salePrice": 90, "saleDate": "2026-10-03"},
    )

    response = client.get(f"/api/inventory/summary/user/{alex}")

    assert response.status_code == 200
    summary = response.json()
    assert summary["totalItems"] == 3
    assert summary["totalValue"] == 240 + 60 + 180
    assert summary["statusCounts"] == {"in_inventory": 3, "sold": 1}
    assert summary["categoryCounts"] == [
        {"category": "Electronics", "count": 2, "totalValue": 300.0, "averageValue": 150.0},
        {"category": "Home Goods", "count": 1, "totalValue": 180.0, "averageValue": 180.0},
    ]
    assert len(summary["recentItems"]) == 4
    assert summary["recentItems"][0]["title"] == "Sold Jacket"
