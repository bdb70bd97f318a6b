from dealflip.routes import notifications as notification_routes


def _notify(client, user_id, title="Price drop", read=False):
    response = client.post(
        "/api/notifications",
        json={"userId": user_id, "title": title, "message": "Down 10%", "type": "price_drop", "read": read},
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_notification_defaults(client, users):
    response = client.post(
        "/api/notifications",
        json={"userId": users[0], "title": "Hello", "message": "Welcome aboard"},
    )

    body = response.json()
    assert body["type"] == "system"
    assert body["read"] is False
    assert body["data"] is None


def test_mark_all_read_only_touches_one_user(client, users):
    alex, sam = users
    _notify(client, alex)
    _notify(client, alex, title="Already read", read=True)
    _notify(client, sam)

    response = client.post("/api/notifications/mark-all-read", json={"userId": alex})

    assert response.status_code == 200
    assert response.json() == {"updated": 1}
    assert all(n["read"] for n in client.get(f"/api/notifications/user/{alex}").json())
    assert not client.get(f"/api/notifications/user/{sam}").json()[0]["read"]


def test_mark_all_read_requires_user_id(client):
    response = client.post("/api/notifications/mark-all-read", json={})

    assert response.status_code == 400
    assert 'at "userId"' in response.json()["message"]


def test_deal_alert_validation(client, users):
    response = client.post(
        "/api/deal-alerts", json={"userId": users[0], "name": "x", "keywords": []}
    )

    assert response.status_code == 400
    message = response.json()["message"]
    assert 'at "name"' in message
    assert 'at "keywords"' in message


def test_deal_alert_round_trip(client, users):
    response = client.post(
        "/api/deal-alerts",
        json={"userId": users[0], "name": "Jordans", "keywords": ["jordan"], "maxPrice": 150},
    )

    assert response.status_code == 201
    alert = response.json()
    assert alert["enabled"] is True
    assert alert["sources"] == []
    assert alert["lastRunAt"] is None

    patched = client.patch(f"/api/deal-alerts/{alert['id']}", json={"enabled": False}).json()
    assert patched["enabled"] is False
    assert patched["keywords"] == ["jordan"]


def test_run_deal_alerts_queues_scan(client, monkeypatch):
    class FakeResult:
        id = "task-123"

    class FakeTask:
        def apply_async(self):
            return FakeResult()

    monkeypatch.setattr(notification_routes, "scan_deal_alerts", FakeTask())

    response = client.post("/api/deal-alerts/run")

    assert response.status_code == 202
    assert response.json() == {"status": "queued", "taskId": "task-123"}
