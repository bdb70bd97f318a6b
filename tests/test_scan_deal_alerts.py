from datetime import datetime, timedelta

import pytest

from dealflip.models import Deal, DealAlert, Notification
from dealflip.tasks.scan_deal_alerts import alert_matches, run_alert_scan


def _deal(**overrides):
    values = {
        "user_id": 1,
        "title": "Air Jordan 1 Retro High",
        "description": "Chicago colorway, size 10",
        "source": "Facebook Marketplace",
        "condition": "New",
        "current_price": 140.0,
        "status": "active",
    }
    values.update(overrides)
    return Deal(**values)


def _alert(**overrides):
    values = {"user_id": 1, "name": "Jordans", "keywords": ["jordan"], "sources": [], "enabled": True}
    values.update(overrides)
    return DealAlert(**values)


@pytest.mark.parametrize(
    "alert_overrides, deal_overrides, expected",
    [
        ({}, {}, True),
        ({"keywords": ["JORDAN"]}, {}, True),
        ({"keywords": ["yeezy", "chicago"]}, {}, True),
        ({"keywords": ["yeezy"]}, {}, False),
        ({"category": "retro"}, {}, True),
        ({"category": "furniture"}, {}, False),
        ({"min_price": 100, "max_price": 150}, {}, True),
        ({"max_price": 100}, {}, False),
        ({"min_price": 200}, {}, False),
        ({"max_price": 100}, {"current_price": None}, False),
        ({"condition": "new"}, {}, True),
        ({"condition": "Used"}, {}, False),
        ({"sources": ["facebook"]}, {}, True),
        ({"sources": ["craigslist", "offerup"]}, {}, False),
    ],
)
def test_alert_matches(alert_overrides, deal_overrides, expected):
    assert alert_matches(_alert(**alert_overrides), _deal(**deal_overrides)) is expected


def test_scan_notifies_owner_once_per_match(db, users):
    alex, sam = users
    match = _deal(user_id=alex)
    db.add_all(
        [
            match,
            _deal(user_id=alex, title="Vintage lamp", description=None),
            _deal(user_id=alex, status="ignored"),
            _deal(user_id=sam),
        ]
    )
    alert = _alert(user_id=alex)
    db.add_all([alert, _alert(user_id=alex, name="Disabled", enabled=False)])
    db.commit()

    now = datetime.utcnow() + timedelta(seconds=1)
    result = run_alert_scan(db, now=now)

    assert result == {"status": "success", "alerts_checked": 1, "notifications_created": 1}
    notification = db.query(Notification).one()
    assert notification.user_id == alex
    assert notification.type == "deal_alert"
    assert notification.read is False
    assert notification.data == {"dealId": match.id, "alertId": alert.id}
    db.refresh(alert)
    assert alert.last_run_at == now

    # Nothing new since the last run
    assert run_alert_scan(db)["notifications_created"] == 0
    assert db.query(Notification).count() == 1
