"""Data access helpers shared by every route.

Each helper takes an open ``Session`` and commits its own work, so a route
performs one write per call unless a helper says otherwise.
"""

import logging
from collections import defaultdict
from datetime import datetime
from typing import Any, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from dealflip.database import Base
from dealflip.models import (
    CompetitorPrice,
    InventoryItem,
    Notification,
    PriceHistory,
    SalesRecord,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def list_all(db: Session, model: Type[ModelT]) -> list[ModelT]:
    """Every row of ``model`` in insertion order."""
    return db.query(model).order_by(model.id.asc()).all()


def list_for_user(db: Session, model: Type[ModelT], user_id: int) -> list[ModelT]:
    """Rows of ``model`` owned by ``user_id``."""
    return (
        db.query(model)
        .filter(model.user_id == user_id)
        .order_by(model.id.asc())
        .all()
    )


def get(db: Session, model: Type[ModelT], row_id: int) -> Optional[ModelT]:
    return db.get(model, row_id)


def create(db: Session, model: Type[ModelT], values: dict[str, Any]) -> ModelT:
    row = model(**values)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"Created {model.__name__} id={row.id}")
    return row


def update(db: Session, model: Type[ModelT], row_id: int, values: dict[str, Any]) -> Optional[ModelT]:
    """Apply a partial update. Returns None when the row does not exist.

    ``updated_at`` is stamped even when ``values`` is empty or changes nothing.
    """
    row = db.get(model, row_id)
    if row is None:
        return None

    for field, value in values.items():
        setattr(row, field, value)
    if hasattr(row, "updated_at"):
        row.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(row)
    return row


def delete(db: Session, model: Type[ModelT], row_id: int) -> bool:
    row = db.get(model, row_id)
    if row is None:
        return False
    db.delete(row)
    db.commit()
    logger.info(f"Deleted {model.__name__} id={row_id}")
    return True


def record_sale(db: Session, values: dict[str, Any]) -> Optional[SalesRecord]:
    """Insert a sales record and mark its inventory item sold.

    Both writes share one commit. Returns None when the item is missing.
    """
    item = db.get(InventoryItem, values["inventory_item_id"])
    if item is None:
        return None

    if values.get("profit") is None:
        values["profit"] = (
            values["sale_price"]
            - (item.purchase_price or 0)
            - (values.get("fees") or 0)
            - (values.get("shipping_cost") or 0)
        )

    sale = SalesRecord(**values)
    db.add(sale)
    item.status = "sold"
    item.updated_at = datetime.utcnow()

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(sale)
    logger.info(f"Recorded sale id={sale.id} for item {item.id}, profit={sale.profit:.2f}")
    return sale


def mark_all_notifications_read(db: Session, user_id: int) -> int:
    """Flag every unread notification of ``user_id`` as read."""
    updated = (
        db.query(Notification)
        .filter(Notification.user_id == user_id)
        .filter(Notification.read == False)  # noqa: E712
        .update({"read": True}, synchronize_session=False)
    )
    db.commit()
    if updated:
        logger.info(f"Marked {updated} notifications read for user {user_id}")
    return updated


def inventory_total_value(db: Session, user_id: int) -> float:
    """Sum of the best known value of every unsold item."""
    items = list_for_user(db, InventoryItem, user_id)
    return sum(_item_value(item) for item in items if item.status != "sold")


def inventory_summary(db: Session, user_id: int, recent: int = 5) -> dict[str, Any]:
    """Category and status breakdown of a user's inventory."""
    items = list_for_user(db, InventoryItem, user_id)

    by_category: dict[str, list[float]] = defaultdict(list)
    status_counts: dict[str, int] = defaultdict(int)
    for item in items:
        status_counts[item.status] += 1
        if item.status != "sold":
            by_category[item.category].append(_item_value(item))

    category_counts = [
        {
            "category": category,
            "count": len(values),
            "total_value": sum(values),
            "average_value": sum(values) / len(values),
        }
        for category, values in sorted(by_category.items())
    ]

    recent_items = sorted(items, key=lambda i: (i.created_at, i.id), reverse=True)[:recent]

    return {
        "total_items": sum(c["count"] for c in category_counts),
        "total_value": sum(c["total_value"] for c in category_counts),
        "category_counts": category_counts,
        "status_counts": dict(status_counts),
        "recent_items": recent_items,
    }


def refresh_competitor_price(db: Session, competitor_id: int) -> Optional[CompetitorPrice]:
    """Stamp ``last_checked`` and append the current price to price history."""
    competitor = db.get(CompetitorPrice, competitor_id)
    if competitor is None:
        return None

    now = datetime.utcnow()
    competitor.last_checked = now
    competitor.updated_at = now
    db.add(
        PriceHistory(
            product_id=competitor_history_key(competitor.id),
            date=now,
            price=competitor.price,
            source=competitor.platform,
        )
    )
    db.commit()
    db.refresh(competitor)
    return competitor


def competitor_history_key(competitor_id: int) -> str:
    """Price history product id under which a competitor's prices are kept."""
    return f"competitor-{competitor_id}"


def price_history(db: Session, product_id: str) -> list[PriceHistory]:
    return (
        db.query(PriceHistory)
        .filter(PriceHistory.product_id == product_id)
        .order_by(PriceHistory.date.asc())
        .all()
    )


def _item_value(item: InventoryItem) -> float:
    if item.estimated_value is not None:
        return item.estimated_value
    return item.purchase_price or 0.0
