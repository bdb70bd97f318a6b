"""Demo data for development databases."""

import logging
import math
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from dealflip.database import SessionLocal
from dealflip.models import Deal, InventoryItem, MarketInsight, PriceHistory, Stat, User

logger = logging.getLogger(__name__)

DEMO_USERNAME = "alex"

SAMPLE_DEALS = [
    {
        "title": "Nike Air Zoom Pegasus 38",
        "description": "Brand new Nike running shoes in original box",
        "source": "Facebook Marketplace",
        "posted_time": "2 hours ago",
        "original_price": 130,
        "current_price": 65,
        "estimated_profit": 45,
        "condition": "New",
        "sell_time_estimate": "~2-4 days",
        "demand": "High",
        "match_score": 98,
        "is_hot_deal": True,
        "avg_resell_low": 110,
        "avg_resell_high": 130,
    },
    {
        "title": 'MacBook Pro 2019 (16")',
        "description": "MacBook Pro in excellent condition, barely used",
        "source": "Craigslist",
        "posted_time": "yesterday",
        "original_price": 1800,
        "current_price": 1250,
        "estimated_profit": 250,
        "condition": "Excellent",
        "sell_time_estimate": "~7-10 days",
        "demand": "Medium",
        "match_score": 92,
        "is_hot_deal": False,
        "avg_resell_low": 1400,
        "avg_resell_high": 1600,
    },
    {
        "title": "Mid-Century Designer Chair",
        "description": "Authentic mid-century modern chair in good condition",
        "source": "Offerup",
        "posted_time": "1 day ago",
        "original_price": 350,
        "current_price": 120,
        "estimated_profit": 180,
        "condition": "Good",
        "sell_time_estimate": "~14-21 days",
        "demand": "Moderate",
        "match_score": 86,
        "is_hot_deal": False,
        "avg_resell_low": 280,
        "avg_resell_high": 350,
    },
]

# (title, category, purchase_price, estimated_value, condition)
SAMPLE_INVENTORY = [
    ("Air Jordan 1 Retro High", "Sneakers", 170, 260, "New"),
    ("Sony WH-1000XM4", "Electronics", 180, 240, "Like New"),
    ("Le Creuset Dutch Oven", "Home Goods", 95, 180, "Good"),
    ("Patagonia Better Sweater", "Apparel", 40, 75, "Good"),
]

# (name, value, change, change_type, icon)
SAMPLE_STATS = [
    ("Active Deals", 24, 8.1, "positive", "file-text"),
    ("Profit (30d)", 2856, 12.4, "positive", "dollar-sign"),
    ("Inventory Value", 16520, 3.2, "negative", "box"),
    ("Deal Success Rate", 68.4, 5.1, "positive", "check-circle"),
]

# (title, description, change_percentage, icon_type, color_type)
SAMPLE_INSIGHTS = [
    ("Sneaker prices trending up", "+8.3% in the last 14 days", 8.3, "trend-up", "gold"),
    ("Electronics demand falling", "-4.1% in the last 14 days", -4.1, "trend-down", "coral"),
    ("New marketplace detected", "Mercari gaining traction in your area", 0, "info", "teal"),
]

PRICE_HISTORY_PRODUCT = "nike-air-jordan-1-retro"


def seed_demo_data(db: Session) -> bool:
    """Insert the demo user and sample rows. Returns False if already seeded."""
    if db.query(User).filter(User.username == DEMO_USERNAME).first():
        return False

    user = User(
        username=DEMO_USERNAME,
        password="password123",
        full_name="Alex Smith",
        email="alex@example.com",
        avatar_url=(
            "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e"
            "?ixlib=rb-1.2.1&auto=format&fit=facearea&facepad=2&w=48&h=48&q=80"
        ),
    )
    db.add(user)
    db.flush()

    for deal in SAMPLE_DEALS:
        db.add(Deal(user_id=user.id, status="active", **deal))

    today = datetime.utcnow().date().isoformat()
    for title, category, purchase_price, estimated_value, condition in SAMPLE_INVENTORY:
        db.add(
            InventoryItem(
                user_id=user.id,
                title=title,
                category=category,
                purchase_price=purchase_price,
                purchase_date=today,
                estimated_value=estimated_value,
                condition=condition,
                status="in_inventory",
                tags=[category.lower()],
            )
        )

    for name, value, change, change_type, icon in SAMPLE_STATS:
        db.add(
            Stat(
                user_id=user.id,
                name=name,
                value=value,
                change=change,
                change_type=change_type,
                icon=icon,
            )
        )

    for title, description, change, icon_type, color_type in SAMPLE_INSIGHTS:
        db.add(
            MarketInsight(
                title=title,
                description=description,
                change_percentage=change,
                icon_type=icon_type,
                color_type=color_type,
            )
        )

    # 31 daily points, climbing toward today
    now = datetime.utcnow()
    for days_ago in range(30, -1, -1):
        db.add(
            PriceHistory(
                product_id=PRICE_HISTORY_PRODUCT,
                date=now - timedelta(days=days_ago),
                price=round(200 + math.sin(days_ago / 5) * 10 - days_ago * 3, 2),
            )
        )

    db.commit()
    logger.info(f"Seeded demo user '{DEMO_USERNAME}' with sample data")
    return True


def seed_database():
    """Seed the configured database in its own session."""
    db = SessionLocal()
    try:
        seed_demo_data(db)
    except Exception as e:
        logger.error(f"Failed to seed demo data: {e}")
        db.rollback()
        raise
    finally:
        db.close()
