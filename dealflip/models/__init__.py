"""Database models."""

from dealflip.models.user import User
from dealflip.models.deal import Deal
from dealflip.models.inventory_item import InventoryItem
from dealflip.models.sales_record import SalesRecord
from dealflip.models.notification import Notification
from dealflip.models.deal_alert import DealAlert
from dealflip.models.competitor_price import CompetitorPrice
from dealflip.models.listing import ListingTemplate, GeneratedListing
from dealflip.models.sourcing_setting import SourcingSetting
from dealflip.models.market import Stat, MarketInsight, PriceHistory

__all__ = [
    "User",
    "Deal",
    "InventoryItem",
    "SalesRecord",
    "Notification",
    "DealAlert",
    "CompetitorPrice",
    "ListingTemplate",
    "GeneratedListing",
    "SourcingSetting",
    "Stat",
    "MarketInsight",
    "PriceHistory",
]
