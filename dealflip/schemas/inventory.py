"""Inventory and sales schemas."""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Optional

from pydantic import Field

from dealflip.schemas.base import CamelModel, CamelUpdateModel


class InventoryStatus(str, Enum):
    IN_INVENTORY = "in_inventory"
    LISTED = "listed"
    SOLD = "sold"
    RETURNED = "returned"


class InventoryItemCreate(CamelModel):
    user_id: int
    deal_id: Optional[int] = None
    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: str = Field(min_length=1)
    purchase_price: float = Field(ge=0)
    purchase_date: str = Field(min_length=1)
    estimated_value: Optional[float] = None
    condition: Optional[str] = None
    status: InventoryStatus = InventoryStatus.IN_INVENTORY
    location: Optional[str] = None
    image_url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    notes: Optional[str] = None


class InventoryItemUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({
        "title",
        "category",
        "purchase_price",
        "purchase_date",
        "status",
    })

    deal_id: Optional[int] = None
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1)
    purchase_price: Optional[float] = Field(default=None, ge=0)
    purchase_date: Optional[str] = None
    estimated_value: Optional[float] = None
    condition: Optional[str] = None
    status: Optional[InventoryStatus] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    tags: Optional[list[str]] = None
    notes: Optional[str] = None


class InventoryItemRead(InventoryItemCreate):
    id: int
    status: str
    tags: Optional[list[str]] = None
    created_at: datetime
    updated_at: datetime


class CategorySummary(CamelModel):
    category: str
    count: int
    total_value: float
    average_value: float


class InventorySummary(CamelModel):
    total_items: int
    total_value: float
    category_counts: list[CategorySummary]
    status_counts: dict[str, int]
    recent_items: list[InventoryItemRead]


class SalesRecordCreate(CamelModel):
    user_id: int
    inventory_item_id: int
    sale_price: float = Field(gt=0)
    sale_date: str = Field(min_length=1)
    platform_sold: Optional[str] = None
    fees: Optional[float] = None
    shipping_cost: Optional[float] = None
    # Computed from the item's purchase price when omitted
    profit: Optional[float] = None
    buyer_info: Optional[Any] = None
    notes: Optional[str] = None


class SalesRecordUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"sale_price", "sale_date", "profit"})

    sale_price: Optional[float] = Field(default=None, gt=0)
    sale_date: Optional[str] = None
    platform_sold: Optional[str] = None
    fees: Optional[float] = None
    shipping_cost: Optional[float] = None
    profit: Optional[float] = None
    buyer_info: Optional[Any] = None
    notes: Optional[str] = None


class SalesRecordRead(SalesRecordCreate):
    id: int
    profit: float
    created_at: datetime
