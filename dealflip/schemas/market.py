"""Stats, market insight and price history schemas."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from dealflip.schemas.base import CamelModel, CamelUpdateModel


class StatCreate(CamelModel):
    user_id: int
    name: str = Field(min_length=1)
    value: float
    change: Optional[float] = None
    change_type: Optional[str] = None
    icon: Optional[str] = None


class StatUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "value"})

    name: Optional[str] = None
    value: Optional[float] = None
    change: Optional[float] = None
    change_type: Optional[str] = None
    icon: Optional[str] = None


class StatRead(StatCreate):
    id: int
    created_at: datetime


class MarketInsightCreate(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    change_percentage: Optional[float] = None
    icon_type: str
    color_type: str
    source: Optional[str] = None
    period: Optional[str] = None


class MarketInsightRead(MarketInsightCreate):
    id: int
    created_at: datetime


class PriceHistoryCreate(CamelModel):
    product_id: str = Field(min_length=1)
    date: datetime
    price: float
    source: Optional[str] = None


class PriceHistoryRead(PriceHistoryCreate):
    id: int
    created_at: datetime
