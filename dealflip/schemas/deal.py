"""Deal schemas."""

from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional

from pydantic import Field

from dealflip.schemas.base import CamelModel, CamelUpdateModel


class DealStatus(str, Enum):
    """Lifecycle of a deal."""
    ACTIVE = "active"
    TRACKED = "tracked"
    PURCHASED = "purchased"
    SOLD = "sold"
    IGNORED = "ignored"


class DealCreate(CamelModel):
    user_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    source: Optional[str] = None
    posted_time: Optional[str] = None
    image_url: Optional[str] = None
    original_price: Optional[float] = None
    current_price: Optional[float] = None
    estimated_profit: Optional[float] = None
    condition: Optional[str] = None
    sell_time_estimate: Optional[str] = None
    demand: Optional[str] = None
    match_score: Optional[int] = None
    is_hot_deal: bool = False
    status: DealStatus = DealStatus.ACTIVE
    avg_resell_low: Optional[float] = None
    avg_resell_high: Optional[float] = None


class DealUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"title", "is_hot_deal", "status"})

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    source: Optional[str] = None
    posted_time: Optional[str] = None
    image_url: Optional[str] = None
    original_price: Optional[float] = None
    current_price: Optional[float] = None
    estimated_profit: Optional[float] = None
    condition: Optional[str] = None
    sell_time_estimate: Optional[str] = None
    demand: Optional[str] = None
    match_score: Optional[int] = None
    is_hot_deal: Optional[bool] = None
    status: Optional[DealStatus] = None
    avg_resell_low: Optional[float] = None
    avg_resell_high: Optional[float] = None


class DealRead(DealCreate):
    id: int
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime
