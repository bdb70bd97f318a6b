"""Competitor price schemas."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from dealflip.schemas.base import CamelModel, CamelUpdateModel


class CompetitorPriceCreate(CamelModel):
    user_id: int
    deal_id: Optional[int] = None
    platform: str = Field(min_length=1)
    title: str = Field(min_length=1)
    url: Optional[str] = None
    price: float = Field(gt=0)
    condition: Optional[str] = None
    shipping: Optional[float] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    seller_name: Optional[str] = None
    availability: Optional[str] = None
    last_checked: Optional[datetime] = None


class CompetitorPriceUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"platform", "title", "price"})

    deal_id: Optional[int] = None
    platform: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    condition: Optional[str] = None
    shipping: Optional[float] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    seller_name: Optional[str] = None
    availability: Optional[str] = None
    last_checked: Optional[datetime] = None


class CompetitorPriceRead(CompetitorPriceCreate):
    id: int
    created_at: datetime
    updated_at: datetime
