"""Sourcing settings schemas."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from dealflip.schemas.base import CamelModel, CamelUpdateModel


class SourcingSettingCreate(CamelModel):
    user_id: int
    name: str = Field(min_length=1)
    platforms: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    max_price: Optional[float] = None
    min_profit: Optional[float] = None
    location: Optional[str] = None
    radius_miles: Optional[int] = Field(default=None, ge=0)
    scan_interval_minutes: int = Field(default=60, ge=1)
    enabled: bool = True


class SourcingSettingUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({
        "name",
        "platforms",
        "categories",
        "scan_interval_minutes",
        "enabled",
    })

    name: Optional[str] = None
    platforms: Optional[list[str]] = None
    categories: Optional[list[str]] = None
    max_price: Optional[float] = None
    min_profit: Optional[float] = None
    location: Optional[str] = None
    radius_miles: Optional[int] = Field(default=None, ge=0)
    scan_interval_minutes: Optional[int] = Field(default=None, ge=1)
    enabled: Optional[bool] = None


class SourcingSettingRead(SourcingSettingCreate):
    id: int
    created_at: datetime
    updated_at: datetime
