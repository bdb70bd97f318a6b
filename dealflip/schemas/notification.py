"""Notification and deal alert schemas."""

from datetime import datetime
from typing import Any, ClassVar, Optional

from pydantic import Field

from dealflip.schemas.base import CamelModel, CamelUpdateModel


class NotificationCreate(CamelModel):
    user_id: int
    title: str = Field(min_length=1)
    message: str
    type: str = "system"
    read: bool = False
    data: Optional[Any] = None


class NotificationUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({
        "title",
        "message",
        "type",
        "read",
    })

    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[str] = None
    read: Optional[bool] = None
    data: Optional[Any] = None


class NotificationRead(NotificationCreate):
    id: int
    created_at: datetime


class MarkAllReadRequest(CamelModel):
    user_id: int


class DealAlertCreate(CamelModel):
    user_id: int
    name: str = Field(min_length=2)
    keywords: list[str] = Field(min_length=1)
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    condition: Optional[str] = None
    sources: list[str] = Field(default_factory=list)
    enabled: bool = True
    instant_notification: bool = True
    email_notification: bool = False


class DealAlertUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({
        "name",
        "keywords",
        "sources",
        "enabled",
        "instant_notification",
        "email_notification",
    })

    name: Optional[str] = Field(default=None, min_length=2)
    keywords: Optional[list[str]] = Field(default=None, min_length=1)
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    condition: Optional[str] = None
    sources: Optional[list[str]] = None
    enabled: Optional[bool] = None
    instant_notification: Optional[bool] = None
    email_notification: Optional[bool] = None


class DealAlertRead(DealAlertCreate):
    id: int
    keywords: list[str]
    last_run_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
