"""Listing template and generated listing schemas."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from dealflip.schemas.base import CamelModel, CamelUpdateModel


class ListingTemplateCreate(CamelModel):
    user_id: int
    name: str = Field(min_length=2)
    category: Optional[str] = None
    template: str = Field(min_length=1)
    default_platform: Optional[str] = None


class ListingTemplateUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "template"})

    name: Optional[str] = Field(default=None, min_length=2)
    category: Optional[str] = None
    template: Optional[str] = None
    default_platform: Optional[str] = None


class ListingTemplateRead(ListingTemplateCreate):
    id: int
    created_at: datetime
    updated_at: datetime


class GeneratedListingCreate(CamelModel):
    user_id: int
    inventory_item_id: Optional[int] = None
    title: str = Field(min_length=1)
    description: str
    platform: str = Field(min_length=1)
    suggested_price: float
    images: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    published_url: Optional[str] = None


class GeneratedListingUpdate(CamelUpdateModel):
    non_nullable: ClassVar[frozenset[str]] = frozenset({
        "title",
        "description",
        "platform",
        "suggested_price",
        "published",
    })

    inventory_item_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    platform: Optional[str] = None
    suggested_price: Optional[float] = None
    images: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    published: Optional[bool] = None
    published_url: Optional[str] = None


class GeneratedListingRead(GeneratedListingCreate):
    id: int
    images: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    created_at: datetime
    updated_at: datetime
