"""Listing template and generated listing models."""

from datetime import datetime
from sqlalchemy import String, DateTime, Float, ForeignKey, Text, Boolean, JSON
from sqlalchemy.orm import Mapped, mapped_column

from dealflip.database import Base


class ListingTemplate(Base):
    """Reusable free-text guide for listing copy."""

    __tablename__ = "listing_templates"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=True)
    template: Mapped[str] = mapped_column(Text, nullable=False)
    default_platform: Mapped[str] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<ListingTemplate(id={self.id}, name='{self.name}')>"


class GeneratedListing(Base):
    """Marketplace-ready copy, usually produced by the listing generator."""

    __tablename__ = "generated_listings"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    inventory_item_id: Mapped[int] = mapped_column(
        ForeignKey("inventory_items.id", ondelete="SET NULL"), nullable=True
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    platform: Mapped[str] = mapped_column(String(100), nullable=False)
    suggested_price: Mapped[float] = mapped_column(Float, nullable=False)
    images: Mapped[list] = mapped_column(JSON, default=list)
    tags: Mapped[list] = mapped_column(JSON, default=list)

    # Status
    published: Mapped[bool] = mapped_column(Boolean, default=False)
    published_url: Mapped[str] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<GeneratedListing(id={self.id}, platform='{self.platform}', published={self.published})>"
