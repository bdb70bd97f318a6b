"""Inventory item model."""

from datetime import datetime
from sqlalchemy import String, DateTime, Float, ForeignKey, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dealflip.database import Base


class InventoryItem(Base):
    """A purchased item held for resale."""

    __tablename__ = "inventory_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    deal_id: Mapped[int] = mapped_column(ForeignKey("deals.id", ondelete="SET NULL"), nullable=True)

    # Item details
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    condition: Mapped[str] = mapped_column(String(50), nullable=True)
    location: Mapped[str] = mapped_column(String(255), nullable=True)
    image_url: Mapped[str] = mapped_column(Text, nullable=True)
    tags: Mapped[list] = mapped_column(JSON, default=list)
    notes: Mapped[str] = mapped_column(Text, nullable=True)

    # Cost basis
    purchase_price: Mapped[float] = mapped_column(Float, nullable=False)
    purchase_date: Mapped[str] = mapped_column(String(30), nullable=False)
    estimated_value: Mapped[float] = mapped_column(Float, nullable=True)

    # in_inventory / listed / sold / returned
    status: Mapped[str] = mapped_column(String(20), default="in_inventory", nullable=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    sales: Mapped[list["SalesRecord"]] = relationship(
        "SalesRecord", back_populates="inventory_item", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<InventoryItem(id={self.id}, title='{self.title}', status='{self.status}')>"
