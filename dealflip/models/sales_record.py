"""Sales record model."""

from datetime import datetime
from sqlalchemy import String, DateTime, Float, ForeignKey, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dealflip.database import Base


class SalesRecord(Base):
    """The closing transaction for an inventory item."""

    __tablename__ = "sales_records"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    inventory_item_id: Mapped[int] = mapped_column(
        ForeignKey("inventory_items.id"), nullable=False, index=True
    )

    # Sale details
    sale_price: Mapped[float] = mapped_column(Float, nullable=False)
    sale_date: Mapped[str] = mapped_column(String(30), nullable=False)
    platform_sold: Mapped[str] = mapped_column(String(100), nullable=True)
    fees: Mapped[float] = mapped_column(Float, nullable=True)
    shipping_cost: Mapped[float] = mapped_column(Float, nullable=True)
    # salePrice - purchasePrice - fees - shippingCost, fixed at insert time
    profit: Mapped[float] = mapped_column(Float, nullable=False)
    buyer_info: Mapped[dict] = mapped_column(JSON, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    inventory_item: Mapped["InventoryItem"] = relationship("InventoryItem", back_populates="sales")

    def __repr__(self) -> str:
        return f"<SalesRecord(id={self.id}, item={self.inventory_item_id}, profit={self.profit})>"
