"""Competitor price model."""

from datetime import datetime
from sqlalchemy import String, DateTime, Float, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from dealflip.database import Base


class CompetitorPrice(Base):
    """An observed price for a comparable listing on another platform."""

    __tablename__ = "competitor_prices"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    deal_id: Mapped[int] = mapped_column(ForeignKey("deals.id", ondelete="SET NULL"), nullable=True)

    platform: Mapped[str] = mapped_column(String(100), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    condition: Mapped[str] = mapped_column(String(50), nullable=True)
    shipping: Mapped[float] = mapped_column(Float, nullable=True)
    rating: Mapped[float] = mapped_column(Float, nullable=True)
    seller_name: Mapped[str] = mapped_column(String(255), nullable=True)
    availability: Mapped[str] = mapped_column(String(100), nullable=True)

    # Timestamps
    last_checked: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<CompetitorPrice(id={self.id}, platform='{self.platform}', price={self.price})>"
