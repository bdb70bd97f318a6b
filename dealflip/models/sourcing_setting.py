"""Sourcing settings model."""

from datetime import datetime
from sqlalchemy import String, DateTime, Float, ForeignKey, Boolean, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from dealflip.database import Base


class SourcingSetting(Base):
    """Saved sourcing preferences. Stored configuration only."""

    __tablename__ = "sourcing_settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    platforms: Mapped[list] = mapped_column(JSON, default=list)
    categories: Mapped[list] = mapped_column(JSON, default=list)
    max_price: Mapped[float] = mapped_column(Float, nullable=True)
    min_profit: Mapped[float] = mapped_column(Float, nullable=True)
    location: Mapped[str] = mapped_column(String(255), nullable=True)
    radius_miles: Mapped[int] = mapped_column(Integer, nullable=True)
    scan_interval_minutes: Mapped[int] = mapped_column(Integer, default=60)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<SourcingSetting(id={self.id}, name='{self.name}')>"
