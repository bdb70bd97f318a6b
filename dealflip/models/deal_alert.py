"""Deal alert model."""

from datetime import datetime
from sqlalchemy import String, DateTime, Float, ForeignKey, Boolean, JSON
from sqlalchemy.orm import Mapped, mapped_column

from dealflip.database import Base


class DealAlert(Base):
    """A saved search that the alert scanner matches new deals against."""

    __tablename__ = "deal_alerts"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Search criteria
    keywords: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=True)
    min_price: Mapped[float] = mapped_column(Float, nullable=True)
    max_price: Mapped[float] = mapped_column(Float, nullable=True)
    condition: Mapped[str] = mapped_column(String(50), nullable=True)
    sources: Mapped[list] = mapped_column(JSON, default=list, nullable=False)

    # Toggles
    enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    instant_notification: Mapped[bool] = mapped_column(Boolean, default=True)
    email_notification: Mapped[bool] = mapped_column(Boolean, default=False)

    # Timestamps
    last_run_at: Mapped[datetime] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<DealAlert(id={self.id}, name='{self.name}', enabled={self.enabled})>"
