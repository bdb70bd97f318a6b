"""Deal model."""

from datetime import datetime
from sqlalchemy import String, DateTime, Float, ForeignKey, Text, Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column

from dealflip.database import Base


class Deal(Base):
    """A sourced buy opportunity tracked by a user."""

    __tablename__ = "deals"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    # Listing details
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    source: Mapped[str] = mapped_column(String(100), nullable=True)
    posted_time: Mapped[str] = mapped_column(String(100), nullable=True)
    image_url: Mapped[str] = mapped_column(Text, nullable=True)
    condition: Mapped[str] = mapped_column(String(50), nullable=True)

    # Pricing
    original_price: Mapped[float] = mapped_column(Float, nullable=True)
    current_price: Mapped[float] = mapped_column(Float, nullable=True)
    estimated_profit: Mapped[float] = mapped_column(Float, nullable=True)
    avg_resell_low: Mapped[float] = mapped_column(Float, nullable=True)
    avg_resell_high: Mapped[float] = mapped_column(Float, nullable=True)

    # Scoring
    sell_time_estimate: Mapped[str] = mapped_column(String(100), nullable=True)
    demand: Mapped[str] = mapped_column(String(50), nullable=True)
    match_score: Mapped[int] = mapped_column(Integer, nullable=True)
    is_hot_deal: Mapped[bool] = mapped_column(Boolean, default=False)

    # active / tracked / purchased / sold / ignored
    status: Mapped[str] = mapped_column(String(20), default="active")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Deal(id={self.id}, title='{self.title}', status='{self.status}')>"
