"""Dashboard reporting routes: stats, market insights, price history."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.database import get_db
from dealflip.models import MarketInsight, PriceHistory, Stat
from dealflip.schemas.market import (
    MarketInsightCreate,
    MarketInsightRead,
    PriceHistoryCreate,
    PriceHistoryRead,
    StatCreate,
    StatRead,
    StatUpdate,
)

router = APIRouter(tags=["market"])


@router.get("/stats/user/{user_id}", response_model=list[StatRead])
def get_user_stats(user_id: int, db: Session = Depends(get_db)):
    return storage.list_for_user(db, Stat, user_id)


@router.post("/stats", response_model=StatRead, status_code=201)
def create_stat(payload: StatCreate, db: Session = Depends(get_db)):
    return storage.create(db, Stat, payload.model_dump(exclude_none=True))


@router.patch("/stats/{stat_id}", response_model=StatRead)
def update_stat(stat_id: int, payload: StatUpdate, db: Session = Depends(get_db)):
    stat = storage.update(db, Stat, stat_id, payload.model_dump(exclude_unset=True))
    if stat is None:
        raise HTTPException(status_code=404, detail="Stat not found")
    return stat


@router.get("/market-insights", response_model=list[MarketInsightRead])
def get_market_insights(db: Session = Depends(get_db)):
    return storage.list_all(db, MarketInsight)


@router.post("/market-insights", response_model=MarketInsightRead, status_code=201)
def create_market_insight(payload: MarketInsightCreate, db: Session = Depends(get_db)):
    return storage.create(db, MarketInsight, payload.model_dump(exclude_none=True))


@router.get("/price-history/{product_id}", response_model=list[PriceHistoryRead])
def get_price_history(product_id: str, db: Session = Depends(get_db)):
    """Price points for one product, oldest first."""
    return storage.price_history(db, product_id)


@router.post("/price-history", response_model=PriceHistoryRead, status_code=201)
def create_price_history(payload: PriceHistoryCreate, db: Session = Depends(get_db)):
    return storage.create(db, PriceHistory, payload.model_dump(exclude_none=True))
