"""Competitor price routes."""

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.database import get_db
from dealflip.models import CompetitorPrice
from dealflip.routes.crud import crud_router
from dealflip.schemas.competitor import (
    CompetitorPriceCreate,
    CompetitorPriceRead,
    CompetitorPriceUpdate,
)

router = crud_router(
    path="/competitor-prices",
    model=CompetitorPrice,
    create_schema=CompetitorPriceCreate,
    update_schema=CompetitorPriceUpdate,
    read_schema=CompetitorPriceRead,
    label="Competitor price",
    tag="competitor-prices",
)


@router.post("/competitor-prices/{item_id}/refresh", response_model=CompetitorPriceRead)
def refresh_competitor_price(item_id: int, db: Session = Depends(get_db)):
    """
    Re-check a competitor price.

    Stamps lastChecked and appends the current price to the price history
    kept under product id ``competitor-{id}``.
    """
    competitor = storage.refresh_competitor_price(db, item_id)
    if competitor is None:
        raise HTTPException(status_code=404, detail="Competitor price not found")
    return competitor
