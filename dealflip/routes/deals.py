"""Deal routes."""

from fastapi import Depends
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.database import get_db
from dealflip.models import Deal
from dealflip.routes.crud import crud_router
from dealflip.schemas.deal import DealCreate, DealRead, DealUpdate

router = crud_router(
    path="/deals",
    model=Deal,
    create_schema=DealCreate,
    update_schema=DealUpdate,
    read_schema=DealRead,
    label="Deal",
    tag="deals",
)


@router.get("/deals", response_model=list[DealRead])
def list_deals(db: Session = Depends(get_db)):
    """All deals regardless of owner."""
    return storage.list_all(db, Deal)
