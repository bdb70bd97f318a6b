"""Inventory and sales routes."""

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.database import get_db
from dealflip.models import InventoryItem, SalesRecord
from dealflip.routes.crud import crud_router
from dealflip.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemRead,
    InventoryItemUpdate,
    InventorySummary,
    SalesRecordCreate,
    SalesRecordRead,
    SalesRecordUpdate,
)

router = crud_router(
    path="/inventory",
    model=InventoryItem,
    create_schema=InventoryItemCreate,
    update_schema=InventoryItemUpdate,
    read_schema=InventoryItemRead,
    label="Inventory item",
    tag="inventory",
)


@router.get("/inventory/summary/user/{user_id}", response_model=InventorySummary)
def inventory_summary(user_id: int, db: Session = Depends(get_db)):
    """Counts and values of unsold items per category, plus status counts."""
    return storage.inventory_summary(db, user_id)


def _record_sale(db: Session, values: dict) -> SalesRecord:
    sale = storage.record_sale(db, values)
    if sale is None:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return sale


sales_router = crud_router(
    path="/sales",
    model=SalesRecord,
    create_schema=SalesRecordCreate,
    update_schema=SalesRecordUpdate,
    read_schema=SalesRecordRead,
    label="Sales record",
    tag="sales",
    create_handler=_record_sale,
)
