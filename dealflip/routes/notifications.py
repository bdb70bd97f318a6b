"""Notification and deal alert routes."""

import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.database import get_db
from dealflip.models import DealAlert, Notification
from dealflip.routes.crud import crud_router
from dealflip.schemas.notification import (
    DealAlertCreate,
    DealAlertRead,
    DealAlertUpdate,
    MarkAllReadRequest,
    NotificationCreate,
    NotificationRead,
    NotificationUpdate,
)
from dealflip.tasks.scan_deal_alerts import scan_deal_alerts

logger = logging.getLogger(__name__)

router = crud_router(
    path="/notifications",
    model=Notification,
    create_schema=NotificationCreate,
    update_schema=NotificationUpdate,
    read_schema=NotificationRead,
    label="Notification",
    tag="notifications",
)


@router.post("/notifications/mark-all-read")
def mark_all_read(payload: MarkAllReadRequest, db: Session = Depends(get_db)):
    """Flag every unread notification of one user as read."""
    updated = storage.mark_all_notifications_read(db, payload.user_id)
    return {"updated": updated}


alerts_router = crud_router(
    path="/deal-alerts",
    model=DealAlert,
    create_schema=DealAlertCreate,
    update_schema=DealAlertUpdate,
    read_schema=DealAlertRead,
    label="Deal alert",
    tag="deal-alerts",
)


@alerts_router.post("/deal-alerts/run", status_code=202)
def run_deal_alerts():
    """Queue an immediate alert scan instead of waiting for the schedule."""
    task = scan_deal_alerts.apply_async()
    logger.info(f"Queued deal alert scan {task.id}")
    return {"status": "queued", "taskId": task.id}
