"""Match new deals against saved deal alerts and notify their owners."""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from dealflip.database import SessionLocal
from dealflip.models import Deal, DealAlert, Notification
from dealflip.tasks.celery_app import celery_app

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, max_retries=3)
def scan_deal_alerts(self):
    """
    For each enabled DealAlert:
    - find the owner's active deals created since the alert last ran
    - keep the deals that pass every filter of the alert
    - create one deal_alert notification per match
    - stamp last_run_at
    """
    logger.info("Starting deal alert scan")

    db = SessionLocal()
    try:
        return run_alert_scan(db)
    except Exception as e:
        logger.error(f"Deal alert scan failed: {e}")
        db.rollback()
        raise self.retry(exc=e, countdown=60)
    finally:
        db.close()


def run_alert_scan(db: Session, now: Optional[datetime] = None) -> dict:
    """Scan every enabled alert once and commit the notifications."""
    now = now or datetime.utcnow()
    alerts_checked = 0
    notifications_created = 0

    alerts = db.query(DealAlert).filter(DealAlert.enabled == True).all()  # noqa: E712

    for alert in alerts:
        alerts_checked += 1

        query = (
            db.query(Deal)
            .filter(Deal.user_id == alert.user_id)
            .filter(Deal.status == "active")
        )
        if alert.last_run_at is not None:
            query = query.filter(Deal.created_at > alert.last_run_at)

        for deal in query.order_by(Deal.id.asc()).all():
            if not alert_matches(alert, deal):
                continue
            db.add(_notification_for(alert, deal))
            notifications_created += 1

        alert.last_run_at = now

    db.commit()

    logger.info(
        f"Deal alert scan complete: {notifications_created} notifications, {alerts_checked} alerts checked"
    )
    return {
        "status": "success",
        "alerts_checked": alerts_checked,
        "notifications_created": notifications_created,
    }


def alert_matches(alert: DealAlert, deal: Deal) -> bool:
    """True when ``deal`` passes every filter set on ``alert``."""
    text = f"{deal.title or ''} {deal.description or ''}".lower()

    keywords = [k.strip().lower() for k in (alert.keywords or []) if k and k.strip()]
    if keywords and not any(k in text for k in keywords):
        return False

    if alert.category and alert.category.strip().lower() not in text:
        return False

    price = deal.current_price
    if alert.min_price is not None and (price is None or price < alert.min_price):
        return False
    if alert.max_price is not None and (price is None or price > alert.max_price):
        return False

    if alert.condition:
        if (deal.condition or "").strip().lower() != alert.condition.strip().lower():
            return False

    sources = [s.strip().lower() for s in (alert.sources or []) if s and s.strip()]
    if sources:
        deal_source = (deal.source or "").lower()
        if not any(s in deal_source for s in sources):
            return False

    return True


def _notification_for(alert: DealAlert, deal: Deal) -> Notification:
    price = f" at ${deal.current_price:,.2f}" if deal.current_price is not None else ""
    return Notification(
        user_id=alert.user_id,
        title=f"New match for \"{alert.name}\"",
        message=f"{deal.title}{price} on {deal.source or 'an unknown source'}",
        type="deal_alert",
        read=False,
        data={"dealId": deal.id, "alertId": alert.id},
    )
