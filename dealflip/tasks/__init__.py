"""Celery tasks."""

from dealflip.tasks.celery_app import celery_app
from dealflip.tasks.scan_deal_alerts import scan_deal_alerts

__all__ = [
    "celery_app",
    "scan_deal_alerts",
]
