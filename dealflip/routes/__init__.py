"""API routers, mounted under the configured prefix by ``dealflip.main``."""

from dealflip.routes import ai, auth, competitors, deals, inventory, listings, market, notifications, sourcing, tasks

routers = [
    auth.router,
    deals.router,
    inventory.router,
    inventory.sales_router,
    notifications.router,
    notifications.alerts_router,
    competitors.router,
    listings.templates_router,
    listings.generated_router,
    sourcing.router,
    market.router,
    ai.router,
    tasks.router,
]

__all__ = ["routers"]
