"""Sourcing settings routes. Stored configuration, nothing consumes it yet."""

from dealflip.models import SourcingSetting
from dealflip.routes.crud import crud_router
from dealflip.schemas.sourcing import (
    SourcingSettingCreate,
    SourcingSettingRead,
    SourcingSettingUpdate,
)

router = crud_router(
    path="/sourcing-settings",
    model=SourcingSetting,
    create_schema=SourcingSettingCreate,
    update_schema=SourcingSettingUpdate,
    read_schema=SourcingSettingRead,
    label="Sourcing setting",
    tag="sourcing",
)
