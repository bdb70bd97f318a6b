"""User schemas."""

from datetime import datetime
from typing import Optional

from dealflip.schemas.base import CamelModel


class UserRead(CamelModel):
    """User as returned to clients; the password never leaves the server."""

    id: int
    username: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
