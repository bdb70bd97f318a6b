"""Request principal.

There is no real login: a request acts as the user named in its
``X-User-Id`` header, or as the configured demo user when the header is
absent.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from dealflip.config import settings


@dataclass(frozen=True)
class Principal:
    """The user a request acts on behalf of."""

    user_id: int


def get_principal(x_user_id: Optional[int] = Header(default=None)) -> Principal:
    """Dependency resolving the principal for the current request."""
    if x_user_id is not None:
        return Principal(user_id=x_user_id)
    return Principal(user_id=settings.demo_user_id)
