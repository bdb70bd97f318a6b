"""Current-user route."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.auth import Principal, get_principal
from dealflip.database import get_db
from dealflip.models import User
from dealflip.schemas.user import UserRead

router = APIRouter(tags=["auth"])


@router.get("/auth/user", response_model=UserRead)
def get_current_user(
    principal: Principal = Depends(get_principal),
    db: Session = Depends(get_db),
):
    """The user the request acts as. The password is never serialized."""
    user = storage.get(db, User, principal.user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
