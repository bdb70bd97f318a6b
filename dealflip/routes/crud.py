"""Router factory for the list/get/create/patch/delete resource shape."""

from typing import Callable, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.database import Base, get_db


def crud_router(
    *,
    path: str,
    model: Type[Base],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
    label: str,
    tag: str,
    create_handler: Optional[Callable] = None,
) -> APIRouter:
    """
    Build a router exposing one table as a REST resource.

    Args:
        path: URL segment, e.g. "/deals"
        model: SQLAlchemy model backing the resource
        create_schema: Body schema for POST
        update_schema: Body schema for PATCH (all fields optional)
        read_schema: Response schema
        label: Human name used in 404 messages, e.g. "Deal"
        tag: OpenAPI tag
        create_handler: Replaces the default insert; called as
            ``create_handler(db, values)`` and returning the new row

    Routes:
        GET    {path}/user/{user_id}
        GET    {path}/{id}
        POST   {path}            -> 201
        PATCH  {path}/{id}
        DELETE {path}/{id}       -> 204
    """
    router = APIRouter(tags=[tag])

    @router.get(f"{path}/user/{{user_id}}", response_model=list[read_schema])
    def list_for_user(user_id: int, db: Session = Depends(get_db)):
        return storage.list_for_user(db, model, user_id)

    @router.get(f"{path}/{{item_id}}", response_model=read_schema)
    def get_one(item_id: int, db: Session = Depends(get_db)):
        row = storage.get(db, model, item_id)
        if row is None:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        return row

    @router.post(path, response_model=read_schema, status_code=201)
    def create(payload: create_schema, db: Session = Depends(get_db)):
        values = payload.model_dump(exclude_none=True)
        if create_handler is not None:
            return create_handler(db, values)
        return storage.create(db, model, values)

    @router.patch(f"{path}/{{item_id}}", response_model=read_schema)
    def update(item_id: int, payload: update_schema, db: Session = Depends(get_db)):
        row = storage.update(db, model, item_id, payload.model_dump(exclude_unset=True))
        if row is None:
            raise HTTPException(status_code=404, detail=f"{label} not found")
        return row

    @router.delete(f"{path}/{{item_id}}", status_code=204)
    def delete(item_id: int, db: Session = Depends(get_db)):
        if not storage.delete(db, model, item_id):
            raise HTTPException(status_code=404, detail=f"{label} not found")
        return Response(status_code=204)

    return router
