"""FastAPI dependencies for visitor storage."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.storage.service import KeyValueStorage, SqlStorage


def get_visitor_id(request: Request) -> str:
    return request.state.visitor_id


def get_storage(
    db: Session = Depends(get_db),
    visitor_id: str = Depends(get_visitor_id),
) -> KeyValueStorage:
    return SqlStorage(db, namespace=visitor_id)


StorageDep = Annotated[KeyValueStorage, Depends(get_storage)]
