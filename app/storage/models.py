"""SQLAlchemy model backing per-visitor key-value storage."""

from datetime import datetime

from sqlalchemy import DateTime, LargeBinary, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class StorageEntry(Base):
    """One value in a visitor's storage namespace.

    The namespace is the visitor id issued in the visitor cookie, so
    each browser sees only its own keys.
    """

    __tablename__ = "storage_entries"

    namespace: Mapped[str] = mapped_column(String(64), primary_key=True)
    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
