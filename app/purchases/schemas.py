"""Pydantic schemas for the purchase flow."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from app.config import get_settings


class PurchaseStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class PurchaseRecord(BaseModel):
    """One purchase stored in the visitor's history.

    Serialized with camelCase keys (``playerId``, ``paymentMethod``) so
    the stored list keeps the same shape as the page's own records.
    """

    id: str
    date: datetime
    amount: int
    price: int
    player_id: str = Field(..., alias="playerId")
    payment_method: str = Field(..., alias="paymentMethod")  # display label
    status: PurchaseStatus

    model_config = {"frozen": True, "populate_by_name": True}


class Notification(BaseModel):
    """Transient toast shown after an interaction."""

    kind: Literal["success", "error"]
    text: str


class ExternalAction(BaseModel):
    """Browser navigation the shop triggers but never confirms.

    Emitted for redirect-based payment methods. Nothing in this system
    observes the outcome; a record created alongside stays ``pending``.
    """

    kind: Literal["payment_redirect"] = "payment_redirect"
    url: str
    record_id: str
    confirmed: bool = False


class ViewState(BaseModel):
    """UI state of the storefront screen."""

    selected_package_id: int | None = None
    player_id: str = ""
    payment_method: str = Field(default_factory=lambda: get_settings().default_payment_method)
    purchase_dialog_open: bool = False
    history_dialog_open: bool = False
    notification: Notification | None = None
    external_action: ExternalAction | None = None


class SubmissionResult(BaseModel):
    """Outcome of a purchase form submission."""

    ok: bool
    record: PurchaseRecord | None = None
    notification: Notification
    external_action: ExternalAction | None = None
    state: ViewState


# ============ API Schemas ============

class PurchaseRequest(BaseModel):
    package_id: int
    player_id: str = Field(..., max_length=64)
    payment_method: str = Field(default_factory=lambda: get_settings().default_payment_method)


class PurchaseResponse(BaseModel):
    record: PurchaseRecord
    notification: Notification
    external_action: ExternalAction | None = None


class PurchaseHistoryResponse(BaseModel):
    """Visitor's purchases, most recent first."""

    purchases: list[PurchaseRecord]
    count: int
    total: int
