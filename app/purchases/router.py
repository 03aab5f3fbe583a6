"""API endpoints for purchases module."""

from fastapi import APIRouter, status

from app.catalog.service import require_package
from app.common.exceptions import ValidationException
from app.purchases.dependencies import FlowControllerDep, RecordStoreDep
from app.purchases.schemas import (
    PurchaseHistoryResponse,
    PurchaseRequest,
    PurchaseResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_purchase(
    request: PurchaseRequest,
    controller: FlowControllerDep,
):
    """
    Record a purchase in the visitor's history.

    - Player ID must be at least 6 characters
    - DonationAlerts payments are stored as `pending` and the response
      carries the external payment URL to open
    - All other methods are stored as `completed`

    No payment is processed and nothing is verified.
    """
    package = require_package(request.package_id)
    result = controller.submit(request.player_id, request.payment_method, package)
    if not result.ok:
        raise ValidationException(result.notification.text)

    return PurchaseResponse(
        record=result.record,
        notification=result.notification,
        external_action=result.external_action,
    )


@router.get("/history", response_model=PurchaseHistoryResponse)
def get_history(store: RecordStoreDep):
    """Get visitor's purchases, most recent first."""
    purchases = store.all()
    return PurchaseHistoryResponse(
        purchases=purchases,
        count=len(purchases),
        total=store.total(),
    )
