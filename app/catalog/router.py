"""API endpoints for the static catalog."""

from fastapi import APIRouter

from app.catalog import service
from app.catalog.data import FAQ, PACKAGES, PAYMENT_METHODS, REVIEWS
from app.catalog.schemas import (
    FaqListResponse,
    Package,
    PackageListResponse,
    PaymentMethodListResponse,
    ReviewListResponse,
)
from app.config import get_settings

router = APIRouter()
settings = get_settings()


@router.get("/packages", response_model=PackageListResponse)
def list_packages():
    """List UC packages in display order."""
    return PackageListResponse(packages=list(PACKAGES), count=len(PACKAGES))


@router.get("/packages/{package_id}", response_model=Package)
def get_package(package_id: int):
    return service.require_package(package_id)


@router.get("/reviews", response_model=ReviewListResponse)
def list_reviews():
    return ReviewListResponse(reviews=list(REVIEWS), count=len(REVIEWS))


@router.get("/faq", response_model=FaqListResponse)
def list_faq():
    return FaqListResponse(entries=list(FAQ))


@router.get("/payment-methods", response_model=PaymentMethodListResponse)
def list_payment_methods():
    """Payment methods accepted by the purchase dialog."""
    return PaymentMethodListResponse(
        methods=list(PAYMENT_METHODS),
        default=settings.default_payment_method,
    )
