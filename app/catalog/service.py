"""Lookups over the static catalog."""

from app.catalog.data import PACKAGES, PAYMENT_METHODS
from app.catalog.schemas import Package, PaymentMethodInfo
from app.common.exceptions import PackageNotFoundException


def get_package(package_id: int) -> Package | None:
    return next((pkg for pkg in PACKAGES if pkg.id == package_id), None)


def require_package(package_id: int) -> Package:
    """Get package by id or raise 404."""
    package = get_package(package_id)
    if package is None:
        raise PackageNotFoundException(package_id)
    return package


def get_payment_method(key: str) -> PaymentMethodInfo | None:
    return next((method for method in PAYMENT_METHODS if method.key == key), None)
