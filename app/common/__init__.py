from app.common.exceptions import (
    AppException,
    NotFoundException,
    PackageNotFoundException,
    ValidationException,
)

__all__ = [
    "AppException",
    "NotFoundException",
    "PackageNotFoundException",
    "ValidationException",
]
