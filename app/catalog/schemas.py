"""Pydantic schemas for the static storefront catalog."""

from pydantic import BaseModel, Field


class Package(BaseModel):
    """Purchasable UC package."""

    id: int
    amount: int = Field(..., description="UC credited to the player")
    price: int = Field(..., description="Price in rubles")
    bonus: int | None = None
    popular: bool = False

    model_config = {"frozen": True}


class Review(BaseModel):
    id: int
    name: str
    rating: int = Field(..., ge=1, le=5)
    text: str

    model_config = {"frozen": True}

    @property
    def initial(self) -> str:
        return self.name[:1]


class FaqEntry(BaseModel):
    id: str
    question: str
    answer: str

    model_config = {"frozen": True}


class PaymentMethodInfo(BaseModel):
    """Payment method offered in the purchase dialog."""

    key: str
    label: str
    redirect: bool = False  # True if payment is confirmed on an external page

    model_config = {"frozen": True}


class PaymentCategory(BaseModel):
    icon: str
    title: str

    model_config = {"frozen": True}


class ShopStat(BaseModel):
    value: str
    label: str

    model_config = {"frozen": True}


class ContactChannel(BaseModel):
    icon: str
    title: str
    value: str

    model_config = {"frozen": True}


class NavLink(BaseModel):
    anchor: str
    title: str

    model_config = {"frozen": True}


# ============ Response Schemas ============

class PackageListResponse(BaseModel):
    packages: list[Package]
    count: int


class ReviewListResponse(BaseModel):
    reviews: list[Review]
    count: int


class FaqListResponse(BaseModel):
    entries: list[FaqEntry]


class PaymentMethodListResponse(BaseModel):
    methods: list[PaymentMethodInfo]
    default: str
