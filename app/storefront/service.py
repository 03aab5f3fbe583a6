"""Template context for the storefront page."""

from datetime import datetime, timezone

from app.catalog import data
from app.catalog.service import get_package
from app.config import Settings
from app.purchases.schemas import PurchaseStatus, ViewState
from app.purchases.store import PurchaseRecordStore

STATUS_LABELS = {
    PurchaseStatus.COMPLETED: "Выполнено",
    PurchaseStatus.PENDING: "Ожидает оплаты",
    PurchaseStatus.FAILED: "Ошибка",
}


def build_page_context(state: ViewState, store: PurchaseRecordStore, settings: Settings) -> dict:
    selected = get_package(state.selected_package_id) if state.selected_package_id else None
    return {
        "shop_name": settings.shop_name,
        "cdn_base_url": settings.cdn_base_url,
        "nav_links": data.NAV_LINKS,
        "packages": data.PACKAGES,
        "reviews": data.REVIEWS,
        "faq": data.FAQ,
        "stats": data.SHOP_STATS,
        "payment_categories": data.PAYMENT_CATEGORIES,
        "payment_methods": data.PAYMENT_METHODS,
        "contacts": data.CONTACTS,
        "social_icons": data.SOCIAL_ICONS,
        "min_player_id_length": settings.min_player_id_length,
        "state": state,
        "selected_package": selected,
        "history": store.all(),
        "history_total": store.total(),
        "status_labels": STATUS_LABELS,
        "year": datetime.now(timezone.utc).year,
    }
