"""Purchase flow: package selection and form submission."""

import logging
from datetime import datetime, timezone
from typing import Callable
from urllib.parse import urlencode

from app.catalog.schemas import Package
from app.catalog.service import get_payment_method, require_package
from app.config import Settings, get_settings
from app.purchases.actions import ExternalActionSink
from app.purchases.schemas import (
    ExternalAction,
    Notification,
    PurchaseRecord,
    PurchaseStatus,
    SubmissionResult,
    ViewState,
)
from app.purchases.store import PurchaseRecordStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_redirect_url(base_url: str, amount: int, price: int, player_id: str) -> str:
    """External payment page URL with amount, message and player id."""
    query = urlencode({
        "amount": price,
        "message": f"Покупка {amount} UC для Player ID: {player_id}",
        "player_id": player_id,
    })
    return f"{base_url}?{query}"


class PurchaseFlowController:
    """Validates purchase input and records purchases in the visitor's history.

    Holds no state of its own between requests: callers pass the current
    ViewState in and render the one returned.
    """

    def __init__(
        self,
        store: PurchaseRecordStore,
        action_sink: ExternalActionSink,
        settings: Settings | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.action_sink = action_sink
        self.settings = settings or get_settings()
        self.clock = clock

    def initial_state(self) -> ViewState:
        return ViewState(payment_method=self.settings.default_payment_method)

    def select_package(self, package_id: int, state: ViewState | None = None) -> ViewState:
        """Remember chosen package and open the purchase dialog."""
        require_package(package_id)
        state = state or self.initial_state()
        return state.model_copy(update={
            "selected_package_id": package_id,
            "purchase_dialog_open": True,
        })

    def open_history(self, state: ViewState | None = None) -> ViewState:
        state = state or self.initial_state()
        return state.model_copy(update={"history_dialog_open": True})

    def _reject(self, state: ViewState, text: str) -> SubmissionResult:
        notification = Notification(kind="error", text=text)
        return SubmissionResult(
            ok=False,
            notification=notification,
            state=state.model_copy(update={
                "purchase_dialog_open": True,
                "notification": notification,
                "external_action": None,
            }),
        )

    def _next_record_id(self, now: datetime) -> str:
        candidate = int(now.timestamp() * 1000)
        taken = self.store.ids()
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def submit(
        self,
        player_id: str,
        payment_method: str,
        package: Package,
        state: ViewState | None = None,
    ) -> SubmissionResult:
        """Validate the form and record a purchase.

        Invalid input leaves history untouched and keeps the dialog open
        with an error notification. Valid input prepends a record, closes
        the dialog and resets the form. For redirect payment methods the
        record is ``pending`` and an ExternalAction is emitted; otherwise
        the record is ``completed`` right away.
        """
        player_id = player_id or ""
        state = (state or self.initial_state()).model_copy(update={
            "selected_package_id": package.id,
            "player_id": player_id,
            "payment_method": payment_method,
        })

        if len(player_id) < self.settings.min_player_id_length:
            return self._reject(
                state,
                f"Введите корректный Player ID (минимум {self.settings.min_player_id_length} символов)",
            )

        method = get_payment_method(payment_method)
        if method is None:
            return self._reject(state, "Выберите способ оплаты")

        now = self.clock()
        record = PurchaseRecord(
            id=self._next_record_id(now),
            date=now,
            amount=package.amount,
            price=package.price,
            player_id=player_id,
            payment_method=method.label,
            status=PurchaseStatus.PENDING if method.redirect else PurchaseStatus.COMPLETED,
        )
        self.store.append(record)
        logger.info(
            f"Recorded purchase {record.id}: {record.amount} UC for {record.price} RUB "
            f"via {method.key} ({record.status.value})"
        )

        notification, action = self._confirmation(record)
        if action:
            self.action_sink.emit(action)

        return SubmissionResult(
            ok=True,
            record=record,
            notification=notification,
            external_action=action,
            state=state.model_copy(update={
                "player_id": "",
                "payment_method": self.settings.default_payment_method,
                "purchase_dialog_open": False,
                "notification": notification,
                "external_action": action,
            }),
        )

    def _confirmation(self, record: PurchaseRecord) -> tuple[Notification, ExternalAction | None]:
        # Only redirect-based payments produce pending records
        if record.status == PurchaseStatus.PENDING:
            action = ExternalAction(
                url=build_redirect_url(
                    self.settings.donationalerts_url, record.amount, record.price, record.player_id
                ),
                record_id=record.id,
            )
            notification = Notification(
                kind="success",
                text=f"Перенаправляем на страницу оплаты {record.payment_method}...",
            )
            return notification, action

        notification = Notification(
            kind="success",
            text=f"Покупка {record.amount} UC оформлена! UC будут зачислены на Player ID {record.player_id}",
        )
        return notification, None

    def confirmation_state(self, record_id: str, state: ViewState | None = None) -> ViewState:
        """State shown after redirecting from a successful submission.

        Rebuilds the notification (and redirect link) from the stored record
        without emitting anything. Unknown ids leave the state unchanged.
        """
        state = state or self.initial_state()
        record = next((r for r in self.store.all() if r.id == record_id), None)
        if record is None:
            return state

        notification, action = self._confirmation(record)
        return state.model_copy(update={
            "notification": notification,
            "external_action": action,
        })
