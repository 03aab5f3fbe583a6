"""Sink for unconfirmed external actions emitted by the purchase flow.

Redirect-based payments hand the visitor to an external page and nothing
comes back. The controller publishes an ExternalAction here after the
record is stored, so a reconciliation mechanism (webhook receiver,
status polling) can subscribe later without touching the controller.
"""

import logging
from abc import ABC, abstractmethod

from app.purchases.schemas import ExternalAction

logger = logging.getLogger(__name__)


class ExternalActionSink(ABC):
    """Abstract receiver of fire-and-forget external actions."""

    @abstractmethod
    def emit(self, action: ExternalAction) -> None:
        pass


class LoggingActionSink(ExternalActionSink):
    """Records emitted actions in the application log only."""

    def emit(self, action: ExternalAction) -> None:
        logger.info(
            f"External action {action.kind} for record {action.record_id} "
            f"(unconfirmed): {action.url}"
        )


class RecordingActionSink(ExternalActionSink):
    """Keeps emitted actions in memory, for tests and local inspection."""

    def __init__(self):
        self.actions: list[ExternalAction] = []

    def emit(self, action: ExternalAction) -> None:
        self.actions.append(action)


action_sink = LoggingActionSink()
