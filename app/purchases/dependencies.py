"""FastAPI dependencies for purchases module."""

from typing import Annotated

from fastapi import Depends

from app.config import get_settings
from app.purchases.actions import ExternalActionSink, action_sink
from app.purchases.service import PurchaseFlowController
from app.purchases.store import PurchaseRecordStore
from app.storage.dependencies import StorageDep


def get_record_store(storage: StorageDep) -> PurchaseRecordStore:
    store = PurchaseRecordStore(storage, key=get_settings().storage_key)
    store.load()
    return store


def get_action_sink() -> ExternalActionSink:
    return action_sink


def get_flow_controller(
    store: PurchaseRecordStore = Depends(get_record_store),
    sink: ExternalActionSink = Depends(get_action_sink),
) -> PurchaseFlowController:
    return PurchaseFlowController(store, sink)


RecordStoreDep = Annotated[PurchaseRecordStore, Depends(get_record_store)]
FlowControllerDep = Annotated[PurchaseFlowController, Depends(get_flow_controller)]
