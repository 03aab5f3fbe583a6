"""HTML storefront: the single page and its purchase form."""

from typing import Annotated

from fastapi import APIRouter, Form, Query, status
from fastapi.responses import RedirectResponse

from app.catalog.service import require_package
from app.config import get_settings
from app.purchases.dependencies import FlowControllerDep
from app.storefront.rendering import render_template
from app.storefront.service import build_page_context

router = APIRouter()
settings = get_settings()


@router.get("/", include_in_schema=False)
def index(
    controller: FlowControllerDep,
    package: int | None = Query(default=None, description="Open purchase dialog for package"),
    history: bool = Query(default=False, description="Open purchase history dialog"),
    purchased: str | None = Query(default=None, description="Record id to confirm after a purchase"),
):
    state = controller.initial_state()
    if package is not None:
        state = controller.select_package(package, state)
    if history:
        state = controller.open_history(state)
    if purchased:
        state = controller.confirmation_state(purchased, state)

    return render_template("index.html", **build_page_context(state, controller.store, settings))


@router.post("/purchase", include_in_schema=False)
def submit_purchase(
    controller: FlowControllerDep,
    package_id: Annotated[int, Form()],
    player_id: Annotated[str, Form()] = "",
    payment_method: Annotated[str, Form()] = "",
):
    """Handle purchase dialog form.

    Success redirects to the page (303) so a refresh does not re-submit;
    validation errors re-render the open dialog.
    """
    package = require_package(package_id)
    result = controller.submit(
        player_id,
        payment_method or settings.default_payment_method,
        package,
    )
    if result.ok:
        return RedirectResponse(
            url=f"/?purchased={result.record.id}",
            status_code=status.HTTP_303_SEE_OTHER,
        )

    return render_template(
        "index.html",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        **build_page_context(result.state, controller.store, settings),
    )
