"""Jinja2 environment for storefront pages."""

from pathlib import Path

from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
)


def format_rub(value: int) -> str:
    """1500 -> '1 500₽'"""
    return f"{value:,}".replace(",", " ") + "₽"


env.filters["rub"] = format_rub


def render_template(name: str, status_code: int = 200, **ctx) -> HTMLResponse:
    tpl = env.get_template(name)
    return HTMLResponse(tpl.render(**ctx), status_code=status_code)
