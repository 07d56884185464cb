"""What the screens show for a given controller state.

Kept free of Textual so the rules can be checked without a terminal.
"""

from __future__ import annotations

from enum import Enum

from foodview.controller import ControllerState, ViewState
from foodview.providers import Product, ProductDetail

LOADING_TEXT = "Loading..."
NO_RESULTS_TEXT = "No products found."
PROMPT_TEXT = "Type a product name and press Enter."
UNNAMED_PRODUCT = "(unnamed product)"
NOT_AVAILABLE = "N/A"


class BodyKind(Enum):
    LOADING = "loading"
    ERROR = "error"
    RESULTS = "results"
    NO_RESULTS = "no_results"
    DETAILS = "details"
    NO_DETAILS = "no_details"


def body_kind(state: ControllerState) -> BodyKind:
    """Loading beats error, error beats the normal view body."""
    if state.loading:
        return BodyKind.LOADING
    if state.error is not None:
        return BodyKind.ERROR
    if state.view is ViewState.PRODUCT_DETAILS:
        return BodyKind.DETAILS if state.selected else BodyKind.NO_DETAILS
    return BodyKind.RESULTS if state.results else BodyKind.NO_RESULTS


def error_text(error: str) -> str:
    return f"Error: {error}"


def product_label(product: Product) -> str:
    return product.name or product.code or UNNAMED_PRODUCT


def detail_title(detail: ProductDetail) -> str:
    return detail.name or detail.code


def detail_lines(detail: ProductDetail) -> list[str]:
    """Body lines of the product panel, heading excluded."""
    return [
        f"Ingredients: {detail.ingredients_text or NOT_AVAILABLE}",
        f"Brand: {detail.brand or NOT_AVAILABLE}",
        f"Barcode: {detail.code}",
    ]


def search_status_text(state: ControllerState) -> str:
    """Status line above the results list."""
    kind = body_kind(state)
    if kind is BodyKind.LOADING:
        return LOADING_TEXT
    if kind is BodyKind.ERROR:
        return error_text(state.error)
    if kind is BodyKind.RESULTS:
        return f"Search Results ({len(state.results)})"
    if state.search_term:
        return NO_RESULTS_TEXT
    return PROMPT_TEXT
