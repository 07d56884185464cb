"""
Concrete implementation of CatalogProvider backed by the Open Food Facts HTTP API.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from foodview.config import Settings, settings as default_settings
from foodview.providers import DecodeError, Product, ProductDetail, TransportError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/cgi/search.pl"
PRODUCT_PATH = "/api/v0/product/{code}.json"


def _optional_str(data: dict, key: str) -> str | None:
    """Read an optional scalar field as a string."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise DecodeError(f"field '{key}' has unexpected type {type(value).__name__}")
    return str(value)


def _product_from_dict(data: Any) -> Product:
    """Convert one search hit to a Product."""
    if not isinstance(data, dict):
        raise DecodeError(f"expected product object, got {type(data).__name__}")
    return Product(
        code=_optional_str(data, "code"),
        name=_optional_str(data, "product_name"),
    )


def _detail_from_dict(envelope: Any, requested_code: str) -> ProductDetail:
    """Convert a product lookup response to a ProductDetail."""
    if not isinstance(envelope, dict):
        raise DecodeError(f"expected response object, got {type(envelope).__name__}")

    product = envelope.get("product")
    if envelope.get("status") == 0 or product is None:
        reason = envelope.get("status_verbose") or "not found"
        raise DecodeError(f"product {requested_code}: {reason}")
    if not isinstance(product, dict):
        raise DecodeError(f"expected product object, got {type(product).__name__}")

    code = _optional_str(product, "code") or _optional_str(envelope, "code")
    if not code:
        raise DecodeError("missing field 'code'")

    return ProductDetail(
        code=code,
        name=_optional_str(product, "product_name"),
        ingredients_text=_optional_str(product, "ingredients_text"),
        brand=_optional_str(product, "brands"),
    )


class OpenFoodFactsProvider:
    """CatalogProvider implementation that talks to world.openfoodfacts.org."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ):
        self._settings = settings or default_settings
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = self._settings.user_agent

    def _get_json(self, path: str, params: dict | None = None) -> Any:
        """GET a path under the base URL and decode the JSON body."""
        url = f"{self._settings.base_url}{path}"
        try:
            response = self._session.get(
                url, params=params, timeout=self._settings.request_timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("GET %s failed: %s", url, e)
            raise TransportError(str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning("GET %s returned invalid JSON: %s", url, e)
            raise DecodeError(str(e)) from e

    def search(self, term: str) -> list[Product]:
        """Search products by name. One page only."""
        data = self._get_json(
            SEARCH_PATH,
            params={
                "search_terms": term,
                "search_simple": 1,
                "action": "process",
                "json": 1,
                "page_size": self._settings.page_size,
            },
        )
        if not isinstance(data, dict):
            raise DecodeError(f"expected response object, got {type(data).__name__}")

        products = data.get("products")
        if not isinstance(products, list):
            raise DecodeError("missing field 'products'")
        return [_product_from_dict(p) for p in products]

    def get_product(self, code: str) -> ProductDetail:
        """Get details of a specific product."""
        data = self._get_json(PRODUCT_PATH.format(code=quote(code, safe="")))
        return _detail_from_dict(data, code)

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
