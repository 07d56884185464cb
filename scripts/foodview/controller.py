"""
Fetch-display controller.

Owns the view state, spawns a worker per fetch action and applies worker
messages once per UI cycle. All state changes happen on the caller's thread,
inside the action handlers and ``poll_messages``.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, replace
from enum import Enum

from foodview.messages import (
    ErrorMessage,
    Message,
    MessageChannel,
    ProductDetailsMessage,
    RequestKind,
    SearchResultsMessage,
)
from foodview.providers import CatalogProvider, Product, ProductDetail
from foodview.workers import TASK_FACTORIES, Spawner, thread_spawner

logger = logging.getLogger(__name__)

# Detail lookups for products without a barcode still go out, under this code.
UNKNOWN_CODE = "unknown"


class ViewState(Enum):
    SEARCH_RESULTS = "search_results"
    PRODUCT_DETAILS = "product_details"


@dataclass(frozen=True)
class ControllerState:
    """Immutable snapshot of what the screens display."""

    search_term: str = ""
    results: tuple[Product, ...] = ()
    selected: ProductDetail | None = None
    view: ViewState = ViewState.SEARCH_RESULTS
    loading: bool = False
    error: str | None = None


class FetchDisplayController:
    """Drives ControllerState from user actions and worker messages.

    With ``fence_stale`` set, a message is applied only if it answers the most
    recent request of its kind; superseded requests still run to completion
    but their messages are dropped. Without it, every message is applied and
    the last one wins.
    """

    def __init__(
        self,
        provider: CatalogProvider,
        spawner: Spawner = thread_spawner,
        channel: MessageChannel | None = None,
        fence_stale: bool = True,
    ) -> None:
        self._provider = provider
        self._spawn = spawner
        self._channel = channel or MessageChannel()
        self._fence_stale = fence_stale
        self._state = ControllerState()
        self._request_ids = itertools.count(1)
        self._latest: dict[RequestKind, int] = {}

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def channel(self) -> MessageChannel:
        return self._channel

    def _start(self, kind: RequestKind, argument: str) -> int:
        request_id = next(self._request_ids)
        self._latest[kind] = request_id
        task = TASK_FACTORIES[kind](request_id, argument, self._provider, self._channel)
        logger.debug("Spawning %s for %r", task.name, argument)
        self._spawn(task)
        return request_id

    def on_search_submitted(self, term: str) -> int:
        """Start a search. Previous results stay visible until it lands."""
        self._state = replace(self._state, search_term=term, loading=True, error=None)
        return self._start(RequestKind.SEARCH, term)

    def on_product_selected(self, product: Product) -> int:
        """Switch to the detail view and start a detail lookup."""
        code = product.code
        if code is None:
            logger.warning("Product %r has no code, requesting %r", product.name, UNKNOWN_CODE)
            code = UNKNOWN_CODE
        self._state = replace(
            self._state, view=ViewState.PRODUCT_DETAILS, loading=True, error=None
        )
        return self._start(RequestKind.DETAIL, code)

    def on_back_requested(self) -> None:
        """Return to the search results."""
        self._state = replace(self._state, view=ViewState.SEARCH_RESULTS, selected=None)

    def _is_stale(self, message: Message) -> bool:
        return self._fence_stale and message.request_id != self._latest.get(message.kind)

    def _apply(self, message: Message) -> None:
        if isinstance(message, SearchResultsMessage):
            self._state = replace(self._state, results=message.products, loading=False)
        elif isinstance(message, ProductDetailsMessage):
            self._state = replace(self._state, selected=message.detail, loading=False)
        elif isinstance(message, ErrorMessage):
            self._state = replace(self._state, error=message.text, loading=False)
        else:
            raise TypeError(f"Unknown message type: {type(message).__name__}")

    def poll_messages(self) -> int:
        """Apply every queued message in arrival order. Never blocks.

        Returns the number of messages that changed state.
        """
        applied = 0
        for message in self._channel.drain():
            if self._is_stale(message):
                logger.debug(
                    "Dropping stale %s message for request %d",
                    message.kind.value,
                    message.request_id,
                )
                continue
            self._apply(message)
            applied += 1
        return applied

    def shutdown(self) -> None:
        """Stop accepting messages; workers still in flight end quietly."""
        self._channel.close()
