"""
Background fetch tasks.

A WorkerTask performs one blocking catalog call, converts the outcome to a
Message and sends it. It never touches controller state.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Protocol

from foodview.messages import (
    ChannelClosed,
    ErrorMessage,
    Message,
    MessageChannel,
    ProductDetailsMessage,
    RequestKind,
    SearchResultsMessage,
)
from foodview.providers import CatalogProvider, DecodeError, TransportError

logger = logging.getLogger(__name__)

# (transport failure, decode failure) prefixes per request kind
ERROR_PREFIXES = {
    RequestKind.SEARCH: ("Request failed", "Failed to parse response"),
    RequestKind.DETAIL: ("Details request failed", "Failed to parse details"),
}


def error_text(kind: RequestKind, exc: Exception) -> str:
    """User-facing text for a failed fetch."""
    transport_prefix, decode_prefix = ERROR_PREFIXES[kind]
    if isinstance(exc, TransportError):
        return f"{transport_prefix}: {exc}"
    if isinstance(exc, DecodeError):
        return f"{decode_prefix}: {exc}"
    return f"Unexpected error: {exc}"


@dataclass
class WorkerTask:
    """One fetch request and its single outcome."""

    request_id: int
    kind: RequestKind
    argument: str
    provider: CatalogProvider
    channel: MessageChannel
    sent: bool = field(default=False, init=False)

    @property
    def name(self) -> str:
        return f"fetch-{self.kind.value}-{self.request_id}"

    def _fetch(self) -> Message:
        if self.kind is RequestKind.SEARCH:
            products = self.provider.search(self.argument)
            return SearchResultsMessage(self.request_id, tuple(products))
        detail = self.provider.get_product(self.argument)
        return ProductDetailsMessage(self.request_id, detail)

    def run(self) -> None:
        """Fetch, decode and send exactly one message."""
        if self.sent:
            raise RuntimeError(f"{self.name} already ran")

        try:
            message = self._fetch()
        except (TransportError, DecodeError) as e:
            logger.warning("%s failed: %s", self.name, e)
            message = ErrorMessage(self.request_id, self.kind, error_text(self.kind, e))
        except Exception as e:
            logger.exception("%s raised unexpectedly", self.name)
            message = ErrorMessage(self.request_id, self.kind, error_text(self.kind, e))

        self.sent = True
        try:
            self.channel.send(message)
        except ChannelClosed as e:
            logger.warning("%s finished after shutdown: %s", self.name, e)


def search_task(
    request_id: int, term: str, provider: CatalogProvider, channel: MessageChannel
) -> WorkerTask:
    """Task that searches for ``term``."""
    return WorkerTask(request_id, RequestKind.SEARCH, term, provider, channel)


def detail_task(
    request_id: int, code: str, provider: CatalogProvider, channel: MessageChannel
) -> WorkerTask:
    """Task that looks up the product with barcode ``code``."""
    return WorkerTask(request_id, RequestKind.DETAIL, code, provider, channel)


TASK_FACTORIES = {
    RequestKind.SEARCH: search_task,
    RequestKind.DETAIL: detail_task,
}


class Spawner(Protocol):
    """Schedules a task to run independently of the caller."""

    def __call__(self, task: WorkerTask) -> None:
        ...


def thread_spawner(task: WorkerTask) -> None:
    """Run the task on its own daemon thread."""
    thread = threading.Thread(target=task.run, name=task.name, daemon=True)
    thread.start()
