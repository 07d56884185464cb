"""
Outcome messages and the channel that carries them from workers to the controller.

Every worker sends exactly one message. The channel is the only object shared
between worker threads and the foreground loop.
"""

from __future__ import annotations

import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from foodview.providers import Product, ProductDetail


class RequestKind(str, Enum):
    """Which action class a request belongs to."""

    SEARCH = "search"
    DETAIL = "detail"


@dataclass(frozen=True)
class Message(ABC):
    """Base for worker outcomes; ``request_id`` names the request that produced it."""

    request_id: int

    @property
    @abstractmethod
    def kind(self) -> RequestKind:
        """The request kind this message answers."""
        raise NotImplementedError


@dataclass(frozen=True)
class SearchResultsMessage(Message):
    products: tuple[Product, ...] = ()

    KIND: ClassVar[RequestKind] = RequestKind.SEARCH

    @property
    def kind(self) -> RequestKind:
        return self.KIND


@dataclass(frozen=True)
class ProductDetailsMessage(Message):
    detail: ProductDetail

    KIND: ClassVar[RequestKind] = RequestKind.DETAIL

    @property
    def kind(self) -> RequestKind:
        return self.KIND


@dataclass(frozen=True)
class ErrorMessage(Message):
    """A failed fetch, already rendered as user-facing text."""

    request_kind: RequestKind
    text: str

    @property
    def kind(self) -> RequestKind:
        return self.request_kind


class ChannelClosed(Exception):
    """Raised when sending on a channel whose receiver is gone."""


class MessageChannel:
    """Unbounded FIFO; many producers, one consumer.

    ``send`` never blocks. ``drain`` never blocks and returns whatever was
    queued at call time, in the order it was sent.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[Message] = queue.SimpleQueue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, message: Message) -> None:
        if self._closed.is_set():
            raise ChannelClosed(f"channel closed, dropping request {message.request_id}")
        self._queue.put(message)

    def drain(self) -> list[Message]:
        messages: list[Message] = []
        while True:
            try:
                messages.append(self._queue.get_nowait())
            except queue.Empty:
                return messages

    def close(self) -> None:
        self._closed.set()
