"""Subscribers that consume custom messages and queries arriving from peers."""

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union


@dataclass(frozen=True)
class SubscriberContext:
    """Where a message or query came from and which node received it."""

    adnl: Any
    local_id: bytes
    peer_id: bytes


@dataclass(frozen=True)
class Consumed:
    """The query was accepted; ``answer`` is sent back unless it is None."""

    answer: Optional[bytes] = None


@dataclass(frozen=True)
class Rejected:
    """The query was declined and goes on to the next subscriber."""

    query: bytes


QueryConsumingResult = Union[Consumed, Rejected]


class MessageSubscriber(ABC):
    """Consumer of custom messages."""

    @abstractmethod
    async def try_consume_custom(
        self, ctx: SubscriberContext, constructor: int, data: bytes
    ) -> bool:
        """Handle a message; return True if it was consumed."""


class QuerySubscriber(ABC):
    """Consumer of queries."""

    @abstractmethod
    async def try_consume_query(
        self, ctx: SubscriberContext, constructor: int, query: bytes
    ) -> QueryConsumingResult:
        """Handle a query, returning :class:`Consumed` or :class:`Rejected`."""


@dataclass(frozen=True)
class QueryProcessingResult:
    """Outcome of offering a query to a chain of subscribers."""

    processed: bool
    answer: Optional[bytes] = None

    @property
    def rejected(self) -> bool:
        """True if no subscriber consumed the query."""
        return not self.processed


_CONSTRUCTOR = struct.Struct("<I")


async def process_query(
    ctx: SubscriberContext,
    subscribers: Iterable[QuerySubscriber],
    query: bytes,
) -> QueryProcessingResult:
    """Offer ``query`` to each subscriber in turn until one consumes it.

    Raises ValueError if the query is too short to hold a constructor id.
    """
    query = bytes(query)
    if len(query) < _CONSTRUCTOR.size:
        raise ValueError("query is too short to contain a constructor")
    (constructor,) = _CONSTRUCTOR.unpack_from(query)

    for subscriber in subscribers:
        result = await subscriber.try_consume_query(ctx, constructor, query)
        if isinstance(result, Consumed):
            return QueryProcessingResult(processed=True, answer=result.answer)
        if isinstance(result, Rejected):
            query = result.query
            continue
        raise TypeError(f"unexpected query consuming result: {result!r}")

    return QueryProcessingResult(processed=False)