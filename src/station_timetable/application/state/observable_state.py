"""Current state value with change notifications."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")


class ObservableState(Generic[S]):
    """Holds the current state and notifies subscribers of every change.

    Updates that do not change the state are not published.
    """

    def __init__(self, initial: S) -> None:
        self._value = initial
        self._subscribers: set[asyncio.Queue[S]] = set()

    @property
    def value(self) -> S:
        return self._value

    def update(self, value: S) -> None:
        if value == self._value:
            return
        self._value = value
        for queue in self._subscribers:
            queue.put_nowait(value)

    async def subscribe(self) -> AsyncIterator[S]:
        """Yield the current state and then every new state.

        Subscribers do not miss states; each one has its own unbounded queue.
        """
        queue: asyncio.Queue[S] = asyncio.Queue()
        queue.put_nowait(self._value)
        self._subscribers.add(queue)
        try:
            while True:
                yield await queue.get()
        finally:
            self._subscribers.discard(queue)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
