"""Lazily computed value shared by concurrent callers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ComputeOnce(Generic[T]):
    """Computes a value at most once.

    Concurrent callers wait for the first computation. A failed computation leaves
    the value unset, so the next call tries again.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]], name: str = "value") -> None:
        self._factory = factory
        self._name = name
        self._value: T | None = None
        self._has_value = False
        self._lock = asyncio.Lock()

    @property
    def is_computed(self) -> bool:
        return self._has_value

    async def get(self) -> T:
        if self._has_value:
            return self._value  # type: ignore[return-value]

        async with self._lock:
            if not self._has_value:
                logger.debug(f"Computing {self._name}")
                self._value = await self._factory()
                self._has_value = True
            return self._value  # type: ignore[return-value]
