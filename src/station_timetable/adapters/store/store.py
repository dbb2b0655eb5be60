"""Keyed read-through store over a fetcher and a local source of truth.

The store serves locally stored data immediately and refreshes it from the fetcher.
Concurrent fetches for the same key are coalesced into a single fetch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Generic, Protocol, TypeVar

from station_timetable.domain.models.store_response import (
    AnyStoreResponse,
    ResponseOrigin,
    StoreResponse,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
K_contra = TypeVar("K_contra", contravariant=True)


class SourceOfTruth(Protocol[K_contra, V]):
    """Local storage of the data fetched by a store."""

    async def read(self, key: K_contra) -> V | None:
        """Return the stored snapshot for the key, or None if there is none."""
        ...

    async def write(self, key: K_contra, value: V) -> None:
        """Replace the stored snapshot for the key."""
        ...

    async def delete(self, key: K_contra) -> None:
        ...


class InMemorySourceOfTruth(Generic[K, V]):
    """Source of truth that keeps snapshots in memory for the lifetime of the process."""

    def __init__(self) -> None:
        self._values: dict[K, V] = {}

    async def read(self, key: K) -> V | None:
        return self._values.get(key)

    async def write(self, key: K, value: V) -> None:
        self._values[key] = value

    async def delete(self, key: K) -> None:
        self._values.pop(key, None)

    def __len__(self) -> int:
        return len(self._values)


class Store(Generic[K, V]):
    """Read-through store.

    Args:
        fetcher: Fetches a fresh value for a key from the network.
        source_of_truth: Local storage the fetched values are written to. Values are
            always read back from it, so the source of truth may reshape them.
        name: Name used in log messages.
    """

    def __init__(
        self,
        fetcher: Callable[[K], Awaitable[V]],
        source_of_truth: SourceOfTruth[K, V],
        name: str = "store",
    ) -> None:
        self._fetcher = fetcher
        self._source_of_truth = source_of_truth
        self._name = name
        self._in_flight: dict[K, asyncio.Task[V | None]] = {}

    async def _fetch_and_write(self, key: K) -> V | None:
        try:
            logger.debug(f"{self._name}: fetching {key}")
            value = await self._fetcher(key)
            await self._source_of_truth.write(key, value)
            return await self._source_of_truth.read(key)
        finally:
            self._in_flight.pop(key, None)

    async def _fetch(self, key: K) -> V | None:
        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.create_task(self._fetch_and_write(key))
            self._in_flight[key] = task
        else:
            logger.debug(f"{self._name}: joining in-flight fetch of {key}")
        # A cancelled caller must not cancel the fetch other callers are waiting for.
        return await asyncio.shield(task)

    async def get(self, key: K) -> V | None:
        """Return the stored value for the key, fetching it if nothing is stored."""
        cached = await self._source_of_truth.read(key)
        if cached is not None:
            return cached
        return await self._fetch(key)

    async def fresh(self, key: K) -> V | None:
        """Fetch, store and return a fresh value for the key."""
        return await self._fetch(key)

    async def clear(self, key: K) -> None:
        """Delete the stored value for the key."""
        await self._source_of_truth.delete(key)

    async def stream(self, key: K, refresh: bool = True) -> AsyncIterator[AnyStoreResponse[V]]:
        """Stream the stored value followed by the outcome of a refresh.

        Yields the stored value (origin CACHE) if there is one. When refreshing, or
        when nothing is stored, yields Loading and then either the refreshed value,
        NoNewData if the refresh did not change the stored value, or Error. Fetch
        errors are reported as Error responses and never raised.
        """
        cached = await self._source_of_truth.read(key)
        if cached is not None:
            yield StoreResponse.Data(cached, ResponseOrigin.CACHE)
            if not refresh:
                return

        yield StoreResponse.Loading()
        try:
            value = await self._fetch(key)
        except Exception as e:
            logger.warning(f"{self._name}: failed to refresh {key}: {e}")
            yield StoreResponse.Error(str(e) or type(e).__name__)
            return

        if value is None or value == cached:
            yield StoreResponse.NoNewData()
        else:
            yield StoreResponse.Data(value, ResponseOrigin.FETCHER)
