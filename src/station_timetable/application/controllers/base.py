"""Generic event, result and state pipeline shared by all screen controllers.

Events offered to a controller are handled one at a time in the order they were
offered. Handling an event produces a sequence of results and each result is reduced
into a new state, which is published through an observable state.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Generic, Protocol, TypeVar

from station_timetable.application.state.observable_state import ObservableState

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT")
ResultT = TypeVar("ResultT")
ResultT_contra = TypeVar("ResultT_contra", contravariant=True)
StateT = TypeVar("StateT", bound="ReducibleState")


class ReducibleState(Protocol[ResultT_contra]):
    """Immutable state that derives its successor from a result."""

    def reduce(self, result: ResultT_contra) -> ReducibleState[ResultT_contra]:
        ...


class Controller(ABC, Generic[EventT, ResultT, StateT]):
    """Turns events into results and reduces the results into state."""

    def __init__(self, initial_state: StateT) -> None:
        self._state: ObservableState[StateT] = ObservableState(initial_state)
        self._events: asyncio.Queue[EventT] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None
        self._startup_tasks: list[asyncio.Task[None]] = []

    @property
    def state(self) -> ObservableState[StateT]:
        return self._state

    def offer(self, event: EventT) -> None:
        """Queue an event for handling. Never blocks."""
        logger.debug(f"{type(self).__name__}: offered {event}")
        self._events.put_nowait(event)

    async def start(self) -> None:
        """Start handling events and run the startup operations."""
        if self._task is not None and not self._task.done():
            logger.warning(f"{type(self).__name__} already running")
            return
        self._task = asyncio.create_task(self._handle_events())
        self._task.add_done_callback(self._log_failure)
        self._startup_tasks = [
            asyncio.create_task(self._collect(results)) for results in self.startup_operations()
        ]
        logger.debug(f"Started {type(self).__name__}")

    async def stop(self) -> None:
        """Stop handling events and cancel unfinished startup operations."""
        tasks = [*self._startup_tasks]
        if self._task is not None:
            tasks.append(self._task)
        for task in tasks:
            if not task.done():
                task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._task = None
        self._startup_tasks = []
        logger.debug(f"Stopped {type(self).__name__}")

    async def idle(self) -> None:
        """Wait until the startup operations and every offered event are handled."""
        if self._startup_tasks:
            await asyncio.gather(*self._startup_tasks)
        await self._events.join()

    def startup_operations(self) -> list[AsyncIterator[ResultT]]:
        """Operations run concurrently with event handling when the controller starts."""
        return []

    @abstractmethod
    def handle(self, event: EventT) -> AsyncIterator[ResultT]:
        """Produce the results of handling an event."""

    def reduce(self, result: ResultT) -> None:
        """Reduce a result into the current state and publish the new state."""
        logger.debug(f"{type(self).__name__}: reducing {result}")
        self._state.update(self._state.value.reduce(result))  # type: ignore[arg-type]

    def _log_failure(self, task: asyncio.Task[None]) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error(
                f"{type(self).__name__} stopped handling events", exc_info=task.exception()
            )

    async def _collect(self, results: AsyncIterator[ResultT]) -> None:
        """Reduce every result of an operation. An operation that raises is logged and ends."""
        try:
            async for result in results:
                self.reduce(result)
        except Exception:
            logger.exception(f"{type(self).__name__}: operation failed")

    async def _handle_events(self) -> None:
        while True:
            event = await self._events.get()
            try:
                await self._collect(self.handle(event))
            except Exception:
                logger.exception(f"{type(self).__name__}: failed to handle {event}")
            finally:
                self._events.task_done()
