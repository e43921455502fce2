"""A task executor running an asyncio loop on a background thread."""

from __future__ import annotations

import asyncio
import concurrent.futures
import threading
from collections.abc import Awaitable, Callable, Coroutine, Iterable
from contextlib import suppress
from typing import Any, TypeVar

T = TypeVar("T")


class TaskCancelledError(RuntimeError):
    """Raised by a task that was stopped by a shutdown signal."""


class ReamExecutor:
    """Runs coroutines and blocking callables, with a broadcast shutdown signal.

    Each spawned task subscribes to the shutdown signal when it is spawned; a
    call to :meth:`shutdown` reaches every task subscribed at that moment.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop if loop is not None else asyncio.new_event_loop()
        self._pool = concurrent.futures.ThreadPoolExecutor()
        self._subscribers: set[asyncio.Event] = set()
        self._lock = threading.Lock()
        self._closed = False
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def __enter__(self) -> ReamExecutor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("executor is closed")

    def _subscribe(self) -> asyncio.Event:
        event = asyncio.Event()
        with self._lock:
            self._subscribers.add(event)
        return event

    def _unsubscribe(self, event: asyncio.Event) -> None:
        with self._lock:
            self._subscribers.discard(event)

    def _submit(self, coro: Coroutine[Any, Any, T]) -> concurrent.futures.Future[T]:
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    async def _run_until_shutdown(self, coro: Awaitable[T], event: asyncio.Event) -> T:
        work = asyncio.ensure_future(coro)
        stop = asyncio.ensure_future(event.wait())
        try:
            done, _ = await asyncio.wait({work, stop}, return_when=asyncio.FIRST_COMPLETED)
            if work in done:
                return work.result()
            work.cancel()
            with suppress(asyncio.CancelledError):
                await work
            raise TaskCancelledError("Task cancelled due to shutdown")
        finally:
            work.cancel()
            stop.cancel()
            self._unsubscribe(event)

    async def _run_cancellable(
        self, future_fn: Callable[[asyncio.Event], Awaitable[T]], event: asyncio.Event
    ) -> T | None:
        try:
            return await future_fn(event)
        except asyncio.CancelledError:
            return None
        finally:
            self._unsubscribe(event)

    def spawn(self, coro: Awaitable[T]) -> concurrent.futures.Future[T]:
        """Run ``coro``; it fails with TaskCancelledError if shutdown comes first."""
        self._ensure_open()
        event = self._subscribe()
        return self._submit(self._run_until_shutdown(coro, event))

    def spawn_cancellable(
        self, future_fn: Callable[[asyncio.Event], Awaitable[T]]
    ) -> concurrent.futures.Future[T | None]:
        """Run ``future_fn(shutdown)``, where ``shutdown`` is set on shutdown.

        The result is None when the executor is closed before the task finishes.
        """
        self._ensure_open()
        event = self._subscribe()
        return self._submit(self._run_cancellable(future_fn, event))

    def spawn_blocking(self, task: Callable[[], T]) -> concurrent.futures.Future[T]:
        """Run a blocking callable on a worker thread."""
        self._ensure_open()
        return self._pool.submit(task)

    def spawn_many(
        self, future_fns: Iterable[Callable[[asyncio.Event], Awaitable[T]]]
    ) -> concurrent.futures.Future[list[T]]:
        """Run several cancellable tasks; resolves to the results that succeeded, in order."""
        self._ensure_open()
        jobs = [(future_fn, self._subscribe()) for future_fn in future_fns]

        async def gather_all() -> list[T]:
            results = await asyncio.gather(
                *(self._run_cancellable(fn, event) for fn, event in jobs),
                return_exceptions=True,
            )
            return [
                result
                for result in results
                if result is not None and not isinstance(result, BaseException)
            ]

        return self._submit(gather_all())

    def block_on(self, handle: concurrent.futures.Future[T]) -> T:
        """Wait for a spawned task and return its result."""
        return handle.result()

    def shutdown(self) -> None:
        """Send the shutdown signal to every currently subscribed task."""
        with self._lock:
            events = list(self._subscribers)
        for event in events:
            self._loop.call_soon_threadsafe(event.set)

    def close(self) -> None:
        """Cancel outstanding tasks and stop the loop and worker threads."""
        if self._closed:
            return
        self._closed = True

        async def cancel_all() -> None:
            current = asyncio.current_task()
            tasks = [task for task in asyncio.all_tasks() if task is not current]
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        self._submit(cancel_all()).result()
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()
        self._loop.close()
        self._pool.shutdown(wait=False)