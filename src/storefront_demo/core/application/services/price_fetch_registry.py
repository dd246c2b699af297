from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any


class PriceFetchRegistry:
    """Tracks one in-flight price fetch per request token.

    Starting a fetch under a token that already has one cancels the old task;
    ``release`` cancels and forgets it. Callers use ``is_current`` before
    applying a result so late answers for a dismissed view are dropped.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task[Any]] = {}

    def start(self, token: str, fetch: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        self.release(token)
        task = asyncio.create_task(fetch, name=f"price-fetch:{token}")
        self._tasks[token] = task
        task.add_done_callback(lambda done: self._forget(token, done))
        return task

    def is_current(self, token: str, task: asyncio.Task[Any] | None) -> bool:
        return task is not None and self._tasks.get(token) is task

    def release(self, token: str) -> None:
        task = self._tasks.pop(token, None)
        if task is not None and not task.done():
            task.cancel()

    def release_all(self) -> None:
        for token in list(self._tasks):
            self.release(token)

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def _forget(self, token: str, task: asyncio.Task[Any]) -> None:
        if self._tasks.get(token) is task:
            del self._tasks[token]
