from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from storefront_demo.core.application.exceptions.storefront_exceptions import ProviderError

_T = TypeVar("_T")


def _retryable(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 1  # Default: Fail fast (1 attempt, 0 retries)

    async def run(self, fn: Callable[..., Awaitable[_T]], *args: Any) -> _T:
        """Awaits ``fn(*args)``, retrying retryable ``ProviderError``s up to ``max_attempts``."""
        async for attempt in self._retrying():
            with attempt:
                return await fn(*args)
        raise AssertionError("unreachable: tenacity reraises the last error")

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_retryable),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(initial=0.25, max=5.0),
            reraise=True,
        )
