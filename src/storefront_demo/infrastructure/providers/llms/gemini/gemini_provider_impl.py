from __future__ import annotations

import time
from dataclasses import dataclass, field

import structlog
from google import genai

from storefront_demo.core.application.exceptions.storefront_exceptions import ProviderError
from storefront_demo.core.application.ports.text_generation_port import TextGenerationPort
from storefront_demo.infrastructure.common.retry.retry_policy import RetryPolicy
from storefront_demo.infrastructure.observability.metrics_service import LLM_LATENCY_SECONDS
from storefront_demo.infrastructure.providers.llms.gemini.clients.gemini_client_factory import (
    GeminiClientFactory,
)
from storefront_demo.infrastructure.providers.llms.gemini.clients.gemini_config import (
    GeminiConfig,
)
from storefront_demo.infrastructure.providers.llms.gemini.mappers.gemini_response_mapper import (
    GeminiResponseMapper,
)

logger = structlog.get_logger()

_RETRYABLE_CODES = (429, 500, 502, 503, 504)


@dataclass(frozen=True, slots=True)
class GeminiProvider(TextGenerationPort):
    config: GeminiConfig
    client_factory: GeminiClientFactory = field(default_factory=GeminiClientFactory)
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    response_mapper: GeminiResponseMapper = field(default_factory=GeminiResponseMapper)

    @property
    def name(self) -> str:
        return "gemini"

    async def generate_text(self, prompt: str) -> str:
        # Credential is checked here, per call, not at start-up.
        client = self.client_factory.create(self.config)
        logger.debug("Gemini request", model=self.config.model)
        start = time.perf_counter()
        try:
            return await self.retry.run(self._call, client, prompt)
        finally:
            LLM_LATENCY_SECONDS.labels(model=self.config.model).observe(time.perf_counter() - start)

    async def _call(self, client: genai.Client, prompt: str) -> str:
        try:
            resp = await client.aio.models.generate_content(model=self.config.model, contents=prompt)
        except Exception as exc:
            raise self._map_error(exc) from exc
        return self.response_mapper.to_text(resp)

    def _map_error(self, exc: Exception) -> ProviderError:
        code = getattr(exc, "code", None)
        if not isinstance(code, int):
            code = None
        return ProviderError(
            provider=self.name,
            message=str(exc),
            retryable=self._is_retryable(exc, code),
            status_code=code,
        )

    def _is_retryable(self, exc: Exception, code: int | None) -> bool:
        if code in _RETRYABLE_CODES:
            return True
        name = type(exc).__name__.lower()
        return any(k in name for k in ("timeout", "deadline", "unavailable", "resourceexhausted"))
