from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from google import genai
from google.genai import types

from storefront_demo.core.application.exceptions.storefront_exceptions import ConfigurationError
from storefront_demo.infrastructure.providers.llms.gemini.clients.gemini_config import (
    GeminiConfig,
)


@dataclass(frozen=True, slots=True)
class GeminiClientFactory:
    def create(self, config: GeminiConfig) -> Any:
        if not config.api_key:
            raise ConfigurationError(context={"provider": "gemini"})
        return genai.Client(
            api_key=config.api_key,
            http_options=types.HttpOptions(timeout=int(config.timeout_s * 1000)),
        )
