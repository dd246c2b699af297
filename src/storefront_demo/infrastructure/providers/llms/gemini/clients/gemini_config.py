from __future__ import annotations

from dataclasses import dataclass

from storefront_demo.infrastructure.configuration.llm_settings import LlmSettings


@dataclass(frozen=True, slots=True)
class GeminiConfig:
    api_key: str | None
    model: str = "gemini-1.5-flash"
    timeout_s: float = 120.0

    @staticmethod
    def from_settings(settings: LlmSettings) -> GeminiConfig:
        key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else None
        return GeminiConfig(
            api_key=key or None,
            model=settings.gemini_model,
            timeout_s=settings.gemini_timeout_s,
        )
