from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class GeminiResponseMapper:
    def to_text(self, response: Any) -> str:
        """Blocked or empty candidates map to ``""``; the caller decides that it is unparseable."""
        text = getattr(response, "text", None)
        return text.strip() if isinstance(text, str) else ""
