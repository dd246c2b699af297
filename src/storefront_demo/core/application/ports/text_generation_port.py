from abc import ABC, abstractmethod


class TextGenerationPort(ABC):
    """Port for a generative text model used as an opaque delegate.

    Implementations MUST raise:
        - ConfigurationError: when the credential is missing.
        - ProviderError: on any provider-level failure.
    """

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """Send *prompt* and return the raw text of the model's answer."""
