from storefront_demo.infrastructure.configuration.app_settings import AppSettings
from storefront_demo.infrastructure.configuration.llm_settings import LlmSettings


class Settings(AppSettings, LlmSettings):
    """
    Combines all settings.
    Inherits from AppSettings and LlmSettings. A missing API key never fails
    construction; it is reported when a price comparison is requested.
    """
