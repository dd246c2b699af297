from enum import StrEnum, auto


class PlatformName(StrEnum):
    AMAZON = auto()
    FLIPKART = auto()
    BLINKIT = auto()

    @property
    def display_name(self) -> str:
        return self.value.capitalize()
