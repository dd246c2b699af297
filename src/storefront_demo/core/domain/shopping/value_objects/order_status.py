from enum import StrEnum, auto


class OrderStatus(StrEnum):
    # Orders are only ever created as PENDING; nothing advances them yet.
    PENDING = auto()
    SHIPPED = auto()
    DELIVERED = auto()

    @property
    def label(self) -> str:
        return self.value.capitalize()
