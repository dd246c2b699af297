from storefront_demo.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from storefront_demo.infrastructure.observability.logging.schema_processor import (
    storefront_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "storefront_schema_processor",
]
