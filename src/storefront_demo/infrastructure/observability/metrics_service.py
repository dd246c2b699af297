"""Prometheus metrics declarations for the storefront.

Labels use ONLY static enumerations, never product names or order ids.
"""

from prometheus_client import Counter, Histogram

PRICE_COMPARISONS_TOTAL = Counter(
    "storefront_price_comparisons_total",
    "Price comparison requests by outcome",
    ["outcome"],
)

LLM_LATENCY_SECONDS = Histogram(
    "storefront_llm_latency_seconds",
    "Text-generation delegate latency in seconds",
    ["model"],
)

ORDERS_PLACED_TOTAL = Counter(
    "storefront_orders_placed_total",
    "Orders created through checkout",
)
