from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from storefront_demo.core.application.exceptions.storefront_exceptions import (
    ApplicationError,
    ConfigurationError,
    InvalidPriceRequestError,
    PriceComparisonError,
    PriceResponseParseError,
)
from storefront_demo.core.application.services.price_comparison_service import (
    PriceComparisonService,
)
from storefront_demo.infrastructure.entrypoints.api.dependencies import (
    get_price_comparison_service,
)
from storefront_demo.infrastructure.observability.logger_factory_service import get_logger
from storefront_demo.infrastructure.observability.metrics_service import (
    PRICE_COMPARISONS_TOTAL,
)

logger = get_logger(__name__)
router = APIRouter()

_OUTCOMES: dict[type[ApplicationError], str] = {
    InvalidPriceRequestError: "invalid_request",
    ConfigurationError: "configuration_error",
    PriceResponseParseError: "parse_error",
}


@router.post("/compare-prices", response_model=None)
async def compare_prices(
    request: Request,
    service: PriceComparisonService = Depends(get_price_comparison_service),
) -> JSONResponse:
    try:
        body = await _read_body(request)
        result = await service.compare(body.get("productName"), body.get("basePrice"))
        response = JSONResponse(status_code=status.HTTP_200_OK, content=result.to_payload())
    except InvalidPriceRequestError as exc:
        PRICE_COMPARISONS_TOTAL.labels(outcome=_OUTCOMES[InvalidPriceRequestError]).inc()
        logger.info("Rejected price comparison request", error_type=type(exc).__name__)
        return _error(status.HTTP_400_BAD_REQUEST, exc.public_message)
    except ApplicationError as exc:
        return _server_error(exc)
    except Exception as exc:
        return _server_error(PriceComparisonError(str(exc)), cause=exc)

    PRICE_COMPARISONS_TOTAL.labels(outcome="success").inc()
    return response


async def _read_body(request: Request) -> dict[str, Any]:
    # A JSON value that is not an object carries no fields, so it is a client error.
    body = await request.json()
    return body if isinstance(body, dict) else {}


def _server_error(exc: ApplicationError, cause: Exception | None = None) -> JSONResponse:
    PRICE_COMPARISONS_TOTAL.labels(outcome=_OUTCOMES.get(type(exc), "failure")).inc()
    logger.error(
        "Error comparing prices",
        processing_status="ERROR",
        error_type=type(cause or exc).__name__,
        error_details=str(cause or exc),
        **exc.context,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.public_message)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
