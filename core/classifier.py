# =============================================================================
# core/classifier.py: Response Classifier
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps a RawTransportResult onto exactly one RequestOutcome.  The checks
#   run in this order and the first match wins:
#
#     1. No response at all      -> Error(NETWORK_ERROR, status 0)
#     2. HTTP 402                -> PaymentRequired (with the body if it is JSON)
#     3. Any other non-2xx       -> Error(UPSTREAM_HTTP_ERROR)
#     4. 2xx                     -> Success(JSON body), or an
#                                   UPSTREAM_HTTP_ERROR if the body is not JSON
#
#   402 is Apollo's x402 payment gate.  It is a business outcome, and its
#   body may carry free preview data, so it never becomes an ordinary error
#   here.  The invoker decides what to show for it.
# =============================================================================

import json
import numbers
from typing import Any, Optional

from core.models import (
    Error,
    ErrorKind,
    PaymentRequired,
    RawTransportResult,
    RequestOutcome,
    Success,
)

PAYMENT_REQUIRED = 402
ERROR_BODY_LIMIT = 500

_MISSING = object()


def _parse_json(content: bytes) -> Any:
    """Decode a JSON body; returns _MISSING when it does not parse."""
    if not content:
        return _MISSING
    try:
        return json.loads(content)
    except ValueError:
        return _MISSING


def _declared_price(body: Any) -> Optional[float]:
    if not isinstance(body, dict):
        return None
    price = body.get("price_usd")
    # bool is an int subclass; True is not a price.
    if isinstance(price, numbers.Real) and not isinstance(price, bool):
        return price
    return None


def _payment_info(headers) -> Optional[str]:
    lowered = {key.lower(): value for key, value in headers.items()}
    return lowered.get("x-payment") or lowered.get("www-authenticate") or None


def classify(raw: RawTransportResult) -> RequestOutcome:
    """Classify one transport result.  Never raises."""
    if not raw.received:
        return Error(
            kind=ErrorKind.NETWORK_ERROR,
            message=f"Request failed: {raw.transport_error or 'no response received'}",
            status_code=0,
        )

    status = raw.status_code

    if status == PAYMENT_REQUIRED:
        body = _parse_json(raw.content)
        if body is _MISSING or body is None:
            return PaymentRequired(payment_info=_payment_info(raw.headers))
        return PaymentRequired(
            preview_body=body,
            declared_price_usd=_declared_price(body),
            payment_info=_payment_info(raw.headers),
        )

    if not 200 <= status < 300:
        text = raw.content.decode("utf-8", errors="replace")
        return Error(
            kind=ErrorKind.UPSTREAM_HTTP_ERROR,
            message=f"API error ({status}): {text[:ERROR_BODY_LIMIT]}",
            status_code=status,
        )

    body = _parse_json(raw.content)
    if body is _MISSING:
        return Error(
            kind=ErrorKind.UPSTREAM_HTTP_ERROR,
            message=f"API error ({status}): malformed JSON in response body",
            status_code=status,
        )
    return Success(payload=body)
