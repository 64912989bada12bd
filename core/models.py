# =============================================================================
# core/models.py: Data Models (the "nouns" of the gateway)
# =============================================================================
#
# These dataclasses describe every value that flows through one tool call:
#
#   RequestSpec  ->  RawTransportResult  ->  RequestOutcome  ->  OutputRecord
#   (what to ask)    (what came back)        (what it means)     (what we say)
#
# All of them are frozen.  A call builds them, reads them, and drops them;
# nothing here survives from one call to the next.
#
# RequestOutcome is a closed union of three variants.  Code that consumes it
# checks isinstance() against Success, PaymentRequired and Error, in that
# order, and every outcome is exactly one of them.
# =============================================================================

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


# -----------------------------------------------------------------------------
# RequestSpec: one outbound request, before it is sent
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RequestSpec:
    """An endpoint path plus its query parameters.

    Values are coerced to strings by the gateway, so tools may pass
    booleans and numbers as-is.  Nested lists or dicts are not supported.
    """

    endpoint: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping as well as the dataclass.
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


# -----------------------------------------------------------------------------
# RawTransportResult: exactly what the gateway observed
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RawTransportResult:
    """The transport's view of one attempt.

    Either transport_error is set (no response was received) or
    status_code/content/headers describe the response.
    """

    status_code: Optional[int] = None
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    transport_error: Optional[str] = None

    @property
    def received(self) -> bool:
        return self.transport_error is None and self.status_code is not None


# -----------------------------------------------------------------------------
# RequestOutcome: the result algebra
# -----------------------------------------------------------------------------
class ErrorKind(str, enum.Enum):
    NETWORK_ERROR = "NetworkError"
    UPSTREAM_HTTP_ERROR = "UpstreamHttpError"


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class PaymentRequired:
    """HTTP 402: a business signal, not a failure.

    preview_body is the parsed response body, or None when the body was
    missing or not JSON.  payment_info carries the X-Payment (or
    WWW-Authenticate) header when the upstream sent one.
    """

    preview_body: Any = None
    declared_price_usd: Optional[float] = None
    payment_info: Optional[str] = None

    @property
    def has_preview(self) -> bool:
        return self.preview_body is not None


@dataclass(frozen=True)
class Error:
    kind: ErrorKind
    message: str
    status_code: int


RequestOutcome = Union[Success, PaymentRequired, Error]


# -----------------------------------------------------------------------------
# PreviewPayload: what the extractor found inside a 402 body
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PreviewPayload:
    sample_data: Optional[Any] = None
    total_count: Optional[Any] = None
    raw: Any = None


# -----------------------------------------------------------------------------
# OutputRecord: the only thing ever handed back to the caller
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OutputRecord:
    text: str
    is_error: bool = False

    def to_mcp(self) -> dict:
        """Render in the MCP CallToolResult shape."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }
