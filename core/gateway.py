# =============================================================================
# core/gateway.py: Request Gateway
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns (endpoint, params) into exactly one GET against the Apollo API and
#   reports what happened as a RawTransportResult.
#
# RULES:
#   - The endpoint is resolved against the configured base address with
#     URL-join semantics ("/api/proxy/status" replaces any base path).
#   - Every parameter becomes a query parameter by string coercion.
#     Booleans are sent as "true"/"false"; None values are left out.
#   - Two static headers: our User-Agent and "Accept: application/json".
#   - One attempt.  No retry, no timeout beyond httpx's defaults.
#     Redirects are followed, as a browser-style fetch would.
#   - Transport failures (DNS, refused connection, timeouts, URLs httpx
#     cannot encode) never escape send(); they come back as
#     RawTransportResult.transport_error.
#
# Interpreting the response (402 vs error vs success) is NOT done here;
# that is core/classifier.py's job.
# =============================================================================

import logging
from typing import Any, Mapping, Optional
from urllib.parse import urljoin

import httpx

from core.models import RawTransportResult

logger = logging.getLogger(__name__)


def coerce_param(value: Any) -> str:
    """Stringify a query parameter value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestGateway:
    """Performs outbound requests on behalf of tool invocations.

    Args:
        base_url: Origin of the Apollo API (see core/config.py).
        user_agent: Value of the identifying User-Agent header.
        transport: Optional httpx transport.  Tests pass an
            httpx.MockTransport here; production leaves it as None.
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    def build_url(self, endpoint: str) -> str:
        return urljoin(self.base_url, endpoint)

    @staticmethod
    def build_query(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
        if not params:
            return {}
        return {
            key: coerce_param(value)
            for key, value in params.items()
            if value is not None
        }

    async def send(
        self, endpoint: str, params: Optional[Mapping[str, Any]] = None
    ) -> RawTransportResult:
        """Issue one GET and report the outcome as data."""
        url = self.build_url(endpoint)
        query = self.build_query(params)

        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url, params=query)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            description = str(exc) or type(exc).__name__
            logger.warning("GET %s failed before a response: %s", url, description)
            return RawTransportResult(transport_error=description)

        logger.debug("GET %s -> %s", response.url, response.status_code)
        return RawTransportResult(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )
