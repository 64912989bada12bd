import json

import httpx

from core.gateway import RequestGateway
from core.models import RawTransportResult

API_BASE = "https://api.test"


class FakeGateway:
    """Stands in for RequestGateway and records every send()."""

    def __init__(self, result: RawTransportResult):
        self.base_url = API_BASE
        self.result = result
        self.calls = []

    async def send(self, endpoint, params=None):
        self.calls.append((endpoint, dict(params or {})))
        return self.result


def raw_json(status: int, body, headers=None) -> RawTransportResult:
    return RawTransportResult(
        status_code=status,
        content=json.dumps(body).encode("utf-8"),
        headers=headers or {},
    )


def raw_text(status: int, text: str, headers=None) -> RawTransportResult:
    return RawTransportResult(
        status_code=status,
        content=text.encode("utf-8"),
        headers=headers or {},
    )


def mock_gateway(handler) -> RequestGateway:
    return RequestGateway(API_BASE, "apollo-mcp-proxy/test", transport=httpx.MockTransport(handler))
