# =============================================================================
# core/catalog.py: The Tool Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares every tool the gateway exposes.  Each tool is one small class:
#
#     - name / label / description   how callers see it
#     - input_model                  pydantic model = the input contract
#     - describe()                   key parameters for the per-call log line
#
#   Remote tools (RemoteTool) also supply:
#     - build_request()              validated input -> RequestSpec
#     - format_payload()             successful payload -> markdown
#
#   Local tools (LocalTool) never hit the network and supply:
#     - render_local()               validated input -> markdown
#
#   The shared pipeline (validate, send, classify, preview, format) lives
#   in core/invoker.py.  Tools only supply the parts that differ.
#
# ADDING A TOOL:
#   Subclass RemoteTool or LocalTool, give it an input model, and append an
#   instance in build_catalog().  Catalog order is the order MCP clients
#   list tools in.  tools/mcp_server.py reads the field types, defaults and
#   descriptions from the input model, so they are declared only here.
# =============================================================================

import abc
from typing import Any, Literal, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator

from core.countries import countries_for_region
from core.formatting import (
    format_country_list,
    format_proxy_fetch,
    format_proxy_status,
)
from core.models import RequestSpec

HttpMethod = Literal["GET", "POST", "HEAD"]
SessionType = Literal["rotating", "sticky"]
Region = Literal["all", "americas", "europe", "asia", "africa", "oceania"]


class Tool(abc.ABC):
    """One named capability.  Instances are immutable after construction."""

    name: str
    label: str
    description: str
    input_model: type[BaseModel]

    def validate(self, raw_input: Optional[dict]) -> BaseModel:
        """Apply the input contract.  Raises pydantic.ValidationError."""
        return self.input_model.model_validate(raw_input if raw_input is not None else {})

    @abc.abstractmethod
    def describe(self, params: BaseModel) -> str:
        """Key parameters for the per-call log line."""


class RemoteTool(Tool):
    """A tool backed by one Apollo API endpoint."""

    @abc.abstractmethod
    def build_request(self, params: BaseModel) -> RequestSpec:
        """Map validated input to an outbound request."""

    @abc.abstractmethod
    def format_payload(self, params: BaseModel, payload: Any) -> str:
        """Render a successful payload as markdown."""


class LocalTool(Tool):
    """A tool answered from process-local data, with no network call."""

    @abc.abstractmethod
    def render_local(self, params: BaseModel) -> str:
        """Render the answer as markdown."""


# =============================================================================
# TOOL 1: proxy_fetch
# =============================================================================
class ProxyFetchInput(BaseModel):
    target_url: str = Field(
        description="The URL to fetch through the proxy (must be http:// or https://)",
    )
    country: str = Field(
        "US",
        min_length=2,
        max_length=2,
        description="ISO country code for proxy exit (e.g., US, GB, DE, JP)",
    )
    method: HttpMethod = Field("GET", description="HTTP method to use")
    session_type: SessionType = Field(
        "rotating",
        description="rotating = new IP per request, sticky = same IP for session",
    )

    @field_validator("target_url")
    @classmethod
    def _require_http_url(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text") from None
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("must be an http:// or https:// URL")
        return value


class ProxyFetchTool(RemoteTool):
    name = "proxy_fetch"
    label = "Proxy fetch"
    description = (
        "Fetch any URL through Apollo's residential proxy network. "
        "Supports 190+ countries, rotating or sticky sessions, and handles "
        "anti-bot protection. Cost: $0.005/request (USDC on Base). "
        "Max response: 250KB. Rate limit: 100 req/min."
    )
    input_model = ProxyFetchInput

    def describe(self, params: ProxyFetchInput) -> str:
        return f"{params.method} {params.target_url} via {params.country.upper()}"

    def build_request(self, params: ProxyFetchInput) -> RequestSpec:
        return RequestSpec(
            endpoint="/api/proxy/request",
            params={
                "target_url": params.target_url,
                "country": params.country.upper(),
                "method": params.method,
                "session_type": params.session_type,
            },
        )

    def format_payload(self, params: ProxyFetchInput, payload: Any) -> str:
        return format_proxy_fetch(payload)


# =============================================================================
# TOOL 2: proxy_status
# =============================================================================
class ProxyStatusInput(BaseModel):
    pass


class ProxyStatusTool(RemoteTool):
    name = "proxy_status"
    label = "Status check"
    description = (
        "Check Apollo proxy service availability, pricing, and limits. "
        "Use this to verify the service is online before making requests."
    )
    input_model = ProxyStatusInput

    def describe(self, params: ProxyStatusInput) -> str:
        return "checking service availability"

    def build_request(self, params: ProxyStatusInput) -> RequestSpec:
        return RequestSpec(endpoint="/api/proxy/status")

    def format_payload(self, params: ProxyStatusInput, payload: Any) -> str:
        return format_proxy_status(payload)


# =============================================================================
# TOOL 3: list_countries (local, no network call)
# =============================================================================
class ListCountriesInput(BaseModel):
    region: Region = Field("all", description="Filter by region (optional)")


class ListCountriesTool(LocalTool):
    name = "list_countries"
    label = "List countries"
    description = (
        "List available proxy exit countries. Apollo supports 190+ countries "
        "for residential proxy exits. Returns ISO 3166-1 alpha-2 country codes."
    )
    input_model = ListCountriesInput

    def describe(self, params: ListCountriesInput) -> str:
        return f"region={params.region}"

    def render_local(self, params: ListCountriesInput) -> str:
        return format_country_list(params.region, countries_for_region(params.region))


def build_catalog() -> list[Tool]:
    """Every tool, in the order it is registered and listed."""
    return [ProxyFetchTool(), ProxyStatusTool(), ListCountriesTool()]
