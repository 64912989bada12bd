# =============================================================================
# tools/mcp_server.py: FastMCP Tool Server (the inbound channel)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every catalog tool over MCP.  Each tool here is a thin wrapper:
#   it forwards its arguments to the CapabilityRegistry and converts the
#   resulting OutputRecord into an MCP result.  All validation, HTTP and
#   response handling happens in core/.
#
# HOW IT WORKS (the flow):
#   1. An agent calls a tool by name via MCP (e.g., "proxy_fetch")
#   2. FastMCP routes the call to the decorated function below
#   3. The function hands the arguments to registry.invoke()
#   4. core/ validates, calls Apollo, classifies the response and formats it
#   5. is_error=False -> the text is returned as the tool result
#      is_error=True  -> ToolError(text), which MCP reports with isError: true
#
# WHERE THE SIGNATURES COME FROM:
#   The input contract lives in the pydantic models in core/catalog.py.  The
#   wrappers below reuse its Literal types, and _field()/_default() copy each
#   field's description and default, so the published MCP schema carries the
#   same enums and limits the models enforce.
#
# RUNNING THIS SERVER:
#   python main.py               (stdio, with startup banner)
#   python -m tools.mcp_server   (stdio)
# =============================================================================

import logging
import sys
from typing import Annotated, Any, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from core.catalog import (
    HttpMethod,
    ListCountriesInput,
    ProxyFetchInput,
    Region,
    SessionType,
)
from core.config import Settings, load_settings
from core.errors import UnknownToolError
from core.gateway import RequestGateway
from core.invoker import ToolInvoker
from core.models import OutputRecord
from core.registry import CapabilityRegistry, build_registry

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP JSON protocol, so every log line goes to STDERR.
#
# ANSI COLOR CODES:
#   - GREEN for successful tool results
#   - YELLOW for error results (bad input, upstream failures, 402 without body)
# =============================================================================

_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [apollo-mcp] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_response(tool_name: str, record: OutputRecord) -> OutputRecord:
    """Log the outcome of a tool call, then return the record."""
    color = _YELLOW if record.is_error else _GREEN
    status = "error" if record.is_error else "ok"
    logging.info(f"{color}  <- {tool_name} {status} ({len(record.text)} chars){_RESET}")
    return record


def _to_result(record: OutputRecord) -> str:
    if record.is_error:
        raise ToolError(record.text)
    return record.text


def _field(model: type[BaseModel], name: str, **constraints) -> Any:
    """Field metadata for a wrapper parameter, described by the input model."""
    return Field(description=model.model_fields[name].description, **constraints)


def _default(model: type[BaseModel], name: str) -> Any:
    return model.model_fields[name].default


# =============================================================================
# Server factory
# =============================================================================
def create_server(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> tuple[FastMCP, CapabilityRegistry]:
    """Build the registry and the FastMCP server that fronts it.

    Args:
        settings: Runtime settings; read from the environment when omitted.
        transport: Optional httpx transport for the gateway (tests).
    """
    settings = settings or load_settings()
    gateway = RequestGateway(settings.api_base, settings.user_agent, transport=transport)
    registry = build_registry(ToolInvoker(gateway))
    mcp = FastMCP(settings.server_name)

    async def call(tool_name: str, **arguments) -> str:
        try:
            record = await registry.invoke(tool_name, arguments)
        except UnknownToolError as exc:
            raise ToolError(str(exc)) from exc
        return _to_result(_log_response(tool_name, record))

    # -------------------------------------------------------------------------
    # TOOL 1: proxy_fetch
    # -------------------------------------------------------------------------
    @mcp.tool(name="proxy_fetch", description=registry.get("proxy_fetch").description)
    async def proxy_fetch(
        target_url: Annotated[str, _field(ProxyFetchInput, "target_url", json_schema_extra={"format": "uri"})],
        country: Annotated[str, _field(ProxyFetchInput, "country", min_length=2, max_length=2)] = _default(ProxyFetchInput, "country"),
        method: Annotated[HttpMethod, _field(ProxyFetchInput, "method")] = _default(ProxyFetchInput, "method"),
        session_type: Annotated[SessionType, _field(ProxyFetchInput, "session_type")] = _default(ProxyFetchInput, "session_type"),
    ) -> str:
        return await call(
            "proxy_fetch",
            target_url=target_url,
            country=country,
            method=method,
            session_type=session_type,
        )

    # -------------------------------------------------------------------------
    # TOOL 2: proxy_status
    # -------------------------------------------------------------------------
    @mcp.tool(name="proxy_status", description=registry.get("proxy_status").description)
    async def proxy_status() -> str:
        return await call("proxy_status")

    # -------------------------------------------------------------------------
    # TOOL 3: list_countries
    # -------------------------------------------------------------------------
    @mcp.tool(name="list_countries", description=registry.get("list_countries").description)
    async def list_countries(
        region: Annotated[Region, _field(ListCountriesInput, "region")] = _default(ListCountriesInput, "region"),
    ) -> str:
        return await call("list_countries", region=region)

    return mcp, registry


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    server, _ = create_server()
    server.run()
