# =============================================================================
# main.py: Entry Point for the Apollo Proxy MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (APOLLO_API_URL may point at a staging API)
#   2. Builds the tool registry and the FastMCP server (tools/mcp_server.py)
#   3. Prints a startup banner to STDERR
#   4. Serves MCP over stdio until the client disconnects
#
# Any failure while starting the server is fatal: it is logged and the
# process exits with status 1.
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env before the settings are read.
load_dotenv()

from core.config import load_settings  # noqa: E402
from tools.mcp_server import create_server  # noqa: E402

logger = logging.getLogger("apollo-mcp")


def main() -> int:
    try:
        settings = load_settings()
        mcp, registry = create_server(settings)
        logger.info("Apollo Proxy MCP Server running on stdio")
        logger.info("  Tools: %s", ", ".join(registry.names()))
        logger.info("  Endpoint: %s/api/proxy/*", settings.api_base.rstrip("/"))
        logger.info("  Payment: $0.005/request (USDC on Base)")
        mcp.run()
    except Exception:
        logger.exception("Fatal error in Apollo MCP Server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
