# =============================================================================
# core/config.py: Runtime Settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Collects the handful of values the gateway needs at startup: where the
#   Apollo API lives, how we identify ourselves, and the MCP server identity.
#
# ENVIRONMENT:
#   APOLLO_API_URL   Base address of the Apollo API.
#                    Default: https://apolloai.team (production origin).
#
#   main.py calls load_dotenv() before load_settings(), so a local .env file
#   works the same way as exported variables.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_API_BASE = "https://apolloai.team"
USER_AGENT = "apollo-mcp-proxy/1.0.0"
SERVER_NAME = "apollo-proxy"
SERVER_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup."""

    api_base: str = DEFAULT_API_BASE
    user_agent: str = USER_AGENT
    server_name: str = SERVER_NAME
    server_version: str = SERVER_VERSION


def load_settings(environ: Mapping[str, str] = os.environ) -> Settings:
    """Build Settings from the environment.

    A missing or blank APOLLO_API_URL falls back to the production origin.
    """
    api_base = (environ.get("APOLLO_API_URL") or "").strip() or DEFAULT_API_BASE
    return Settings(api_base=api_base)
