# =============================================================================
# core/formatting.py: Markdown Presentation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns parsed API payloads into the markdown text an agent reads.  Each
#   formatter is a pure function: dict in, string out.
#
# CONTEXT BUDGET:
#   Nothing here returns unbounded text.  Fetched bodies are capped at
#   BODY_DISPLAY_LIMIT characters and preview samples at
#   PREVIEW_DISPLAY_LIMIT, so one tool result can never flood the
#   agent's context window.
#
# Formatters index payloads directly.  A payload missing a field raises
# KeyError/TypeError, which the invoker reports as an unexpected response
# shape.
# =============================================================================

import json
from typing import Any, Optional, Sequence

from core.models import PreviewPayload

BODY_DISPLAY_LIMIT = 10_000
PREVIEW_DISPLAY_LIMIT = 4_000
PAYMENT_WALLET = "0xf59621FC406D266e18f314Ae18eF0a33b8401004"


def _to_block_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2)


def _scalar(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _join(values: Sequence[Any]) -> str:
    return ", ".join(_scalar(v) for v in values)


def _inline(value: Any) -> str:
    """One-line rendering: lists are comma-joined, everything else is JSON."""
    if isinstance(value, (list, tuple)):
        return _join(value)
    return _scalar(value)


# -----------------------------------------------------------------------------
# proxy_fetch
# -----------------------------------------------------------------------------
def format_proxy_fetch(data: dict) -> str:
    response = data["response"]
    body = _to_block_text(response["body"])
    truncated = " (truncated)" if response.get("truncated") else ""

    return "\n".join([
        "## Proxy Fetch Result",
        "",
        f"**Target:** {data['target_url']}",
        f"**Proxy Country:** {data['proxy_country']}",
        f"**Status:** {response['status_code']}",
        f"**Content-Type:** {response['content_type']}",
        f"**Bytes:** {response['bytes_returned']}{truncated}",
        f"**Cost:** ${data['price_paid_usd']}",
        "",
        "### Response Body",
        "",
        "```",
        body[:BODY_DISPLAY_LIMIT],
        "```",
    ])


# -----------------------------------------------------------------------------
# proxy_status
# -----------------------------------------------------------------------------
def format_proxy_status(data: dict) -> str:
    pricing = data["pricing"]
    max_kb = pricing["max_response_bytes"] / 1024

    return "\n".join([
        "## Apollo Proxy Service Status",
        "",
        f"**Service:** {data['service']}",
        f"**Status:** {data['status']}",
        "",
        "### Pricing",
        f"- Per request: ${pricing['per_request_usd']} USDC (Base mainnet)",
        f"- Max response size: {max_kb:.0f}KB",
        f"- Rate limit: {pricing['rate_limit']}",
        "",
        "### Capabilities",
        f"- Proxy types: {_join(data['supported_types'])}",
        f"- Countries: {_inline(data['supported_countries'])}",
        f"- Session types: {_join(data['session_types'])}",
        f"- HTTP methods: {_join(data['supported_methods'])}",
        "",
        "### Payment",
        "Payments handled via x402 protocol. "
        "Configure your agent with a USDC wallet on Base mainnet.",
        f"Wallet: {PAYMENT_WALLET}",
    ])


# -----------------------------------------------------------------------------
# list_countries
# -----------------------------------------------------------------------------
def format_country_list(region: str, countries: Sequence[str]) -> str:
    return "\n".join([
        "## Available Proxy Countries",
        "",
        f"**Region:** {region}",
        f"**Total:** {len(countries)} countries",
        "",
        "### Country Codes",
        "",
        _join(countries),
        "",
        "---",
        "Use any 2-letter ISO country code with proxy_fetch.",
        'Example: `proxy_fetch(target_url="https://example.com", country="DE")`',
    ])


# -----------------------------------------------------------------------------
# 402 preview and failures (shared by every remote tool)
# -----------------------------------------------------------------------------
def format_preview(
    tool_name: str,
    preview: PreviewPayload,
    price_usd: Optional[float] = None,
    payment_info: Optional[str] = None,
) -> str:
    """Render a priced preview: header, optional count, sample, pricing footer."""
    lines = [f"## {tool_name}: Preview (payment required)", ""]

    if preview.total_count is not None:
        lines += [f"**Full dataset:** {preview.total_count} items", ""]

    if preview.sample_data is not None:
        lines.append("### Sample Data")
        block = _to_block_text(preview.sample_data)
    else:
        lines.append("### Response")
        block = _to_block_text(preview.raw)

    lines += ["", "```json", block[:PREVIEW_DISPLAY_LIMIT], "```", "", "---"]

    if price_usd is not None:
        lines.append(f"**Price:** ${price_usd} USDC (Base mainnet)")
    else:
        lines.append("**Price:** see payment details")
    lines.append(
        "This is a free preview. Pay via x402 with a USDC wallet on Base "
        "to unlock the full dataset."
    )
    if payment_info:
        lines.append(f"Payment info: {payment_info}")

    return "\n".join(lines)


def format_payment_required(api_base: str, payment_info: Optional[str]) -> str:
    return (
        "Payment required (x402). "
        "Configure your agent with an x402-compatible wallet to use this service. "
        f"Payment info: {payment_info or f'See {api_base}'}"
    )


def format_failure(label: str, message: str) -> str:
    return f"{label} failed: {message}"
