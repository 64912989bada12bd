# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wiring for the Apollo gateway.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It declares the
#   MCP-facing signatures, forwards calls to the CapabilityRegistry, and maps
#   OutputRecords onto MCP results.  It holds no business logic: input
#   contracts, HTTP, response classification and formatting all live in core/.
# =============================================================================
