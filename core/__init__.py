# =============================================================================
# core/__init__.py
# =============================================================================
# The request/response normalization pipeline shared by every tool:
#
#   catalog.py     tool declarations and input contracts
#   registry.py    name -> tool lookup, frozen after startup
#   invoker.py     validate -> send -> classify -> preview -> format
#   gateway.py     the single outbound GET (httpx)
#   classifier.py  raw response -> Success | PaymentRequired | Error
#   preview.py     sample data and counts inside 402 bodies
#   formatting.py  markdown for payloads, previews and failures
#
# Nothing in this package imports FastMCP.  Every module can be exercised
# from a plain test with a mocked httpx transport.
# =============================================================================
