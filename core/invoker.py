# =============================================================================
# core/invoker.py: Tool Invoker
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Runs one tool call end to end and always returns an OutputRecord:
#
#     raw input
#       -> validate (pydantic)        bad input stops here, no network call
#       -> LocalTool?                 render_local() and return
#       -> tool.build_request()
#       -> RequestGateway.send()      the only await in the pipeline
#       -> classify()
#            Success          -> tool.format_payload()          is_error=False
#            PaymentRequired  -> body?  preview + price footer  is_error=False
#                                no body? payment failure        is_error=True
#            Error            -> "<label> failed: <message>"    is_error=True
#
#   Nothing raised inside the pipeline reaches the caller; every failure is
#   turned into an OutputRecord with is_error=True.
# =============================================================================

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, ValidationError

from core.catalog import LocalTool, RemoteTool, Tool
from core.classifier import classify
from core.formatting import format_failure, format_payment_required, format_preview
from core.gateway import RequestGateway
from core.models import (
    Error,
    OutputRecord,
    PaymentRequired,
    PreviewPayload,
    RawTransportResult,
    RequestOutcome,
    Success,
)
from core.preview import extract_preview

logger = logging.getLogger(__name__)


def describe_validation_error(tool_name: str, exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "input"
        problems.append(f"{location}: {err['msg']}")
    return f"Invalid input for {tool_name}: " + "; ".join(problems)


class ToolInvoker:
    """Shared request/response pipeline for every tool."""

    def __init__(
        self,
        gateway: RequestGateway,
        classifier: Callable[[RawTransportResult], RequestOutcome] = classify,
        extractor: Callable[[Any], PreviewPayload] = extract_preview,
    ):
        self.gateway = gateway
        self.classifier = classifier
        self.extractor = extractor

    async def invoke(self, tool: Tool, raw_input: Optional[dict]) -> OutputRecord:
        try:
            params = tool.validate(raw_input)
        except ValidationError as exc:
            logger.info("%s: rejected input", tool.name)
            return OutputRecord(text=describe_validation_error(tool.name, exc), is_error=True)

        logger.info("%s: %s", tool.name, tool.describe(params))

        if isinstance(tool, LocalTool):
            return OutputRecord(text=tool.render_local(params))

        spec = tool.build_request(params)
        raw = await self.gateway.send(spec.endpoint, spec.params)
        outcome = self.classifier(raw)
        return self.render(tool, params, outcome)

    def render(self, tool: RemoteTool, params: BaseModel, outcome: RequestOutcome) -> OutputRecord:
        """Turn a classified outcome into the caller-facing record."""
        if isinstance(outcome, Success):
            try:
                text = tool.format_payload(params, outcome.payload)
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("%s: unexpected response shape: %r", tool.name, exc)
                return OutputRecord(
                    text=format_failure(tool.label, f"unexpected response shape ({exc!r})"),
                    is_error=True,
                )
            return OutputRecord(text=text)

        if isinstance(outcome, PaymentRequired):
            if outcome.has_preview:
                preview = self.extractor(outcome.preview_body)
                logger.info(
                    "%s: payment required, preview %s",
                    tool.name,
                    "sample" if preview.sample_data is not None else "raw body",
                )
                return OutputRecord(
                    text=format_preview(
                        tool.name,
                        preview,
                        price_usd=outcome.declared_price_usd,
                        payment_info=outcome.payment_info,
                    )
                )
            message = format_payment_required(self.gateway.base_url, outcome.payment_info)
            return OutputRecord(text=format_failure(tool.label, message), is_error=True)

        if isinstance(outcome, Error):
            logger.info("%s: %s (status %s)", tool.name, outcome.kind.value, outcome.status_code)
            return OutputRecord(text=format_failure(tool.label, outcome.message), is_error=True)

        raise TypeError(f"Unhandled outcome: {outcome!r}")
