# =============================================================================
# core/preview.py: Preview Extractor
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   A 402 body often contains a free sample of the paid data.  Apollo's
#   endpoints do not agree on where they put it, so we check a fixed list of
#   known key names, in order, and take the first one that holds something.
#
#   Separately, any key named "count" or starting with "total_" is read as
#   the size of the full dataset.
#
# KNOWN FRAGILITY:
#   If the upstream renames its sample field, extraction quietly degrades to
#   showing the raw body.  Add the new name to SAMPLE_KEYS when that happens.
# =============================================================================

from typing import Any, Optional

from core.models import PreviewPayload

# Order matters: the earlier key wins when a body has several.
SAMPLE_KEYS: tuple[str, ...] = (
    "sample_opportunities",
    "sample_items",
    "sample_results",
    "sample_data",
    "sample_entries",
    "sample_launches",
    "sample_pools",
    "sample_protocols",
    "sample_coins",
    "sample_prices",
    "preview_data",
    "items",
)


def find_sample(body: dict) -> Optional[Any]:
    for key in SAMPLE_KEYS:
        value = body.get(key)
        if value:
            return value
    return None


def find_total(body: dict) -> Optional[Any]:
    for key, value in body.items():
        if key == "count" or key.startswith("total_"):
            return value
    return None


def extract_preview(body: Any) -> PreviewPayload:
    """Locate the sample array and total-count hint in a 402 body."""
    if not isinstance(body, dict):
        return PreviewPayload(raw=body)
    return PreviewPayload(
        sample_data=find_sample(body),
        total_count=find_total(body),
        raw=body,
    )
