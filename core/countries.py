# =============================================================================
# core/countries.py: Proxy Exit Countries
# =============================================================================
#
# Static table of the ISO 3166-1 alpha-2 codes Apollo can exit through,
# grouped by region for list_countries.  Read-only after import.
# =============================================================================

from types import MappingProxyType

PROXY_COUNTRIES: tuple[str, ...] = (
    "US", "GB", "DE", "FR", "NL", "CA", "AU", "JP", "KR", "SG",
    "BR", "MX", "AR", "IN", "ID", "TH", "VN", "PH", "MY", "TW",
    "HK", "IT", "ES", "PT", "PL", "CZ", "AT", "CH", "BE", "SE",
    "NO", "DK", "FI", "IE", "IL", "AE", "SA", "ZA", "NG", "EG",
    "RU", "UA", "TR", "GR", "RO", "HU", "BG", "HR", "SK", "SI",
    "CL", "CO", "PE", "VE", "EC", "PA", "CR", "GT", "DO", "PR",
    "NZ", "PK", "BD", "LK", "NP", "MM", "KH", "LA", "MN", "KZ",
)

REGIONS = MappingProxyType({
    "americas": (
        "US", "CA", "MX", "BR", "AR", "CL", "CO", "PE", "VE", "EC",
        "PA", "CR", "GT", "DO", "PR",
    ),
    "europe": (
        "GB", "DE", "FR", "NL", "IT", "ES", "PT", "PL", "CZ", "AT",
        "CH", "BE", "SE", "NO", "DK", "FI", "IE", "GR", "RO", "HU",
        "BG", "HR", "SK", "SI", "UA", "RU", "TR",
    ),
    "asia": (
        "JP", "KR", "SG", "IN", "ID", "TH", "VN", "PH", "MY", "TW",
        "HK", "PK", "BD", "LK", "NP", "MM", "KH", "LA", "MN", "KZ",
        "IL", "AE", "SA",
    ),
    "africa": ("ZA", "NG", "EG"),
    "oceania": ("AU", "NZ"),
})


def countries_for_region(region: str) -> tuple[str, ...]:
    """Return the country codes for a region ("all" returns every code)."""
    if region == "all":
        return PROXY_COUNTRIES
    return REGIONS.get(region, ())
