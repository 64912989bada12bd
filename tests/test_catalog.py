import pytest
from pydantic import ValidationError

from core.catalog import (
    ListCountriesTool,
    LocalTool,
    ProxyFetchTool,
    ProxyStatusTool,
    RemoteTool,
    build_catalog,
)
from core.countries import PROXY_COUNTRIES, REGIONS, countries_for_region
from core.formatting import (
    BODY_DISPLAY_LIMIT,
    PREVIEW_DISPLAY_LIMIT,
    format_preview,
    format_proxy_fetch,
    format_proxy_status,
)
from core.models import PreviewPayload


def test_catalog_order_and_unique_names():
    names = [tool.name for tool in build_catalog()]
    assert names == ["proxy_fetch", "proxy_status", "list_countries"]


def test_proxy_fetch_contract_defaults():
    params = ProxyFetchTool().validate({"target_url": "http://example.com"})
    assert params.country == "US"
    assert params.method == "GET"
    assert params.session_type == "rotating"


def test_proxy_fetch_contract_rejects_bad_scheme():
    with pytest.raises(ValidationError):
        ProxyFetchTool().validate({"target_url": "file:///etc/passwd"})


def test_proxy_fetch_request_spec_is_read_only():
    tool = ProxyFetchTool()
    spec = tool.build_request(tool.validate({"target_url": "https://a.test", "country": "jp", "method": "HEAD"}))

    assert spec.endpoint == "/api/proxy/request"
    assert spec.params["country"] == "JP"
    assert spec.params["method"] == "HEAD"
    with pytest.raises(TypeError):
        spec.params["country"] = "US"


def test_proxy_status_ignores_unknown_arguments():
    tool = ProxyStatusTool()
    spec = tool.build_request(tool.validate({"verbose": True}))
    assert spec.endpoint == "/api/proxy/status"
    assert dict(spec.params) == {}


def test_list_countries_is_local():
    tool = ListCountriesTool()
    params = tool.validate({})
    assert isinstance(tool, LocalTool)
    assert not hasattr(tool, "build_request")

    text = tool.render_local(params)
    assert "**Region:** all" in text
    assert f"**Total:** {len(PROXY_COUNTRIES)} countries" in text


def test_regions_partition_the_country_table():
    grouped = [code for codes in REGIONS.values() for code in codes]
    assert sorted(grouped) == sorted(PROXY_COUNTRIES)
    assert len(PROXY_COUNTRIES) == 70
    assert countries_for_region("africa") == ("ZA", "NG", "EG")
    assert countries_for_region("nowhere") == ()


def test_format_proxy_fetch(fetch_payload):
    text = format_proxy_fetch(fetch_payload)
    assert "**Proxy Country:** DE" in text
    assert "**Bytes:** 15\n" in text
    assert "**Cost:** $0.005" in text


def test_format_proxy_fetch_json_body_and_truncation(fetch_payload):
    fetch_payload["response"]["body"] = {"hello": "world"}
    fetch_payload["response"]["truncated"] = True
    text = format_proxy_fetch(fetch_payload)
    assert '"hello": "world"' in text
    assert "(truncated)" in text

    fetch_payload["response"]["body"] = "y" * (BODY_DISPLAY_LIMIT + 50)
    assert "y" * (BODY_DISPLAY_LIMIT + 1) not in format_proxy_fetch(fetch_payload)


def test_format_proxy_status(status_payload):
    text = format_proxy_status(status_payload)
    assert "**Status:** online" in text
    assert "- Max response size: 250KB" in text
    assert "- HTTP methods: GET, POST, HEAD" in text


def test_preview_block_is_capped():
    preview = PreviewPayload(sample_data=["z" * (PREVIEW_DISPLAY_LIMIT * 2)], raw={})
    text = format_preview("proxy_status", preview)
    assert "z" * PREVIEW_DISPLAY_LIMIT not in text
    assert "**Price:** see payment details" in text


def test_tools_declare_only_their_own_hooks():
    for tool in (ProxyFetchTool(), ProxyStatusTool()):
        assert isinstance(tool, RemoteTool)
        assert not hasattr(tool, "render_local")


def test_non_string_fetch_bodies_render_as_json(fetch_payload):
    fetch_payload["response"]["body"] = None
    assert "```\nnull\n```" in format_proxy_fetch(fetch_payload)

    fetch_payload["response"]["body"] = False
    assert "```\nfalse\n```" in format_proxy_fetch(fetch_payload)


def test_list_valued_countries_are_joined(status_payload):
    status_payload["supported_countries"] = ["US", "GB"]
    assert "- Countries: US, GB" in format_proxy_status(status_payload)
