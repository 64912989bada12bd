import pytest


@pytest.fixture
def fetch_payload():
    return {
        "target_url": "https://example.com",
        "proxy_country": "DE",
        "response": {
            "status_code": 200,
            "content_type": "text/html",
            "bytes_returned": 15,
            "truncated": False,
            "body": "<html>hi</html>",
        },
        "price_paid_usd": 0.005,
    }


@pytest.fixture
def status_payload():
    return {
        "service": "apollo-proxy",
        "status": "online",
        "pricing": {
            "per_request_usd": 0.005,
            "max_response_bytes": 256000,
            "rate_limit": "100 req/min",
        },
        "supported_types": ["residential"],
        "supported_countries": 190,
        "session_types": ["rotating", "sticky"],
        "supported_methods": ["GET", "POST", "HEAD"],
    }
