from core.config import DEFAULT_API_BASE, USER_AGENT, load_settings


def test_defaults_to_production_origin():
    settings = load_settings({})
    assert settings.api_base == DEFAULT_API_BASE == "https://apolloai.team"
    assert settings.user_agent == USER_AGENT


def test_api_base_from_environment():
    settings = load_settings({"APOLLO_API_URL": "https://staging.apollo.test"})
    assert settings.api_base == "https://staging.apollo.test"


def test_blank_api_base_falls_back_to_default():
    assert load_settings({"APOLLO_API_URL": "   "}).api_base == DEFAULT_API_BASE


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("APOLLO_API_URL", "http://localhost:8402")
    assert load_settings().api_base == "http://localhost:8402"
