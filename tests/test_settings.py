from gemini_relay.core.settings import DEFAULT_MODEL_NAME, RelayConfig, Settings


def _settings(monkeypatch, **env) -> Settings:
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL_NAME", "GEMINI_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return Settings(_env_file=None)


def test_defaults(monkeypatch):
    settings = _settings(monkeypatch)

    assert settings.gemini_api_key is None
    assert settings.gemini_timeout_seconds == 30.0
    assert settings.relay_config() == RelayConfig(api_key=None, model_name=DEFAULT_MODEL_NAME)
    assert DEFAULT_MODEL_NAME == "gemini-2.0-flash-lite"


def test_environment_overrides(monkeypatch):
    settings = _settings(
        monkeypatch,
        GEMINI_API_KEY="secret",
        GEMINI_MODEL_NAME="gemini-1.5-pro",
        GEMINI_TIMEOUT_SECONDS="5",
    )

    assert settings.gemini_timeout_seconds == 5.0
    assert settings.relay_config() == RelayConfig(api_key="secret", model_name="gemini-1.5-pro")


def test_empty_values_fall_back(monkeypatch):
    settings = _settings(monkeypatch, GEMINI_API_KEY="", GEMINI_MODEL_NAME="")

    assert settings.relay_config() == RelayConfig(api_key=None, model_name=DEFAULT_MODEL_NAME)
