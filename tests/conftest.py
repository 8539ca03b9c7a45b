"""Shared fixtures: keep the host environment out of config-driven tests."""

import pytest

from scribe.config import AppConfig, GitHubConfig, LoggingConfig

_ENV_KEYS = (
    [name.upper() for name in AppConfig.model_fields]
    + [f"GITHUB_{name.upper()}" for name in GitHubConfig.model_fields]
    + [f"LOGGING_{name.upper()}" for name in LoggingConfig.model_fields]
    + ["GITHUB_TOKEN_FILE"]
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
