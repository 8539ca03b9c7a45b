"""Configuration loading from environment and an optional YAML file.

Variable names follow the CI workflow that runs scribe (MODE, FILEPATH,
ISSUE_NUMBER, ...). Secrets (tokens) are taken from environment variables or
from files (Docker secrets). Never put real tokens in config files committed
to the repo.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MODE_FILE = "file"
MODE_ISSUE = "issue"
MODES = (MODE_FILE, MODE_ISSUE)

LATEST = "latest"


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so secrets and ${VAR} substitution read the same env
_current_env: dict[str, str] = {}


class GitHubConfig(BaseSettings):
    """GitHub API settings and source repository."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or Actions token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    repository: str = Field(default="", description="Source repo e.g. owner/repo")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root config: what to render and where to send it."""

    model_config = SettingsConfigDict(extra="ignore")

    mode: str = Field(default="", description="Comma-separated sinks: file, issue")
    with_quote: str = Field(default="", description="Modes whose output is block-quoted (substring match)")
    with_date: bool = Field(default=False, description="Append a local-time line after each block")
    with_header: str = Field(default="", description="Literal header text")

    filepath: str = Field(default="", description="Output file for file mode")
    extra_text_when_modified: str = Field(default="", description="Marker inserted before appended content")
    committer_name: str = Field(default="github-actions[bot]", description="Git user.name")
    committer_email: str = Field(
        default="41898282+github-actions[bot]@users.noreply.github.com",
        description="Git user.email",
    )

    target_issue_repo: str = Field(default="", description="Repo to post to; defaults to source repo")
    target_issue_number: str = Field(default="", description="Issue number to post to, or 'latest'")

    issue_number: int | None = Field(default=None, description="Source issue number")
    issue_body: str = Field(default="", description="Source issue description")
    issue_created_at: datetime | None = Field(default=None, description="Source issue creation time (ISO 8601)")
    issue_title: str = Field(default="", description="Source issue title")
    issue_url: str = Field(default="", description="Source issue html URL")

    timezone: str = Field(default="UTC", description="IANA time zone for date lines")
    time_format: str = Field(default="%Y-%m-%d %H:%M:%S", description="strftime format for date lines")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("with_date", mode="before")
    @classmethod
    def _presence_toggles(cls, value: Any) -> Any:
        # Any non-empty value turns dates on, except explicit negatives
        if isinstance(value, str):
            return value.strip().lower() not in ("", "false", "0", "no", "off")
        return value

    @field_validator("issue_created_at", "issue_number", mode="before")
    @classmethod
    def _empty_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {value!r}") from e
        return value

    @model_validator(mode="after")
    def _check_modes(self) -> "AppConfig":
        for mode in self.modes:
            if mode not in MODES:
                raise ValueError(f"unknown mode: {mode!r} (expected one of {', '.join(MODES)})")
        return self

    @property
    def modes(self) -> List[str]:
        """Configured modes in order, whitespace trimmed."""
        return [m.strip() for m in self.mode.split(",") if m.strip()]

    def quote_for(self, mode: str) -> bool:
        """Whether output for the given mode is block-quoted."""
        return mode in self.with_quote

    @property
    def target_repo(self) -> str:
        """Repository the issue sink posts to."""
        return self.target_issue_repo or self.github.repository

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def _validate_required(config: AppConfig) -> None:
    """Fail before any network call when a mode lacks what it needs."""
    missing = []
    if not config.modes:
        missing.append("MODE")
    if not config.github.repository:
        missing.append("GITHUB_REPOSITORY")
    if config.issue_number is None:
        missing.append("ISSUE_NUMBER")
    if not config.github_token_resolved:
        missing.append("GITHUB_TOKEN")
    if MODE_FILE in config.modes and not config.filepath:
        missing.append("FILEPATH")
    if missing:
        raise ConfigError(f"missing required configuration: {', '.join(missing)}")
    target = config.target_issue_number.strip()
    if MODE_ISSUE in config.modes and target and target != LATEST and not target.isdigit():
        raise ConfigError(f"TARGET_ISSUE_NUMBER must be a number or '{LATEST}', got {target!r}")


def load_config(config_path: Path | None = None, validate: bool = True) -> AppConfig:
    """Load config from environment, seeded by an optional YAML file.

    Raises ConfigError on invalid values, and (when validate is True) on
    values a configured mode requires but that are missing.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    raw: dict[str, Any] = {}
    if config_path is not None and config_path.is_file():
        raw = yaml.safe_load(config_path.read_text()) or {}
        raw = _substitute_env(raw)

    try:
        github = GitHubConfig(**(raw.pop("github", None) or {}))
        logging = LoggingConfig(**(raw.pop("logging", None) or {}))
        config = AppConfig(github=github, logging=logging, **raw)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}" for err in e.errors())
        raise ConfigError(errors) from e

    if validate:
        _validate_required(config)
    return config
