import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_CONFIG_PATH = ".github/merge-me.yml"


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: str
    api_url: str


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    logfire_token: Optional[str]
    level: str = "INFO"


@dataclass(frozen=True, slots=True)
class PolicySettings:
    config_path: str
    team_fetch_workers: int


@dataclass(frozen=True, slots=True)
class EventSettings:
    name: Optional[str]
    payload_path: Optional[str]
    delivery_id: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings
    policy: PolicySettings
    event: EventSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    github_token = _get_env_or_default("GITHUB_TOKEN")
    api_url = _get_env_or_default("GITHUB_API_URL", DEFAULT_API_URL)

    logging_backend = _get_env_or_default("AUTOMERGE_LOGGER_BACKEND", "console").lower()
    logging_name = _get_env_or_default("AUTOMERGE_LOGGER_NAME", "automerge")
    logfire_token = _get_env_or_default("AUTOMERGE_LOGFIRE_TOKEN")
    logging_level = _get_env_or_default("AUTOMERGE_LOG_LEVEL", "INFO").upper()

    config_path = _get_env_or_default("AUTOMERGE_CONFIG_PATH", DEFAULT_CONFIG_PATH)
    team_fetch_workers = _env_int("AUTOMERGE_TEAM_FETCH_WORKERS", 4)

    return Settings(
        github=GitHubSettings(token=github_token, api_url=api_url),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            logfire_token=logfire_token,
            level=logging_level,
        ),
        policy=PolicySettings(
            config_path=config_path,
            team_fetch_workers=team_fetch_workers,
        ),
        event=EventSettings(
            name=_get_env_or_default("GITHUB_EVENT_NAME"),
            payload_path=_get_env_or_default("GITHUB_EVENT_PATH"),
            delivery_id=_get_env_or_default("AUTOMERGE_DELIVERY_ID"),
        ),
    )


def _get_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_int(name: str, default: int) -> int:
    value = _get_env_or_default(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ValueError(f"{name} must be an integer, got {value!r}") from error
