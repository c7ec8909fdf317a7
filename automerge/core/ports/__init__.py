from automerge.core.ports.config_source import ConfigSource
from automerge.core.ports.github_api import GitHubApi
from automerge.core.ports.logger import Logger

__all__ = [
    "Logger",
    "GitHubApi",
    "ConfigSource",
]
