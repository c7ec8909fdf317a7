from automerge.infra.github import GitHubClient, GitHubConfigSource, GitHubRestApi
from automerge.infra.logging import (
    BoundLogger,
    ConsoleLogger,
    LogfireLogger,
    configure_logfire,
)

__all__ = [
    'GitHubClient',
    'GitHubRestApi',
    'GitHubConfigSource',
    'BoundLogger',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
]
