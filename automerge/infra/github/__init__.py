from automerge.infra.github.api import GitHubRestApi
from automerge.infra.github.client import GitHubClient
from automerge.infra.github.config_source import GitHubConfigSource

__all__ = ["GitHubClient", "GitHubRestApi", "GitHubConfigSource"]
