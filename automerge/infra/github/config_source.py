import yaml
from github import GithubException

from automerge.core.exceptions import ConfigError
from automerge.core.ports.config_source import ConfigSource
from automerge.core.schema.config import AppConfig
from automerge.infra.github.client import GitHubClient
from automerge.infra.github.errors import translate_exception

DEFAULT_CONFIG_PATH = ".github/merge-me.yml"


class GitHubConfigSource(ConfigSource):
    """Read the bot configuration from the repository's default branch."""

    def __init__(self, client: GitHubClient, path: str = DEFAULT_CONFIG_PATH) -> None:
        self._client = client
        self._path = path

    def load(self, owner: str, repo: str) -> AppConfig:
        resource = f"{owner}/{repo}:{self._path}"
        try:
            contents = self._client.get_repo(owner, repo).get_contents(self._path)
        except GithubException as error:
            if error.status == 404:
                return AppConfig()
            raise translate_exception(
                "Failed to read repository config",
                error,
                resource=resource,
            ) from error

        if isinstance(contents, list):
            raise ConfigError(f"{self._path} is a directory")

        try:
            raw = yaml.safe_load(contents.decoded_content)
        except yaml.YAMLError as error:
            raise ConfigError(f"Failed to parse {self._path}: {error}") from error
        return AppConfig.from_mapping(raw)
