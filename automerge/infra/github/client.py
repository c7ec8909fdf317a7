from typing import Dict

from github import Auth, Github
from github.Organization import Organization
from github.Repository import Repository

DEFAULT_BASE_URL = "https://api.github.com"


class GitHubClient:
    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self._client = Github(auth=Auth.Token(token), base_url=base_url)
        self._repos: Dict[str, Repository] = {}

    def get_repo(self, owner: str, name: str) -> Repository:
        full_name = f'{owner}/{name}'
        if full_name not in self._repos:
            self._repos[full_name] = self._client.get_repo(full_name)
        return self._repos[full_name]

    def get_organization(self, org: str) -> Organization:
        return self._client.get_organization(org)

    def close(self) -> None:
        try:
            self._client.close()
        except AttributeError:
            return

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
