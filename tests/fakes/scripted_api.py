from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from automerge.core.ports.github_api import GitHubApi
from automerge.core.schema.pr import PullRequest, Review
from automerge.core.schema.status import (
    BranchProtection,
    CheckSuite,
    CombinedStatus,
    MergeResult,
)


@dataclass(frozen=True)
class ExpectedCall:
    name: str
    args: Tuple[Any, ...]
    response: Any = None
    error: Optional[Exception] = None


class ScriptedGitHubApi(GitHubApi):
    """Replays an ordered list of expected calls and canned responses."""

    def __init__(self, expected: Iterable[ExpectedCall]) -> None:
        self._expected = list(expected)
        self._index = 0

    def assert_exhausted(self) -> None:
        left = self._expected[self._index:]
        assert not left, f"expected calls not made: {[call.name for call in left]}"

    def get_branch_protection(
        self, owner: str, repo: str, branch: str
    ) -> BranchProtection:
        return self._call("get_branch_protection", owner, repo, branch)

    def get_combined_status(self, owner: str, repo: str, ref: str) -> CombinedStatus:
        return self._call("get_combined_status", owner, repo, ref)

    def list_check_suites(
        self, owner: str, repo: str, ref: str
    ) -> Tuple[CheckSuite, ...]:
        return self._call("list_check_suites", owner, repo, ref)

    def list_reviews(self, owner: str, repo: str, number: int) -> Tuple[Review, ...]:
        return self._call("list_reviews", owner, repo, number)

    def is_collaborator(self, owner: str, repo: str, username: str) -> bool:
        return self._call("is_collaborator", owner, repo, username)

    def list_team_members(self, org: str, team_slug: str) -> Tuple[str, ...]:
        return self._call("list_team_members", org, team_slug)

    def list_pull_requests(
        self, owner: str, repo: str, head: str
    ) -> Tuple[PullRequest, ...]:
        return self._call("list_pull_requests", owner, repo, head)

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        return self._call("get_pull_request", owner, repo, number)

    def merge_pull_request(
        self,
        owner: str,
        repo: str,
        number: int,
        sha: str,
        merge_method: str,
    ) -> MergeResult:
        return self._call("merge_pull_request", owner, repo, number, sha, merge_method)

    def _call(self, name: str, *args: Any) -> Any:
        assert self._index < len(self._expected), f"unexpected call {name}{args}"
        expected = self._expected[self._index]
        self._index += 1
        assert (expected.name, expected.args) == (name, args), (
            f"expected {expected.name}{expected.args}, got {name}{args}"
        )
        if expected.error is not None:
            raise expected.error
        return expected.response
