from typing import Protocol, Tuple, runtime_checkable

from automerge.core.schema.pr import PullRequest, Review
from automerge.core.schema.status import (
    BranchProtection,
    CheckSuite,
    CombinedStatus,
    MergeResult,
)


@runtime_checkable
class GitHubApi(Protocol):
    """Remote operations the merge policy needs from the source code host.

    Everything but :meth:`merge_pull_request` is read-only. Implementations
    raise :class:`~automerge.core.exceptions.SourceError` subclasses for
    remote failures, except :meth:`get_branch_protection`, which reports
    failures through its result, and :meth:`is_collaborator`, which answers
    ``False`` for unknown users.
    """

    def get_branch_protection(
        self, owner: str, repo: str, branch: str
    ) -> BranchProtection:
        ...

    def get_combined_status(self, owner: str, repo: str, ref: str) -> CombinedStatus:
        ...

    def list_check_suites(
        self, owner: str, repo: str, ref: str
    ) -> Tuple[CheckSuite, ...]:
        ...

    def list_reviews(self, owner: str, repo: str, number: int) -> Tuple[Review, ...]:
        ...

    def is_collaborator(self, owner: str, repo: str, username: str) -> bool:
        ...

    def list_team_members(self, org: str, team_slug: str) -> Tuple[str, ...]:
        ...

    def list_pull_requests(
        self, owner: str, repo: str, head: str
    ) -> Tuple[PullRequest, ...]:
        ...

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        ...

    def merge_pull_request(
        self,
        owner: str,
        repo: str,
        number: int,
        sha: str,
        merge_method: str,
    ) -> MergeResult:
        ...
