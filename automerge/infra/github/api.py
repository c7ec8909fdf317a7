from typing import Tuple

import requests
from github import GithubException
from github.Repository import Repository

from automerge.core.events.payloads import pull_request_from_payload
from automerge.core.exceptions import SourceError
from automerge.core.ports.github_api import GitHubApi
from automerge.core.schema.pr import (
    PullRequest,
    PullRequestBase,
    PullRequestHead,
    RepositoryRef,
    Review,
    TeamRef,
)
from automerge.core.schema.status import (
    BranchProtection,
    CheckSuite,
    CombinedStatus,
    CommitStatus,
    MergeResult,
)
from automerge.infra.github.client import GitHubClient
from automerge.infra.github.errors import translate_exception

STATUS_OPEN = "open"
NOT_PROTECTED_MESSAGE = "Branch not protected"


def _is_not_protected(error: GithubException) -> bool:
    # a missing branch or a hidden repository is a 404 too
    data = error.data if isinstance(error.data, dict) else {}
    return error.status == 404 and data.get("message") == NOT_PROTECTED_MESSAGE


class GitHubRestApi(GitHubApi):
    def __init__(self, client: GitHubClient) -> None:
        self._client = client

    def get_branch_protection(
        self, owner: str, repo: str, branch: str
    ) -> BranchProtection:
        resource = f"{owner}/{repo}@{branch}"
        try:
            repository = self._get_repo(owner, repo)
            repository.get_branch(branch).get_protection()
        except GithubException as error:
            if _is_not_protected(error):
                return BranchProtection.unprotected()
            return BranchProtection.unknown(
                translate_exception(
                    "Failed to fetch branch protection",
                    error,
                    resource=resource,
                )
            )
        except SourceError as error:
            return BranchProtection.unknown(error)
        except requests.RequestException as error:
            return BranchProtection.unknown(
                SourceError(f"Failed to fetch branch protection: {error}")
            )
        return BranchProtection.protected()

    def get_combined_status(self, owner: str, repo: str, ref: str) -> CombinedStatus:
        try:
            commit = self._get_repo(owner, repo).get_commit(ref)
            combined = commit.get_combined_status()
            statuses = tuple(
                CommitStatus(context=status.context, state=status.state)
                for status in combined.statuses
            )
        except GithubException as error:
            raise translate_exception(
                "Failed to fetch combined status",
                error,
                resource=f"{owner}/{repo}@{ref}",
            ) from error
        return CombinedStatus(state=combined.state, statuses=statuses)

    def list_check_suites(
        self, owner: str, repo: str, ref: str
    ) -> Tuple[CheckSuite, ...]:
        try:
            commit = self._get_repo(owner, repo).get_commit(ref)
            return tuple(self._to_check_suite(suite) for suite in commit.get_check_suites())
        except GithubException as error:
            raise translate_exception(
                "Failed to list check suites",
                error,
                resource=f"{owner}/{repo}@{ref}",
            ) from error

    def list_reviews(self, owner: str, repo: str, number: int) -> Tuple[Review, ...]:
        try:
            pull = self._get_repo(owner, repo).get_pull(number)
            return tuple(self._to_review(review) for review in pull.get_reviews())
        except GithubException as error:
            raise translate_exception(
                "Failed to list reviews",
                error,
                resource=f"{owner}/{repo}#{number}",
            ) from error

    def is_collaborator(self, owner: str, repo: str, username: str) -> bool:
        try:
            return self._get_repo(owner, repo).has_in_collaborators(username)
        except GithubException as error:
            if error.status == 404:
                return False
            raise translate_exception(
                "Failed to check collaborator",
                error,
                resource=f"{owner}/{repo}:{username}",
            ) from error

    def list_team_members(self, org: str, team_slug: str) -> Tuple[str, ...]:
        try:
            team = self._client.get_organization(org).get_team_by_slug(team_slug)
            return tuple(member.login for member in team.get_members())
        except GithubException as error:
            raise translate_exception(
                "Failed to list team members",
                error,
                resource=f"{org}/{team_slug}",
            ) from error

    def list_pull_requests(
        self, owner: str, repo: str, head: str
    ) -> Tuple[PullRequest, ...]:
        try:
            pulls = self._get_repo(owner, repo).get_pulls(state=STATUS_OPEN, head=head)
            return tuple(self._to_listed_pull_request(pull) for pull in pulls)
        except GithubException as error:
            raise translate_exception(
                "Failed to list pull requests",
                error,
                resource=f"{owner}/{repo}:{head}",
            ) from error

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        try:
            pull = self._get_repo(owner, repo).get_pull(number)
            return pull_request_from_payload(pull.raw_data)
        except GithubException as error:
            raise translate_exception(
                "Failed to fetch pull request",
                error,
                resource=f"{owner}/{repo}#{number}",
            ) from error

    def merge_pull_request(
        self,
        owner: str,
        repo: str,
        number: int,
        sha: str,
        merge_method: str,
    ) -> MergeResult:
        try:
            pull = self._get_repo(owner, repo).get_pull(number)
            status = pull.merge(merge_method=merge_method, sha=sha)
        except GithubException as error:
            raise translate_exception(
                "Failed to merge pull request",
                error,
                resource=f"{owner}/{repo}#{number}",
            ) from error
        return MergeResult(merged=status.merged, sha=status.sha, message=status.message)

    def _to_listed_pull_request(self, pull) -> PullRequest:  # noqa: ANN001
        # built from the listing itself, which has no merge state
        head = pull.head
        base = pull.base
        return PullRequest(
            number=pull.number,
            author=pull.user.login if pull.user else "",
            draft=bool(pull.draft),
            merged=False,
            mergeable=None,
            rebaseable=None,
            head=PullRequestHead(
                sha=head.sha,
                ref=head.ref,
                repo=self._to_repository_ref(head.repo) if head.repo else None,
            ),
            base=PullRequestBase(ref=base.ref, repo=self._to_repository_ref(base.repo)),
            requested_reviewers=tuple(user.login for user in pull.requested_reviewers),
            requested_teams=tuple(
                TeamRef(name=team.name, slug=team.slug) for team in pull.requested_teams
            ),
        )

    def _to_repository_ref(self, repository) -> RepositoryRef:  # noqa: ANN001
        return RepositoryRef(
            id=repository.id,
            owner=repository.owner.login,
            name=repository.name,
            full_name=repository.full_name,
            owner_type=repository.owner.type,
        )

    def _to_check_suite(self, suite) -> CheckSuite:  # noqa: ANN001
        app = suite.app
        return CheckSuite(
            id=suite.id,
            status=suite.status,
            conclusion=suite.conclusion,
            app_slug=app.slug if app else None,
            pull_request_numbers=tuple(pull.number for pull in suite.pull_requests),
        )

    def _to_review(self, review) -> Review:  # noqa: ANN001
        return Review(
            id=review.id,
            user=review.user.login if review.user else "",
            state=review.state,
            submitted_at=review.submitted_at,
        )

    def _get_repo(self, owner: str, repo: str) -> Repository:
        try:
            return self._client.get_repo(owner, repo)
        except GithubException as error:
            raise translate_exception(
                "Failed to access repository",
                error,
                resource=f"{owner}/{repo}",
            ) from error
