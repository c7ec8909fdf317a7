import re
from concurrent.futures import ThreadPoolExecutor
from typing import FrozenSet, Iterable, List, Sequence, Tuple

from automerge.core.exceptions import (
    MergeCheckError,
    SourceNotFoundError,
    SourcePermissionError,
)
from automerge.core.ports.github_api import GitHubApi
from automerge.core.ports.logger import Logger
from automerge.core.schema.config import AppConfig
from automerge.core.schema.pr import PullRequest, Review

APPROVED = "APPROVED"
CHANGES_REQUESTED = "CHANGES_REQUESTED"
REVIEWS_MISSING = "REVIEWS_MISSING"

DEFAULT_MAX_WORKERS = 4

_SLUG_INVALID = re.compile(r"[^a-z0-9_-]+")


def effective_reviews(reviews: Sequence[Review]) -> Tuple[Review, ...]:
    """Keep only the latest review of every reviewer, in submission order."""
    seen = set()
    effective: List[Review] = []
    for review in reversed(reviews):
        if review.user in seen:
            continue
        seen.add(review.user)
        effective.append(review)
    effective.reverse()
    return tuple(effective)


def required_approvals(pull_request: PullRequest, config: AppConfig) -> int:
    # external contributions always need somebody to look at them
    return max(config.min_approvals, 1 if pull_request.is_cross_origin else 0)


def team_slug(name: str) -> str:
    return _SLUG_INVALID.sub("-", name.strip().lower()).strip("-")


def _unique(values: Iterable[str]) -> List[str]:
    result: List[str] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


class ReviewAggregator:
    def __init__(
        self,
        logger: Logger,
        api: GitHubApi,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._logger = logger
        self._api = api
        self._max_workers = max(1, max_workers)

    def review_approval(
        self,
        pull_request: PullRequest,
        reviews: Sequence[Review],
        config: AppConfig,
    ) -> str:
        number = pull_request.number
        effective = effective_reviews(reviews)

        if config.collaborators_only:
            effective = self._collaborator_reviews(pull_request, effective)

        if any(review.state == CHANGES_REQUESTED for review in effective):
            self._logger.debug("Reviews request changes", pull_request=number)
            return CHANGES_REQUESTED

        threshold = required_approvals(pull_request, config)
        approvals = sum(1 for review in effective if review.state == APPROVED)
        if approvals < threshold:
            self._logger.debug(
                "Pull request lacks approvals",
                pull_request=number,
                approvals=approvals,
                min_approvals=threshold,
            )
            return REVIEWS_MISSING

        teams = self._review_team_slugs(pull_request, config)
        if not teams:
            self._logger.debug("Approved via reviews", pull_request=number)
            return APPROVED

        if not pull_request.base.repo.is_organization:
            self._logger.debug(
                "Skipping team reviews, repository owner is not an organization",
                pull_request=number,
                owner=pull_request.base.repo.owner,
            )
            return APPROVED

        return self._team_approval(pull_request, effective, teams, threshold)

    def _collaborator_reviews(
        self,
        pull_request: PullRequest,
        reviews: Sequence[Review],
    ) -> Tuple[Review, ...]:
        repo = pull_request.base.repo
        kept = []
        for review in reviews:
            if self._api.is_collaborator(repo.owner, repo.name, review.user):
                kept.append(review)
            else:
                self._logger.debug(
                    "Ignoring review of non-collaborator",
                    pull_request=pull_request.number,
                    user=review.user,
                )
        return tuple(kept)

    def _review_team_slugs(
        self,
        pull_request: PullRequest,
        config: AppConfig,
    ) -> List[str]:
        requested_by_name = {
            team.name.lower(): team.slug for team in pull_request.requested_teams
        }
        configured = [
            requested_by_name.get(name.lower(), team_slug(name))
            for name in config.review_teams
        ]
        requested = [team.slug for team in pull_request.requested_teams]
        return _unique(configured + requested)

    def _team_approval(
        self,
        pull_request: PullRequest,
        reviews: Sequence[Review],
        teams: Sequence[str],
        threshold: int,
    ) -> str:
        number = pull_request.number
        org = pull_request.base.repo.owner
        requested = {team.slug for team in pull_request.requested_teams}
        memberships = self._fetch_memberships(org, teams)

        reviewers = _unique(
            [review.user for review in reviews]
            + list(pull_request.requested_reviewers)
        )
        approved_by = {review.user for review in reviews if review.state == APPROVED}

        # every reviewer counts towards the first listed team they belong to
        consumed = set()
        for slug, members in zip(teams, memberships):
            assigned = [
                user for user in reviewers if user in members and user not in consumed
            ]
            consumed.update(assigned)

            if not assigned and slug not in requested:
                continue

            team_approvals = sum(1 for user in assigned if user in approved_by)
            if team_approvals < threshold:
                self._logger.debug(
                    "Team lacks approvals",
                    pull_request=number,
                    team=slug,
                    approvals=team_approvals,
                    min_approvals=threshold,
                )
                return REVIEWS_MISSING

        self._logger.debug(
            "Approved via team reviews",
            pull_request=number,
            teams=list(teams),
        )
        return APPROVED

    def _fetch_memberships(
        self,
        org: str,
        teams: Sequence[str],
    ) -> List[FrozenSet[str]]:
        if len(teams) == 1 or self._max_workers == 1:
            return [self._fetch_team(org, slug) for slug in teams]

        workers = min(self._max_workers, len(teams))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map re-raises the first failure in team order
            return list(pool.map(lambda slug: self._fetch_team(org, slug), teams))

    def _fetch_team(self, org: str, slug: str) -> FrozenSet[str]:
        try:
            return frozenset(self._api.list_team_members(org, slug))
        except SourcePermissionError as error:
            raise MergeCheckError(
                f"Not allowed to read members of team {org}/{slug}"
            ) from error
        except SourceNotFoundError as error:
            raise MergeCheckError(
                f"Team {org}/{slug} not found"
            ) from error
