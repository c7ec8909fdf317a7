from functools import reduce
from typing import Optional

from automerge.core.ports.github_api import GitHubApi
from automerge.core.ports.logger import Logger
from automerge.core.schema.pr import PullRequest
from automerge.core.schema.status import CheckSuite

SUCCESS = "SUCCESS"
CHECKS_MISSING = "CHECKS_MISSING"
CHECKS_PENDING = "CHECKS_PENDING"
CHECKS_FAILED = "CHECKS_FAILED"

SUITE_QUEUED = "queued"
SUITE_COMPLETED = "completed"


def is_relevant_suite(suite: CheckSuite, pull_request: PullRequest) -> bool:
    # bots queue suites against every branch they see; those never finish
    # for pull requests they have nothing to do with
    if (
        suite.status == SUITE_QUEUED
        and pull_request.number not in suite.pull_request_numbers
    ):
        return False

    if suite.status != SUITE_COMPLETED:
        return True

    return suite.conclusion != "neutral"


def combine_suite_status(status: Optional[str], suite: CheckSuite) -> str:
    if status and status != SUCCESS:
        return status

    if suite.status != SUITE_COMPLETED:
        return CHECKS_PENDING

    if suite.conclusion != "success":
        return CHECKS_FAILED

    return SUCCESS


class StatusAggregator:
    def __init__(self, logger: Logger, api: GitHubApi) -> None:
        self._logger = logger
        self._api = api

    def status_approval(self, pull_request: PullRequest) -> str:
        """Combine commit statuses and check suites of the head commit.

        Only ``SUCCESS`` means mergeable: at least one status or check exists
        and all of them succeeded (neutral suites are ignored).
        """
        repo = pull_request.base.repo
        sha = pull_request.head.sha

        combined = self._api.get_combined_status(repo.owner, repo.name, sha)
        status_state = combined.state.upper()

        if combined.statuses and status_state != SUCCESS:
            self._logger.debug(
                "Combined status not successful",
                pull_request=pull_request.number,
                state=status_state,
            )
            return f"STATUS_{status_state}"

        suites = self._api.list_check_suites(repo.owner, repo.name, sha)
        relevant = [suite for suite in suites if is_relevant_suite(suite, pull_request)]

        if not relevant:
            if not combined.statuses:
                return CHECKS_MISSING
            return status_state

        checks_state = reduce(combine_suite_status, relevant, None)
        if checks_state != SUCCESS:
            self._logger.debug(
                "Check suites not successful",
                pull_request=pull_request.number,
                state=checks_state,
            )
        return checks_state or CHECKS_MISSING
