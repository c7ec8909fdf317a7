from automerge.core.policy.context import EvaluationContext
from automerge.core.policy.protection import BranchProtectionProbe
from automerge.core.policy.reviews import APPROVED, ReviewAggregator
from automerge.core.policy.status import SUCCESS, StatusAggregator
from automerge.core.ports.github_api import GitHubApi
from automerge.core.ports.logger import Logger
from automerge.core.schema.config import MergeMethod
from automerge.core.schema.decision import MergeDecision
from automerge.core.schema.pr import PullRequest

DRAFT = "DRAFT"
ALREADY_MERGED = "ALREADY_MERGED"
NOT_REBASEABLE = "NOT_REBASEABLE"
NOT_MERGEABLE = "NOT_MERGEABLE"
PROTECTION_UNKNOWN = "PROTECTION_UNKNOWN"
BRANCH_PROTECTED = "BRANCH_PROTECTED"


class MergeEligibilityGate:
    def __init__(
        self,
        logger: Logger,
        api: GitHubApi,
        protection_probe: BranchProtectionProbe,
        status_aggregator: StatusAggregator,
        review_aggregator: ReviewAggregator,
    ) -> None:
        self._logger = logger
        self._api = api
        self._protection_probe = protection_probe
        self._status_aggregator = status_aggregator
        self._review_aggregator = review_aggregator

    def can_merge(self, context: EvaluationContext, pull_request: PullRequest) -> bool:
        return self.evaluate(context, pull_request).eligible

    def evaluate(
        self,
        context: EvaluationContext,
        pull_request: PullRequest,
    ) -> MergeDecision:
        """Decide whether ``pull_request`` may be merged right now.

        Cheap checks on the payload come first. A protected base branch is
        accepted as is, since GitHub enforces its rules on the merge call
        itself. Otherwise statuses, checks and reviews are verified here.

        Raises :class:`ConfigError` for a malformed repository config and
        :class:`MergeCheckError` when review teams cannot be resolved.
        """
        number = pull_request.number

        if pull_request.draft:
            return self._reject(number, DRAFT)

        if pull_request.merged:
            return self._reject(number, ALREADY_MERGED)

        config = context.config()

        if config.merge_method is MergeMethod.REBASE and pull_request.rebaseable is False:
            return self._reject(number, NOT_REBASEABLE)

        if config.merge_method is MergeMethod.MERGE and pull_request.mergeable is False:
            return self._reject(number, NOT_MERGEABLE)

        base = pull_request.base
        branch_protected = self._protection_probe.is_branch_protected(
            base.repo,
            base.ref,
        )
        if branch_protected is None:
            return self._reject(number, PROTECTION_UNKNOWN)

        if branch_protected:
            self._logger.debug(
                "Branch is protected, skipping merge check",
                pull_request=number,
                branch=base.ref,
            )
            return MergeDecision.accept(BRANCH_PROTECTED)

        self._logger.debug("Checking status and reviews", pull_request=number)

        status_approval = self._status_aggregator.status_approval(pull_request)
        if status_approval != SUCCESS:
            return self._reject(number, status_approval)

        reviews = self._api.list_reviews(base.repo.owner, base.repo.name, number)
        review_approval = self._review_aggregator.review_approval(
            pull_request,
            reviews,
            config,
        )
        if review_approval != APPROVED:
            return self._reject(number, review_approval)

        self._logger.debug("Pull request check passed", pull_request=number)
        return MergeDecision.accept(APPROVED)

    def _reject(self, number: int, reason: str) -> MergeDecision:
        self._logger.info("Merge check failed", pull_request=number, reason=reason)
        return MergeDecision.reject(reason)
