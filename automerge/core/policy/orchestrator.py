from automerge.core.exceptions import ConfigError, MergeCheckError
from automerge.core.policy.context import EvaluationContext
from automerge.core.policy.executor import MergeExecutor
from automerge.core.policy.gate import MergeEligibilityGate
from automerge.core.ports.logger import Logger
from automerge.core.schema.pr import PullRequest


class PolicyOrchestrator:
    def __init__(
        self,
        logger: Logger,
        gate: MergeEligibilityGate,
        executor: MergeExecutor,
    ) -> None:
        self._logger = logger
        self._gate = gate
        self._executor = executor

    def check_merge(self, context: EvaluationContext, pull_request: PullRequest) -> bool:
        """Merge ``pull_request`` if policy allows it; True iff it got merged."""
        number = pull_request.number
        self._logger.info(
            "Checking merge",
            repository=context.full_name,
            pull_request=number,
        )

        try:
            decision = self._gate.evaluate(context, pull_request)
        except ConfigError as error:
            self._logger.warning(
                "Invalid repository config",
                repository=context.full_name,
                pull_request=number,
                key=error.key,
                error=error.message,
            )
            return False
        except MergeCheckError as error:
            self._logger.debug(
                "Merge check failed",
                repository=context.full_name,
                pull_request=number,
                error=error.message,
            )
            return False

        if not decision.eligible:
            self._logger.info(
                "Skipping merge",
                pull_request=number,
                reason=decision.reason,
            )
            return False

        if not self._executor.merge(context, pull_request):
            self._logger.info("Failed to merge", pull_request=number)
            return False

        self._logger.info("Merged pull request", pull_request=number)
        return True
