from automerge.core.exceptions import SourceError
from automerge.core.policy.context import EvaluationContext
from automerge.core.ports.github_api import GitHubApi
from automerge.core.ports.logger import Logger
from automerge.core.schema.pr import PullRequest

METHOD_NOT_ALLOWED = 405


class MergeExecutor:
    def __init__(self, logger: Logger, api: GitHubApi) -> None:
        self._logger = logger
        self._api = api

    def merge(self, context: EvaluationContext, pull_request: PullRequest) -> bool:
        number = pull_request.number
        repo = pull_request.base.repo
        merge_method = context.config().merge_method.value

        self._logger.debug(
            "Attempting to merge",
            pull_request=number,
            sha=pull_request.head.sha,
            merge_method=merge_method,
        )

        try:
            # pinned to the evaluated head, GitHub refuses if the branch moved
            result = self._api.merge_pull_request(
                repo.owner,
                repo.name,
                number,
                pull_request.head.sha,
                merge_method,
            )
        except SourceError as error:
            if error.status == METHOD_NOT_ALLOWED:
                self._logger.debug(
                    "Merge not allowed",
                    pull_request=number,
                    error=error.message,
                )
            else:
                self._logger.error(
                    "Merge failed",
                    pull_request=number,
                    status=error.status,
                    error=error.message,
                )
            return False

        if not result.merged:
            self._logger.warning(
                "Merge not performed",
                pull_request=number,
                detail=result.message,
            )
            return False

        return True
