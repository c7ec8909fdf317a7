from typing import Any, Callable, Dict, Mapping, Optional

from automerge.core.events.payloads import pull_request_from_payload
from automerge.core.policy.context import EvaluationContext
from automerge.core.policy.orchestrator import PolicyOrchestrator
from automerge.core.ports.config_source import ConfigSource
from automerge.core.ports.github_api import GitHubApi
from automerge.core.ports.logger import Logger

PULL_REQUEST_ACTIONS = frozenset(
    {"opened", "reopened", "synchronize", "ready_for_review"}
)

Payload = Mapping[str, Any]


class EventRouter:
    """Turn webhook deliveries into merge checks.

    ``handle`` returns ``None`` when the event did not lead to an
    evaluation, otherwise whether the pull request got merged.
    """

    def __init__(
        self,
        logger: Logger,
        api: GitHubApi,
        orchestrator: PolicyOrchestrator,
        config_source: ConfigSource,
    ) -> None:
        self._logger = logger
        self._api = api
        self._orchestrator = orchestrator
        self._config_source = config_source
        self._handlers: Dict[
            str, Callable[[EvaluationContext, Payload, Logger], Optional[bool]]
        ] = {
            "pull_request": self._handle_pull_request,
            "pull_request_review": self._handle_pull_request_review,
            "check_suite": self._handle_check_suite,
            "status": self._handle_status,
        }

    def handle(
        self,
        event_name: str,
        payload: Payload,
        delivery_id: Optional[str] = None,
    ) -> Optional[bool]:
        action = payload.get("action")
        qualified_name = f"{event_name}.{action}" if action else event_name
        logger = self._logger.bind(event=qualified_name, delivery_id=delivery_id)
        logger.debug("Processing event")

        handler = self._handlers.get(event_name)
        if handler is None or "repository" not in payload:
            logger.debug("Ignoring event")
            return None

        repository = payload["repository"]
        context = EvaluationContext(
            owner=repository["owner"]["login"],
            repo=repository["name"],
            config_source=self._config_source,
            delivery_id=delivery_id,
        )
        return handler(context, payload, logger)

    def _handle_pull_request(
        self,
        context: EvaluationContext,
        payload: Payload,
        logger: Logger,
    ) -> Optional[bool]:
        if payload.get("action") not in PULL_REQUEST_ACTIONS:
            logger.debug("Ignoring pull request action")
            return None

        pull_request = pull_request_from_payload(payload["pull_request"])
        return self._orchestrator.check_merge(context, pull_request)

    def _handle_pull_request_review(
        self,
        context: EvaluationContext,
        payload: Payload,
        logger: Logger,
    ) -> Optional[bool]:
        if payload.get("action") != "submitted":
            logger.debug("Ignoring review action")
            return None

        state = payload["review"]["state"]
        if state.lower() != "approved":
            logger.info("Skipping review", state=state)
            return None

        # the review payload lacks mergeability details
        return self._check_by_number(context, payload["pull_request"]["number"])

    def _handle_check_suite(
        self,
        context: EvaluationContext,
        payload: Payload,
        logger: Logger,
    ) -> Optional[bool]:
        if payload.get("action") != "completed":
            logger.debug("Ignoring check suite action")
            return None

        check_suite = payload["check_suite"]
        conclusion = check_suite.get("conclusion")
        if conclusion != "success":
            logger.info("Skipping check suite", conclusion=conclusion)
            return None

        pull_requests = check_suite.get("pull_requests") or []
        if not pull_requests:
            logger.debug("Check suite references no pull request")
            return None

        return self._check_by_number(context, pull_requests[0]["number"])

    def _handle_status(
        self,
        context: EvaluationContext,
        payload: Payload,
        logger: Logger,
    ) -> Optional[bool]:
        state = payload.get("state")
        if state != "success":
            logger.info("Skipping status", state=state)
            return None

        sha = payload["sha"]
        branch = next(
            (
                branch
                for branch in payload.get("branches") or []
                if branch["commit"]["sha"] == sha
            ),
            None,
        )
        if branch is None:
            logger.info("Skipping status, no branch matches ref", sha=sha)
            return None

        head = f"{context.owner}:{branch['name']}"
        pull_requests = self._api.list_pull_requests(context.owner, context.repo, head)
        logger.debug("Found pull requests", head=head, count=len(pull_requests))
        if not pull_requests:
            logger.info("Skipping status, no pull request matches ref", head=head)
            return None

        return self._check_by_number(context, pull_requests[0].number)

    def _check_by_number(self, context: EvaluationContext, number: int) -> bool:
        pull_request = self._api.get_pull_request(context.owner, context.repo, number)
        return self._orchestrator.check_merge(context, pull_request)
