import json
import sys
from typing import Optional

from automerge.config import Settings, load_settings
from automerge.core.events import EventRouter
from automerge.core.exceptions import AutomergeError
from automerge.core.policy import (
    BranchProtectionProbe,
    MergeEligibilityGate,
    MergeExecutor,
    PolicyOrchestrator,
    ReviewAggregator,
    StatusAggregator,
)
from automerge.core.ports import ConfigSource, GitHubApi, Logger
from automerge.infra import (
    ConsoleLogger,
    GitHubClient,
    GitHubConfigSource,
    GitHubRestApi,
    LogfireLogger,
    configure_logfire,
)


def main() -> None:
    settings = load_settings()
    logger = _build_logger(settings)

    if not settings.github.token:
        raise ValueError('GITHUB_TOKEN is not set')
    if not settings.event.name or not settings.event.payload_path:
        raise ValueError('GITHUB_EVENT_NAME and GITHUB_EVENT_PATH must be set')

    with open(settings.event.payload_path, encoding='utf-8') as handle:
        payload = json.load(handle)

    with GitHubClient(settings.github.token, settings.github.api_url) as client:
        router = build_router(
            settings,
            logger,
            GitHubRestApi(client),
            GitHubConfigSource(client, settings.policy.config_path),
        )
        exit_code = handle_event(
            logger,
            router,
            settings.event.name,
            payload,
            settings.event.delivery_id,
        )
    sys.exit(exit_code)


def build_router(
    settings: Settings,
    logger: Logger,
    api: GitHubApi,
    config_source: ConfigSource,
) -> EventRouter:
    gate = MergeEligibilityGate(
        logger=logger,
        api=api,
        protection_probe=BranchProtectionProbe(logger, api),
        status_aggregator=StatusAggregator(logger, api),
        review_aggregator=ReviewAggregator(
            logger,
            api,
            max_workers=settings.policy.team_fetch_workers,
        ),
    )
    orchestrator = PolicyOrchestrator(logger, gate, MergeExecutor(logger, api))
    return EventRouter(logger, api, orchestrator, config_source)


def handle_event(
    logger: Logger,
    router: EventRouter,
    event_name: str,
    payload: dict,
    delivery_id: Optional[str] = None,
) -> int:
    try:
        merged = router.handle(event_name, payload, delivery_id)
    except AutomergeError as error:
        logger.exception(
            'Event handling failed',
            event=event_name,
            delivery_id=delivery_id,
            error=str(error),
        )
        return 1
    logger.info('Event handled', event=event_name, merged=merged)
    return 0


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ValueError(
                'Logfire backend selected but AUTOMERGE_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ValueError(f'Unknown logging backend {settings.logging.backend}')


if __name__ == '__main__':
    main()
