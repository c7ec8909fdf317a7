from automerge.core.events.payloads import (
    pull_request_from_payload,
    repository_from_payload,
)
from automerge.core.events.router import EventRouter

__all__ = [
    "EventRouter",
    "pull_request_from_payload",
    "repository_from_payload",
]
