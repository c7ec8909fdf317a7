from typing import Protocol, runtime_checkable

from automerge.core.schema.config import AppConfig


@runtime_checkable
class ConfigSource(Protocol):
    def load(self, owner: str, repo: str) -> AppConfig:
        ...
