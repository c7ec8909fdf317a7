from typing import Optional

from automerge.core.ports.config_source import ConfigSource
from automerge.core.schema.config import AppConfig


class EvaluationContext:
    """Per-event view of one repository.

    The repository configuration is read at most once per context and then
    reused, so every component of one evaluation sees the same config.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        config_source: ConfigSource,
        delivery_id: Optional[str] = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.delivery_id = delivery_id
        self._config_source = config_source
        self._config: Optional[AppConfig] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def config(self) -> AppConfig:
        if self._config is None:
            self._config = self._config_source.load(self.owner, self.repo)
        return self._config
