from typing import Any

from automerge.core.ports.logger import Logger


class FakeLogger(Logger):
    def __init__(
        self,
        records: list[tuple[str, str, dict[str, Any]]] | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = (
            records if records is not None else []
        )
        self._context = dict(context or {})

    def debug(self, message: str, **kwargs: object) -> None:
        self._record("debug", message, kwargs)

    def info(self, message: str, **kwargs: object) -> None:
        self._record("info", message, kwargs)

    def warning(self, message: str, **kwargs: object) -> None:
        self._record("warning", message, kwargs)

    def error(self, message: str, **kwargs: object) -> None:
        self._record("error", message, kwargs)

    def exception(self, message: str, **kwargs: object) -> None:
        self._record("exception", message, kwargs)

    def bind(self, **context: object) -> "FakeLogger":
        return FakeLogger(self.records, {**self._context, **context})

    def messages(self, level: str) -> list[str]:
        return [message for record_level, message, _ in self.records if record_level == level]

    def _record(self, level: str, message: str, kwargs: dict[str, Any]) -> None:
        self.records.append((level, message, {**self._context, **kwargs}))
