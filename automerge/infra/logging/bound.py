from typing import Any, Dict

from automerge.core.ports.logger import Logger


class BoundLogger(Logger):
    """Adds a fixed set of context fields to every record of ``logger``."""

    def __init__(self, logger: Logger, context: Dict[str, Any]) -> None:
        self._logger = logger
        self._context = dict(context)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **self._merge(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **self._merge(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, **self._merge(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, **self._merge(kwargs))

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, **self._merge(kwargs))

    def bind(self, **context: Any) -> Logger:
        return BoundLogger(self._logger, self._merge(context))

    def _merge(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        return {**self._context, **kwargs}
