import logging
from typing import Any, Dict, Union

from automerge.core.ports.logger import Logger
from automerge.infra.logging.bound import BoundLogger


def _pull_request_ref(context: Dict[str, Any]) -> str:
    repository = context.get('repository')
    number = context.get('pull_request')
    if number is None:
        return repository or ''
    return f'{repository or ""}#{number}'


class _PullRequestFormatter(logging.Formatter):
    """Renders ``acme/widgets#42`` up front and the rest as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = dict(getattr(record, 'context', None) or {})
        ref = _pull_request_ref(context)
        if ref:
            base = f'{base} [{ref}]'
        context.pop('repository', None)
        context.pop('pull_request', None)

        pairs = ' '.join(
            f'{key}={value!r}'
            for key, value in context.items()
            if value is not None
        )
        if pairs:
            return f'{base} | {pairs}'
        return base


class ConsoleLogger(Logger):
    def __init__(self, name: str, level: Union[int, str] = logging.INFO) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.upper() if isinstance(level, str) else level)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                _PullRequestFormatter('%(asctime)s %(levelname)s %(name)s: %(message)s')
            )
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs, exc_info=True)

    def bind(self, **context: Any) -> Logger:
        return BoundLogger(self, context)

    def _log(
        self,
        level: int,
        message: str,
        context: Dict[str, Any],
        exc_info: bool = False,
    ) -> None:
        self._logger.log(level, message, exc_info=exc_info, extra={'context': context})
