from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Structured logger; keyword arguments become record context.

    Policy code passes ``repository`` and ``pull_request`` so records can be
    traced to one pull request; the router binds ``event`` and
    ``delivery_id`` for the whole delivery. A context key must not be named
    ``message``.
    """

    def debug(self, message: str, **kwargs: object) -> None:
        ...

    def info(self, message: str, **kwargs: object) -> None:
        ...

    def warning(self, message: str, **kwargs: object) -> None:
        ...

    def error(self, message: str, **kwargs: object) -> None:
        ...

    def exception(self, message: str, **kwargs: object) -> None:
        ...

    def bind(self, **context: object) -> "Logger":
        ...
