from datetime import datetime
from typing import Optional


class AutomergeError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(AutomergeError):
    def __init__(self, message: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(message)


class MergeCheckError(AutomergeError):
    pass


class SourceError(AutomergeError):
    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)


class SourceAuthenticationError(SourceError):
    pass


class SourcePermissionError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(
        self,
        message: str,
        retry_after: datetime,
        status: Optional[int] = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, status)


class SourceNotFoundError(SourceError):
    def __init__(
        self,
        message: str,
        resource: str,
        status: Optional[int] = 404,
    ) -> None:
        self.resource = resource
        super().__init__(message, status)
