from automerge.core.exceptions.errors import (
    AutomergeError,
    ConfigError,
    MergeCheckError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourcePermissionError,
    SourceRateLimitError,
)

__all__ = [
    "AutomergeError",
    "ConfigError",
    "MergeCheckError",
    "SourceError",
    "SourceAuthenticationError",
    "SourcePermissionError",
    "SourceRateLimitError",
    "SourceNotFoundError",
]
