from datetime import datetime, timedelta, timezone

from github import GithubException

from automerge.core.exceptions import (
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourcePermissionError,
    SourceRateLimitError,
)


def translate_exception(
    message: str,
    error: GithubException,
    resource: str | None = None,
) -> SourceError:
    """Map a PyGithub error onto the source error hierarchy."""
    status = getattr(error, "status", None)
    headers = {
        key.lower(): value
        for key, value in (getattr(error, "headers", None) or {}).items()
    }
    detail = _error_message(error)
    if detail:
        message = f"{message}: {detail}"

    if status == 401:
        return SourceAuthenticationError(message, status)
    if status == 404:
        return SourceNotFoundError(message, resource or "resource", status)
    if status in (403, 429):
        retry_after = _retry_after_from_headers(headers)
        if retry_after:
            return SourceRateLimitError(message, retry_after, status)
        if status == 403:
            return SourcePermissionError(message, status)
    return SourceError(message, status)


def _error_message(error: GithubException) -> str | None:
    data = getattr(error, "data", None)
    if isinstance(data, dict):
        return data.get("message")
    return None


def _retry_after_from_headers(headers) -> datetime | None:  # noqa: ANN001
    retry_after = headers.get("retry-after")
    if retry_after is not None:
        try:
            return datetime.now(timezone.utc) + timedelta(seconds=float(retry_after))
        except (TypeError, ValueError):
            return None

    if headers.get("x-ratelimit-remaining") != "0":
        return None
    reset = headers.get("x-ratelimit-reset")
    if reset is None:
        return None
    try:
        return datetime.fromtimestamp(float(reset), tz=timezone.utc)
    except (TypeError, ValueError):
        return None
