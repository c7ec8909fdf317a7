from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class CommitStatus:
    context: str
    state: str


@dataclass(frozen=True, slots=True)
class CombinedStatus:
    state: str
    statuses: Tuple[CommitStatus, ...]


@dataclass(frozen=True, slots=True)
class CheckSuite:
    id: int
    status: str
    conclusion: Optional[str]
    app_slug: Optional[str] = None
    pull_request_numbers: Tuple[int, ...] = ()


class ProtectionState(Enum):
    PROTECTED = "protected"
    UNPROTECTED = "unprotected"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class BranchProtection:
    state: ProtectionState
    cause: Optional[Exception] = None

    @classmethod
    def protected(cls) -> "BranchProtection":
        return cls(ProtectionState.PROTECTED)

    @classmethod
    def unprotected(cls) -> "BranchProtection":
        return cls(ProtectionState.UNPROTECTED)

    @classmethod
    def unknown(cls, cause: Exception) -> "BranchProtection":
        return cls(ProtectionState.UNKNOWN, cause)


@dataclass(frozen=True, slots=True)
class MergeResult:
    merged: bool
    sha: Optional[str]
    message: str
