from automerge.core.schema.config import AppConfig, MergeMethod
from automerge.core.schema.decision import MergeDecision
from automerge.core.schema.pr import (
    PullRequest,
    PullRequestBase,
    PullRequestHead,
    RepositoryRef,
    Review,
    TeamRef,
)
from automerge.core.schema.status import (
    BranchProtection,
    CheckSuite,
    CombinedStatus,
    CommitStatus,
    MergeResult,
    ProtectionState,
)

__all__ = [
    "AppConfig",
    "MergeMethod",
    "MergeDecision",
    "RepositoryRef",
    "TeamRef",
    "PullRequestHead",
    "PullRequestBase",
    "PullRequest",
    "Review",
    "CommitStatus",
    "CombinedStatus",
    "CheckSuite",
    "ProtectionState",
    "BranchProtection",
    "MergeResult",
]
