from automerge.core.policy.context import EvaluationContext
from automerge.core.policy.executor import MergeExecutor
from automerge.core.policy.gate import MergeEligibilityGate
from automerge.core.policy.orchestrator import PolicyOrchestrator
from automerge.core.policy.protection import BranchProtectionProbe
from automerge.core.policy.reviews import ReviewAggregator, effective_reviews
from automerge.core.policy.status import StatusAggregator

__all__ = [
    "EvaluationContext",
    "ReviewAggregator",
    "StatusAggregator",
    "BranchProtectionProbe",
    "MergeEligibilityGate",
    "MergeExecutor",
    "PolicyOrchestrator",
    "effective_reviews",
]
