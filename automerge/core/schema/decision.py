from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MergeDecision:
    eligible: bool
    reason: str

    @classmethod
    def accept(cls, reason: str) -> "MergeDecision":
        return cls(True, reason)

    @classmethod
    def reject(cls, reason: str) -> "MergeDecision":
        return cls(False, reason)
