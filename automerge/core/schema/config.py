from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from automerge.core.exceptions import ConfigError

DEFAULT_MIN_APPROVALS = 1


class MergeMethod(Enum):
    REBASE = "rebase"
    MERGE = "merge"


@dataclass(frozen=True, slots=True)
class AppConfig:
    min_approvals: int = DEFAULT_MIN_APPROVALS
    review_teams: Tuple[str, ...] = ()
    merge_method: MergeMethod = MergeMethod.REBASE
    collaborators_only: bool = False

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "AppConfig":
        """Validate a raw ``merge-me.yml`` document.

        Missing keys take their defaults, unknown keys are ignored. Any
        malformed value raises :class:`ConfigError` naming the key.
        """
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ConfigError(
                f"Expected a mapping at the top level, got {type(raw).__name__}"
            )
        return cls(
            min_approvals=_parse_min_approvals(raw.get("minApprovals")),
            review_teams=_parse_review_teams(raw.get("reviewTeams")),
            merge_method=_parse_merge_method(raw.get("mergeMethod")),
            collaborators_only=_parse_bool(
                "collaboratorsOnly", raw.get("collaboratorsOnly"), False
            ),
        )


def _parse_min_approvals(value: Any) -> int:
    if value is None:
        return DEFAULT_MIN_APPROVALS
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(
            f"minApprovals must be a non-negative integer, got {value!r}",
            key="minApprovals",
        )
    if value < 0:
        raise ConfigError(
            f"minApprovals must be a non-negative integer, got {value}",
            key="minApprovals",
        )
    return value


def _parse_review_teams(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigError(
            f"reviewTeams must be a list of team names, got {value!r}",
            key="reviewTeams",
        )
    teams = []
    for team in value:
        if not isinstance(team, str) or not team.strip():
            raise ConfigError(
                f"reviewTeams entries must be non-empty strings, got {team!r}",
                key="reviewTeams",
            )
        teams.append(team.strip())
    return tuple(teams)


def _parse_merge_method(value: Any) -> MergeMethod:
    if value is None:
        return MergeMethod.REBASE
    try:
        return MergeMethod(value)
    except ValueError as error:
        allowed = ", ".join(method.value for method in MergeMethod)
        raise ConfigError(
            f"mergeMethod must be one of {allowed}, got {value!r}",
            key="mergeMethod",
        ) from error


def _parse_bool(key: str, value: Any, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}", key=key)
    return value
