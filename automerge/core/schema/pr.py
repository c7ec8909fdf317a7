from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

ORGANIZATION = "Organization"


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    id: int
    owner: str
    name: str
    full_name: str
    owner_type: str

    @property
    def is_organization(self) -> bool:
        return self.owner_type == ORGANIZATION


@dataclass(frozen=True, slots=True)
class TeamRef:
    name: str
    slug: str


@dataclass(frozen=True, slots=True)
class PullRequestHead:
    sha: str
    ref: str
    repo: Optional[RepositoryRef]


@dataclass(frozen=True, slots=True)
class PullRequestBase:
    ref: str
    repo: RepositoryRef


@dataclass(frozen=True, slots=True)
class PullRequest:
    number: int
    author: str
    draft: bool
    merged: bool
    mergeable: Optional[bool]
    rebaseable: Optional[bool]
    head: PullRequestHead
    base: PullRequestBase
    requested_reviewers: Tuple[str, ...] = ()
    requested_teams: Tuple[TeamRef, ...] = ()

    @property
    def is_cross_origin(self) -> bool:
        # a deleted fork leaves no head repository behind
        if self.head.repo is None:
            return True
        return self.head.repo.full_name != self.base.repo.full_name


@dataclass(frozen=True, slots=True)
class Review:
    id: int
    user: str
    state: str
    submitted_at: Optional[datetime] = None
