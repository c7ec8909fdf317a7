from typing import Any, Mapping, Optional

from automerge.core.schema.pr import (
    PullRequest,
    PullRequestBase,
    PullRequestHead,
    RepositoryRef,
    TeamRef,
)


def repository_from_payload(data: Mapping[str, Any]) -> RepositoryRef:
    owner = data.get("owner") or {}
    login = owner.get("login", "")
    return RepositoryRef(
        id=data.get("id", 0),
        owner=login,
        name=data["name"],
        full_name=data.get("full_name") or f"{login}/{data['name']}",
        owner_type=owner.get("type", ""),
    )


def pull_request_from_payload(data: Mapping[str, Any]) -> PullRequest:
    """Build a pull request from webhook or REST JSON; both share one shape."""
    head = data["head"]
    base = data["base"]
    head_repo: Optional[RepositoryRef] = None
    if head.get("repo"):
        head_repo = repository_from_payload(head["repo"])

    user = data.get("user") or {}
    return PullRequest(
        number=data["number"],
        author=user.get("login", ""),
        draft=bool(data.get("draft", False)),
        merged=bool(data.get("merged", False)),
        mergeable=data.get("mergeable"),
        rebaseable=data.get("rebaseable"),
        head=PullRequestHead(
            sha=head["sha"],
            ref=head.get("ref", ""),
            repo=head_repo,
        ),
        base=PullRequestBase(
            ref=base["ref"],
            repo=repository_from_payload(base["repo"]),
        ),
        requested_reviewers=tuple(
            reviewer["login"] for reviewer in data.get("requested_reviewers") or ()
        ),
        requested_teams=tuple(
            TeamRef(name=team.get("name", team["slug"]), slug=team["slug"])
            for team in data.get("requested_teams") or ()
        ),
    )
