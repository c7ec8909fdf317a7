from typing import Optional

from automerge.core.ports.github_api import GitHubApi
from automerge.core.ports.logger import Logger
from automerge.core.schema.pr import RepositoryRef
from automerge.core.schema.status import ProtectionState


class BranchProtectionProbe:
    def __init__(self, logger: Logger, api: GitHubApi) -> None:
        self._logger = logger
        self._api = api

    def is_branch_protected(
        self,
        repository: RepositoryRef,
        branch: str,
    ) -> Optional[bool]:
        """Return ``None`` when protection could not be determined."""
        protection = self._api.get_branch_protection(
            repository.owner,
            repository.name,
            branch,
        )
        if protection.state is ProtectionState.PROTECTED:
            return True
        if protection.state is ProtectionState.UNPROTECTED:
            return False

        self._logger.error(
            "Failed to fetch branch protection status",
            repository=repository.full_name,
            branch=branch,
            error=str(protection.cause),
        )
        return None
