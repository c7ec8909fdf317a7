from tests.fakes.config_source import FakeConfigSource
from tests.fakes.github import (
    FakeApp,
    FakeBranch,
    FakeCheckSuite,
    FakeCombinedStatus,
    FakeCommit,
    FakeCommitStatus,
    FakeContentFile,
    FakeGitHubClient,
    FakeMergeStatus,
    FakeOrganization,
    FakePull,
    FakePullRef,
    FakeRepository,
    FakeReview,
    FakeTeam,
    FakeUser,
    github_error,
)
from tests.fakes.github_api import FakeGitHubApi
from tests.fakes.logger import FakeLogger
from tests.fakes.scripted_api import ExpectedCall, ScriptedGitHubApi

__all__ = [
    "ExpectedCall",
    "FakeApp",
    "FakeBranch",
    "FakeCheckSuite",
    "FakeCombinedStatus",
    "FakeCommit",
    "FakeCommitStatus",
    "FakeConfigSource",
    "FakeContentFile",
    "FakeGitHubApi",
    "FakeGitHubClient",
    "FakeLogger",
    "FakeMergeStatus",
    "FakeOrganization",
    "FakePull",
    "FakePullRef",
    "FakeRepository",
    "FakeReview",
    "FakeTeam",
    "FakeUser",
    "ScriptedGitHubApi",
    "github_error",
]
