import pytest

from tests.fakes import FakeConfigSource, FakeGitHubApi, FakeLogger
from tests.settings import get_test_settings


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def config_source():
    return FakeConfigSource()


@pytest.fixture
def api():
    return FakeGitHubApi()


@pytest.fixture
def test_settings():
    return get_test_settings()
