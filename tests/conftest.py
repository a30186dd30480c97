import pytest
from ember.env import (
	ENV_EMBER_LOG_LEVEL,
	ENV_EMBER_SKIP_EQUAL_UPDATES,
	ENV_EMBER_STRICT_HOOKS,
)
from ember.host.memory import MemoryElement

from .test_utils import RecordingHost


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	for name in (ENV_EMBER_STRICT_HOOKS, ENV_EMBER_SKIP_EQUAL_UPDATES, ENV_EMBER_LOG_LEVEL):
		monkeypatch.delenv(name, raising=False)


@pytest.fixture
def container() -> MemoryElement:
	return MemoryElement("root")


@pytest.fixture
def host() -> RecordingHost:
	return RecordingHost()
