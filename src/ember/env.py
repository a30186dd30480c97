"""Environment-backed configuration for Ember.

Every setting lives in ``os.environ`` so child processes and test
``monkeypatch.setenv`` calls see the same values as the running engine.
"""

import os

ENV_EMBER_STRICT_HOOKS = "EMBER_STRICT_HOOKS"
ENV_EMBER_SKIP_EQUAL_UPDATES = "EMBER_SKIP_EQUAL_UPDATES"
ENV_EMBER_LOG_LEVEL = "EMBER_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}


def _read_flag(name: str) -> bool:
	value = os.environ.get(name)
	if value is None:
		return False
	return value.strip().lower() in _TRUTHY


def _write_flag(name: str, value: bool) -> None:
	if value:
		os.environ[name] = "1"
	else:
		os.environ.pop(name, None)


class EmberEnv:
	@property
	def strict_hooks(self) -> bool:
		return _read_flag(ENV_EMBER_STRICT_HOOKS)

	@strict_hooks.setter
	def strict_hooks(self, value: bool) -> None:
		_write_flag(ENV_EMBER_STRICT_HOOKS, value)

	@property
	def skip_equal_updates(self) -> bool:
		return _read_flag(ENV_EMBER_SKIP_EQUAL_UPDATES)

	@skip_equal_updates.setter
	def skip_equal_updates(self, value: bool) -> None:
		_write_flag(ENV_EMBER_SKIP_EQUAL_UPDATES, value)

	@property
	def log_level(self) -> str:
		return os.environ.get(ENV_EMBER_LOG_LEVEL, "WARNING").upper()

	@log_level.setter
	def log_level(self, value: str) -> None:
		os.environ[ENV_EMBER_LOG_LEVEL] = value.upper()


env = EmberEnv()


__all__ = [
	"ENV_EMBER_LOG_LEVEL",
	"ENV_EMBER_SKIP_EQUAL_UPDATES",
	"ENV_EMBER_STRICT_HOOKS",
	"EmberEnv",
	"env",
]
