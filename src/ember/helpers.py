import inspect
import math
from collections.abc import Callable, Sequence
from typing import Any

MISSING: Any = object()


def values_equal(a: Any, b: Any) -> bool:
	"""Compare two values the way hook dependencies and attributes are compared.

	Identical objects are equal. Objects of different types never are, so
	``0``, ``False`` and ``""`` stay distinct. ``NaN`` is equal to itself.
	"""
	if a is b:
		return True
	if type(a) is not type(b):
		return False
	if isinstance(a, float) and math.isnan(a) and math.isnan(b):
		return True
	return bool(a == b)


def deps_changed(previous: Sequence[Any] | None, current: Sequence[Any] | None) -> bool:
	if previous is None or current is None:
		return True
	if len(previous) != len(current):
		return True
	return not all(values_equal(a, b) for a, b in zip(previous, current, strict=True))


def call_flexible(fn: Callable[..., Any], *args: Any) -> Any:
	"""Call ``fn`` with as many of ``args`` as its signature accepts."""
	try:
		sig = inspect.signature(fn)
	except (TypeError, ValueError):
		return fn(*args)
	params = list(sig.parameters.values())
	if any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params):
		return fn(*args)
	positional = [
		p
		for p in params
		if p.kind
		in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
	]
	return fn(*args[: len(positional)])


__all__ = ["MISSING", "call_flexible", "deps_changed", "values_equal"]
