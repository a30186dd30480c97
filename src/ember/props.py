"""Mapping of element attributes onto host attributes and listeners."""

from typing import Any

from ember.helpers import MISSING
from ember.host.base import HostAdapter

EVENT_PREFIX = "on"
RESERVED_PROPS = frozenset({"children", "key"})
ATTRIBUTE_ALIASES = {"className": "class", "htmlFor": "for"}


def is_event_prop(name: str) -> bool:
	"""``onClick`` and ``on_click`` are event handlers, ``one`` is not."""
	if not name.startswith(EVENT_PREFIX) or len(name) <= len(EVENT_PREFIX):
		return False
	first = name[len(EVENT_PREFIX)]
	return first.isupper() or first == "_"


def event_name(name: str) -> str:
	return name[len(EVENT_PREFIX) :].lstrip("_").lower()


def attribute_name(name: str) -> str:
	return ATTRIBUTE_ALIASES.get(name, name)


def is_absent(value: Any) -> bool:
	return value is None or value is False or value is MISSING


def set_prop(
	host: HostAdapter, node: Any, name: str, value: Any, old: Any = MISSING
) -> None:
	"""Apply ``value`` for ``name`` on a host node previously holding ``old``."""
	if name in RESERVED_PROPS:
		return
	if is_event_prop(name):
		event = event_name(name)
		if not is_absent(value) and not callable(value):
			raise TypeError(
				f"Event handler '{name}' must be callable, got {type(value).__name__}"
			)
		if old is value:
			return
		if callable(old):
			host.remove_listener(node, event, old)
		if not is_absent(value):
			host.add_listener(node, event, value)
		return
	if is_absent(value):
		host.remove_attribute(node, attribute_name(name))
	else:
		host.set_attribute(node, attribute_name(name), value)


def remove_prop(host: HostAdapter, node: Any, name: str, old: Any) -> None:
	set_prop(host, node, name, None, old)


__all__ = [
	"ATTRIBUTE_ALIASES",
	"EVENT_PREFIX",
	"attribute_name",
	"event_name",
	"is_event_prop",
	"remove_prop",
	"set_prop",
]
