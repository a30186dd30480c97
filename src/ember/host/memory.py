"""An in-memory host tree.

`MemoryHost` implements `HostAdapter` over plain Python objects that mimic a
small subset of the DOM: ordered attributes, event listeners, children and
HTML serialisation. It is the default host for `ember.render` and is what the
tests, the examples and the CLI render into.
"""

from __future__ import annotations

from collections.abc import Callable
from html import escape
from typing import Any, override

from ember.helpers import call_flexible
from ember.host.base import HostAdapter

VOID_TAGS = frozenset(
	{
		"area",
		"base",
		"br",
		"col",
		"embed",
		"hr",
		"img",
		"input",
		"link",
		"meta",
		"source",
		"track",
		"wbr",
	}
)


class Event:
	type: str
	target: MemoryElement
	current_target: MemoryElement | None
	detail: Any
	propagation_stopped: bool

	def __init__(self, type: str, target: MemoryElement, detail: Any = None) -> None:
		self.type = type
		self.target = target
		self.current_target = None
		self.detail = detail
		self.propagation_stopped = False

	def stop_propagation(self) -> None:
		self.propagation_stopped = True

	@override
	def __repr__(self) -> str:
		return f"Event({self.type!r}, target=<{self.target.tag}>)"


class MemoryText:
	data: str
	parent: MemoryElement | None

	def __init__(self, data: str) -> None:
		self.data = data
		self.parent = None

	@property
	def text_content(self) -> str:
		return self.data

	@property
	def outer_html(self) -> str:
		return escape(self.data, quote=False)

	@override
	def __repr__(self) -> str:
		return f"MemoryText({self.data!r})"


class MemoryElement:
	tag: str
	attributes: dict[str, Any]
	listeners: dict[str, list[Callable[..., Any]]]
	children: list[MemoryElement | MemoryText]
	parent: MemoryElement | None

	def __init__(self, tag: str) -> None:
		self.tag = tag
		self.attributes = {}
		self.listeners = {}
		self.children = []
		self.parent = None

	# ------------------------------------------------------------------
	# Tree helpers
	# ------------------------------------------------------------------

	def index_of(self, node: MemoryElement | MemoryText) -> int:
		for idx, child in enumerate(self.children):
			if child is node:
				return idx
		raise ValueError(f"{node!r} is not a child of <{self.tag}>")

	def query_selector(self, tag: str) -> MemoryElement | None:
		for child in self.children:
			if isinstance(child, MemoryElement):
				if child.tag == tag:
					return child
				found = child.query_selector(tag)
				if found is not None:
					return found
		return None

	def query_selector_all(self, tag: str) -> list[MemoryElement]:
		found: list[MemoryElement] = []
		for child in self.children:
			if isinstance(child, MemoryElement):
				if child.tag == tag:
					found.append(child)
				found.extend(child.query_selector_all(tag))
		return found

	# ------------------------------------------------------------------
	# Events
	# ------------------------------------------------------------------

	def dispatch(self, event_type: str, detail: Any = None) -> Event:
		"""Fire ``event_type`` on this element and bubble it up to the root."""
		event = Event(event_type, self, detail)
		node: MemoryElement | None = self
		while node is not None and not event.propagation_stopped:
			event.current_target = node
			# Copy: a handler may re-render and swap the listeners of this node.
			for handler in list(node.listeners.get(event_type, ())):
				call_flexible(handler, event)
			node = node.parent
		return event

	def click(self) -> Event:
		return self.dispatch("click")

	# ------------------------------------------------------------------
	# Serialisation
	# ------------------------------------------------------------------

	@property
	def text_content(self) -> str:
		return "".join(child.text_content for child in self.children)

	@property
	def inner_html(self) -> str:
		return "".join(child.outer_html for child in self.children)

	@property
	def outer_html(self) -> str:
		attrs = "".join(_render_attribute(k, v) for k, v in self.attributes.items())
		if self.tag in VOID_TAGS:
			return f"<{self.tag}{attrs}>"
		return f"<{self.tag}{attrs}>{self.inner_html}</{self.tag}>"

	@override
	def __repr__(self) -> str:
		return f"MemoryElement({self.outer_html!r})"


def _render_attribute(name: str, value: Any) -> str:
	if value is True:
		return f" {name}"
	return f' {name}="{escape(str(value), quote=True)}"'


class MemoryHost(HostAdapter):
	@override
	def create_element(self, tag: str) -> MemoryElement:
		return MemoryElement(tag)

	@override
	def create_text(self, text: str) -> MemoryText:
		return MemoryText(text)

	@override
	def insert(
		self,
		container: MemoryElement,
		node: MemoryElement | MemoryText,
		index: int | None = None,
	) -> None:
		if node.parent is not None:
			self.remove(node)
		if index is None or index >= len(container.children):
			container.children.append(node)
		else:
			container.children.insert(index, node)
		node.parent = container

	@override
	def remove(self, node: MemoryElement | MemoryText) -> None:
		parent = node.parent
		if parent is None:
			return
		del parent.children[parent.index_of(node)]
		node.parent = None

	@override
	def remove_child_at(self, container: MemoryElement, index: int) -> None:
		node = container.children.pop(index)
		node.parent = None

	@override
	def child_at(
		self, container: MemoryElement, index: int
	) -> MemoryElement | MemoryText | None:
		if 0 <= index < len(container.children):
			return container.children[index]
		return None

	@override
	def child_count(self, container: MemoryElement) -> int:
		return len(container.children)

	@override
	def set_text(self, node: MemoryText, text: str) -> None:
		node.data = text

	@override
	def set_attribute(self, node: MemoryElement, name: str, value: Any) -> None:
		node.attributes[name] = value

	@override
	def remove_attribute(self, node: MemoryElement, name: str) -> None:
		node.attributes.pop(name, None)

	@override
	def add_listener(
		self, node: MemoryElement, event: str, handler: Callable[..., Any]
	) -> None:
		node.listeners.setdefault(event, []).append(handler)

	@override
	def remove_listener(
		self, node: MemoryElement, event: str, handler: Callable[..., Any]
	) -> None:
		handlers = node.listeners.get(event)
		if not handlers:
			return
		for idx, existing in enumerate(handlers):
			if existing == handler:
				del handlers[idx]
				break
		if not handlers:
			del node.listeners[event]


__all__ = ["Event", "MemoryElement", "MemoryHost", "MemoryText", "VOID_TAGS"]
