"""Element descriptions and the builder that produces them.

An `Element` describes either an intrinsic host tag (``"div"``) or an
invocation of a function component. Elements are never mutated after
construction, except for the back-references the renderer assigns:
``host`` (the host node produced on mount), ``fiber`` (the persistent
instance of a component element) and ``parent`` (the element whose children
or output this element was last rendered as).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
	from ember.fiber import Fiber

ComponentFn: TypeAlias = Callable[..., Any]
Kind: TypeAlias = str | ComponentFn
Child: TypeAlias = "Element | str"
RenderedOutput: TypeAlias = "Element | str | None"


@dataclass(slots=True)
class Element:
	kind: Kind
	attributes: dict[str, Any] | None = None
	children: tuple[Child, ...] = ()
	key: Any = None
	# Renderer state (mutable, set during render)
	host: Any = field(default=None, compare=False, repr=False)
	fiber: Fiber | None = field(default=None, compare=False, repr=False)
	parent: Element | None = field(default=None, compare=False, repr=False)

	@property
	def is_component(self) -> bool:
		return not isinstance(self.kind, str)

	@property
	def name(self) -> str:
		if isinstance(self.kind, str):
			return self.kind
		return getattr(self.kind, "__name__", "Component")


def create_element(
	kind: Kind, attributes: Mapping[str, Any] | None = None, /, *children: Any
) -> Element:
	"""Build an `Element` from a kind, raw attributes and nested children.

	Children may be nested in lists, tuples or generators to any depth; they
	are flattened to one level. ``None`` and booleans are dropped, elements are
	kept and every other value is converted to its text representation. A
	``key`` attribute is moved out of the attributes onto `Element.key`.

	Example:

	```python
	h("ul", {"id": "list"}, [h("li", {"key": i}, i) for i in range(3)])
	```
	"""
	# Local import to avoid import cycles with ember.component -> ember.nodes.
	from ember.component import Component

	if isinstance(kind, Component):
		kind = kind.fn
	if not isinstance(kind, str) and not callable(kind):
		raise TypeError(
			"Element kind must be a tag name or a component function, "
			+ f"got {type(kind).__name__}"
		)

	key = None
	props: dict[str, Any] | None = None
	if attributes is not None:
		props = dict(attributes)
		key = props.pop("key", None)

	return Element(
		kind=kind,
		attributes=props,
		children=flatten_children(children),
		key=key,
	)


h = create_element


def flatten_children(children: Iterable[Any]) -> tuple[Child, ...]:
	out: list[Child] = []

	def visit(item: Any) -> None:
		if item is None or isinstance(item, bool):
			return
		if isinstance(item, Element):
			out.append(item)
			return
		if isinstance(item, Mapping):
			raise TypeError("Mapping is not a valid child; pass it as an attribute")
		if isinstance(item, Iterable) and not isinstance(item, (str, bytes)):
			for sub in item:
				visit(sub)
			return
		out.append(str(item))

	for child in children:
		visit(child)
	return tuple(out)


def normalize_output(value: Any) -> RenderedOutput:
	"""Coerce a component's return value into a rendered output."""
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, (Element, str)):
		return value
	if isinstance(value, (list, tuple, Mapping)):
		raise TypeError(
			"Components must return a single element, text or None, "
			+ f"got {type(value).__name__}"
		)
	return str(value)


__all__ = [
	"Child",
	"ComponentFn",
	"Element",
	"Kind",
	"RenderedOutput",
	"create_element",
	"flatten_children",
	"h",
	"normalize_output",
]
