"""Component definition helpers.

Any ``fn(props)`` callable can be used as an element kind directly. The
`@component` decorator adds a keyword-argument call style on top of that.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload, override

from ember.nodes import Element, create_element, flatten_children


class Component:
	"""A callable wrapper that turns a ``fn(props)`` function into an element factory.

	Attributes:
		name: Display name of the component (defaults to function name).
		fn: The underlying render function, used as the element kind.

	Example:

	```python
	@component
	def Greeting(props):
	    return h("p", None, "Hello ", props["name"])

	Greeting(name="Ada")  # Element(kind=Greeting.fn, attributes={"name": "Ada"})
	Greeting(name="Ada", key="g1")  # With reconciliation key
	```
	"""

	fn: Callable[..., Any]
	name: str

	def __init__(self, fn: Callable[..., Any], name: str | None = None) -> None:
		self.fn = fn
		self.name = name or getattr(fn, "__name__", None) or "Component"

	def __call__(self, *children: Any, **props: Any) -> Element:
		if children:
			props["children"] = flatten_children(children)
		return create_element(self.fn, props or None)

	@override
	def __repr__(self) -> str:
		return f"Component(name={self.name!r})"


@overload
def component(fn: Callable[..., Any]) -> Component: ...


@overload
def component(
	fn: None = None, *, name: str | None = None
) -> Callable[[Callable[..., Any]], Component]: ...


def component(
	fn: Callable[..., Any] | None = None, *, name: str | None = None
) -> Component | Callable[[Callable[..., Any]], Component]:
	"""Decorator that creates a `Component` from a ``fn(props)`` function.

	Can be used with or without parentheses.
	"""

	def decorator(fn: Callable[..., Any]) -> Component:
		return Component(fn, name)

	if fn is not None:
		return decorator(fn)
	return decorator


__all__ = ["Component", "component"]
