from typing import Any, Generic, TypeVar, override

from ember.hooks.core import HookSlot, RenderFrame

T = TypeVar("T")


class Ref(HookSlot, Generic[T]):
	"""Mutable box whose identity is stable across renders.

	Writing ``current`` never triggers a re-render.
	"""

	__slots__ = ("current",)  # pyright: ignore[reportUnannotatedClassAttribute]
	current: T

	def __init__(self, current: T) -> None:
		self.current = current

	@override
	def __repr__(self) -> str:
		return f"Ref(current={self.current!r})"


def use_ref(initial: Any = None) -> Ref[Any]:
	frame = RenderFrame.require("use_ref")
	return frame.next_slot(Ref, lambda: Ref(initial))


__all__ = ["Ref", "use_ref"]
