from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from ember.helpers import MISSING, deps_changed
from ember.hooks.core import HookSlot, RenderFrame

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


class MemoSlot(HookSlot):
	__slots__ = ("value", "deps")  # pyright: ignore[reportUnannotatedClassAttribute]
	value: Any
	deps: tuple[Any, ...] | None

	def __init__(self) -> None:
		self.value = MISSING
		self.deps = None


def use_memo(factory: Callable[[], T], deps: Sequence[Any]) -> T:
	"""Return ``factory()``, recomputed only when ``deps`` changed."""
	frame = RenderFrame.require("use_memo")
	slot = frame.next_slot(MemoSlot, MemoSlot)
	new_deps = tuple(deps)
	if slot.value is MISSING or deps_changed(slot.deps, new_deps):
		slot.value = factory()
		slot.deps = new_deps
	return slot.value


class CallbackSlot(MemoSlot):
	__slots__ = ()  # pyright: ignore[reportUnannotatedClassAttribute]


def use_callback(fn: F, deps: Sequence[Any]) -> F:
	"""Return the stored ``fn`` while ``deps`` are unchanged."""
	frame = RenderFrame.require("use_callback")
	slot = frame.next_slot(CallbackSlot, CallbackSlot)
	new_deps = tuple(deps)
	if slot.value is MISSING or deps_changed(slot.deps, new_deps):
		slot.value = fn
		slot.deps = new_deps
	return slot.value


__all__ = ["CallbackSlot", "MemoSlot", "use_callback", "use_memo"]
