from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from ember.env import env
from ember.helpers import values_equal
from ember.hooks.core import HookSlot, RenderFrame

if TYPE_CHECKING:
	from ember.fiber import Fiber

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")


class StateSlot(HookSlot):
	"""Value storage shared by `use_state` and `use_reducer`.

	``dispatch`` is created once per slot, so the updater handed to the
	component is the same object on every render.
	"""

	__slots__ = ("value", "reducer", "fiber", "dispatch")  # pyright: ignore[reportUnannotatedClassAttribute]
	value: Any
	reducer: Callable[[Any, Any], Any]
	fiber: Fiber
	dispatch: Callable[[Any], None]

	def __init__(
		self, fiber: Fiber, value: Any, reducer: Callable[[Any, Any], Any]
	) -> None:
		self.fiber = fiber
		self.value = value
		self.reducer = reducer
		self.dispatch = self._dispatch

	def _dispatch(self, action: Any) -> None:
		previous = self.value
		self.value = self.reducer(previous, action)
		if env.skip_equal_updates and values_equal(previous, self.value):
			logger.debug("Skipping update of <%s>: state unchanged", self.fiber.name)
			return
		self.fiber.request_update()


class SetterSlot(StateSlot):
	"""`StateSlot` created by `use_state`, kept apart from reducer slots."""

	__slots__ = ()  # pyright: ignore[reportUnannotatedClassAttribute]


def _basic_reducer(state: Any, action: Any) -> Any:
	if callable(action):
		return action(state)
	return action


def use_reducer(
	reducer: Callable[[T, A], T],
	initial_arg: Any,
	init: Callable[[Any], T] | None = None,
) -> tuple[T, Callable[[A], None]]:
	"""Keep a state value updated through ``reducer``.

	On the first render the state is ``init(initial_arg)`` when ``init`` is
	given, ``initial_arg`` otherwise. ``init`` is never called again for the
	lifetime of the component. ``dispatch(action)`` stores
	``reducer(state, action)`` using the reducer passed to the latest render
	and re-renders the component.
	"""
	frame = RenderFrame.require("use_reducer")
	fiber = frame.fiber

	def create() -> StateSlot:
		value = init(initial_arg) if init is not None else initial_arg
		return StateSlot(fiber, value, reducer)

	slot = frame.next_slot(StateSlot, create)
	slot.reducer = reducer
	return slot.value, slot.dispatch


def use_state(initial: T) -> tuple[T, Callable[[T | Callable[[T], T]], None]]:
	"""Return the current value and a setter.

	``initial`` is stored as-is on the first render, even when it is callable.
	The setter accepts a new value or a function of the current value.
	"""
	frame = RenderFrame.require("use_state")
	fiber = frame.fiber
	slot = frame.next_slot(
		SetterSlot, lambda: SetterSlot(fiber, initial, _basic_reducer)
	)
	return slot.value, slot.dispatch


__all__ = ["SetterSlot", "StateSlot", "use_reducer", "use_state"]
