import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, override

from ember.helpers import deps_changed
from ember.hooks.core import HookError, HookSlot, RenderFrame

logger = logging.getLogger(__name__)

EffectFn = Callable[[], Callable[[], Any] | None]

PENDING_EFFECTS: ContextVar[list["EffectSlot"] | None] = ContextVar(
	"ember_pending_effects", default=None
)


class EffectSlot(HookSlot):
	__slots__ = ("effect", "deps", "cleanup", "disposed")  # pyright: ignore[reportUnannotatedClassAttribute]
	effect: EffectFn | None
	deps: tuple[Any, ...] | None
	cleanup: Callable[[], Any] | None
	disposed: bool

	def __init__(self) -> None:
		self.effect = None
		self.deps = None
		self.cleanup = None
		self.disposed = False

	def run(self) -> None:
		if self.disposed or self.effect is None:
			return
		effect = self.effect
		self.effect = None
		self._run_cleanup()
		result = effect()
		if callable(result):
			self.cleanup = result

	def _run_cleanup(self) -> None:
		cleanup = self.cleanup
		self.cleanup = None
		if cleanup is not None:
			cleanup()

	@override
	def dispose(self) -> None:
		self.disposed = True
		self.effect = None
		self._run_cleanup()


@contextmanager
def commit() -> Iterator[None]:
	"""Collect effects scheduled while rendering and run them afterwards.

	Only the outermost ``commit()`` runs the queue, once every host mutation
	of that render or update call has been applied. Nested commits join the
	outer queue. When the body raises, the queued effects are dropped.
	"""
	if PENDING_EFFECTS.get() is not None:
		yield
		return
	queue: list[EffectSlot] = []
	token = PENDING_EFFECTS.set(queue)
	try:
		yield
	except BaseException:
		PENDING_EFFECTS.reset(token)
		if queue:
			logger.debug("Discarding %d pending effect(s) after failure", len(queue))
		for slot in queue:
			# Force the effect to run again on the next successful render
			slot.effect = None
			slot.deps = None
		raise
	PENDING_EFFECTS.reset(token)
	flush_effects(queue)


def flush_effects(queue: list[EffectSlot]) -> None:
	# Effects scheduled by updates triggered from an effect get their own commit.
	while queue:
		slot = queue.pop(0)
		slot.run()


def use_effect(effect: EffectFn, deps: Sequence[Any] | None = None) -> None:
	"""Run ``effect`` after the current render has been committed to the host.

	With ``deps=None`` the effect runs after every render; otherwise only when
	an entry of ``deps`` changed since the previous render. If the effect
	returns a callable, it is called before the effect runs again and when
	the component unmounts.
	"""
	frame = RenderFrame.require("use_effect")
	slot = frame.next_slot(EffectSlot, EffectSlot)
	new_deps = tuple(deps) if deps is not None else None
	if deps_changed(slot.deps, new_deps):
		slot.effect = effect
		slot.deps = new_deps
		queue = PENDING_EFFECTS.get()
		if queue is None:
			raise HookError("use_effect was called outside of a commit")
		queue.append(slot)


__all__ = ["EffectSlot", "PENDING_EFFECTS", "commit", "flush_effects", "use_effect"]
