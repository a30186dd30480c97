from collections.abc import Callable
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING, Any, Literal, TypeVar

from ember.env import env

if TYPE_CHECKING:
	from ember.fiber import Fiber


class HookError(RuntimeError):
	pass


class HookOrderError(HookError):
	pass


class HookSlot:
	"""Base class for the per-call-site records stored in `Fiber.hooks`.

	Subclasses hold whatever a hook needs to persist across renders. `dispose`
	is called when the owning fiber is unmounted.
	"""

	__slots__ = ()  # pyright: ignore[reportUnannotatedClassAttribute]

	def dispose(self) -> None:
		"""Release resources held by this slot. No-op by default."""
		...


S = TypeVar("S", bound=HookSlot)


class RenderFrame:
	"""The active fiber and hook cursor of one component render.

	Entering the frame makes ``fiber`` the active render context with the
	cursor at 0; exiting restores whatever frame was active before, on every
	exit path. Nested component renders therefore see their own fiber and
	leave the outer frame untouched.
	"""

	fiber: "Fiber"
	cursor: int
	_token: "Token[RenderFrame | None] | None"

	def __init__(self, fiber: "Fiber") -> None:
		self.fiber = fiber
		self.cursor = 0
		self._token = None

	@staticmethod
	def current() -> "RenderFrame | None":
		return RENDER_FRAME.get()

	@staticmethod
	def require(caller: str | None = None) -> "RenderFrame":
		frame = RENDER_FRAME.get()
		if frame is None:
			caller = caller or "this function"
			raise HookError(
				f"Missing render context, {caller} was likely called outside rendering"
			)
		return frame

	def __enter__(self):
		self.cursor = 0
		self._token = RENDER_FRAME.set(self)
		return self

	def __exit__(
		self,
		exc_type: type[BaseException] | None,
		exc_val: BaseException | None,
		exc_tb: Any,
	) -> Literal[False]:
		if self._token is not None:
			RENDER_FRAME.reset(self._token)
			self._token = None
		if exc_type is None:
			self._check_hook_count()
			self.fiber.render_count += 1
		return False

	def next_slot(self, slot_type: type[S], factory: Callable[[], S]) -> S:
		"""Return the slot at the cursor, creating it on first use."""
		hooks = self.fiber.hooks
		index = self.cursor
		self.cursor += 1
		if index < len(hooks):
			slot = hooks[index]
			if type(slot) is not slot_type:
				raise HookOrderError(
					f"Hook #{index} of <{self.fiber.name}> was {type(slot).__name__} "
					+ f"on a previous render but is now {slot_type.__name__}. "
					+ "Hooks must be called in the same order on every render."
				)
			return slot
		if env.strict_hooks and self.fiber.render_count > 0:
			raise HookOrderError(
				f"<{self.fiber.name}> called more hooks than on its previous render"
			)
		slot = factory()
		hooks.append(slot)
		return slot

	def _check_hook_count(self) -> None:
		if not env.strict_hooks or self.fiber.render_count == 0:
			return
		if self.cursor != len(self.fiber.hooks):
			raise HookOrderError(
				f"<{self.fiber.name}> called {self.cursor} hooks but "
				+ f"{len(self.fiber.hooks)} on its previous render"
			)


RENDER_FRAME: ContextVar[RenderFrame | None] = ContextVar(
	"ember_render_frame", default=None
)


def current_fiber() -> "Fiber | None":
	frame = RENDER_FRAME.get()
	return frame.fiber if frame is not None else None


def current_hook_index() -> int | None:
	frame = RENDER_FRAME.get()
	return frame.cursor if frame is not None else None


__all__ = [
	"HookError",
	"HookOrderError",
	"HookSlot",
	"RENDER_FRAME",
	"RenderFrame",
	"current_fiber",
	"current_hook_index",
]
