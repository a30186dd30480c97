from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, override

from ember.nodes import Element, Kind, RenderedOutput

if TYPE_CHECKING:
	from ember.host.base import HostAdapter
	from ember.hooks.core import HookSlot

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Fiber:
	"""Persistent per-instance record of a mounted component.

	A fiber outlives the element that created it: when a parent re-renders,
	the new element at the same position inherits the previous element's
	fiber, so hook slots survive across renders.
	"""

	kind: Kind
	hooks: list[HookSlot] = field(default_factory=list)
	owner_element: Element | None = None
	host_container: Any = None
	last_rendered_output: RenderedOutput = None
	host_offset: int | None = None
	mounted: bool = False
	render_count: int = 0
	host: HostAdapter | None = None

	@property
	def name(self) -> str:
		return getattr(self.kind, "__name__", "Component")

	def request_update(self) -> None:
		"""Re-render this fiber and reconcile its subtree in place."""
		if not self.mounted or self.host is None:
			logger.debug("Skipping update of unmounted <%s>", self.name)
			return
		# Local import to avoid import cycles with ember.reconciler -> ember.fiber.
		from ember.reconciler import Reconciler

		Reconciler(self.host).rerender(self)

	def dispose(self) -> None:
		for slot in self.hooks:
			slot.dispose()
		self.mounted = False

	@override
	def __repr__(self) -> str:
		return f"Fiber(<{self.name}>, hooks={len(self.hooks)}, mounted={self.mounted})"


def get_or_create_fiber(element: Element, container: Any) -> Fiber:
	if not element.is_component:
		raise TypeError(f"<{element.name}> is not a component element")
	fiber = element.fiber
	if fiber is None:
		fiber = Fiber(kind=element.kind)
		element.fiber = fiber
	fiber.owner_element = element
	if container is not None:
		fiber.host_container = container
	return fiber


__all__ = ["Fiber", "get_or_create_fiber"]
