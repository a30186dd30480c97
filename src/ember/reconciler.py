from __future__ import annotations

import logging
from typing import Any

from ember.fiber import Fiber, get_or_create_fiber
from ember.helpers import MISSING, values_equal
from ember.hooks.effects import commit
from ember.host.base import HostAdapter
from ember.nodes import Element, RenderedOutput
from ember.props import remove_prop, set_prop
from ember.renderer import Renderer

logger = logging.getLogger(__name__)


class Reconciler(Renderer):
	"""Patches a mounted tree into the shape of a new description.

	Children are compared position by position. An element keeps its host
	node and its fiber when the node at the same position has the same kind
	and key; anything else is replaced.
	"""

	# ------------------------------------------------------------------
	# Reconciliation
	# ------------------------------------------------------------------

	def update(
		self,
		container: Any,
		prev: RenderedOutput,
		next: RenderedOutput,
		index: int | None = None,
	) -> RenderedOutput:
		if prev is next:
			return next
		if prev is None:
			return self.render_tree(next, container, index)
		if next is None:
			self.unmount(container, prev, index)
			return None

		if isinstance(prev, Element) and isinstance(next, Element):
			next.host = prev.host

		if not same_node(prev, next):
			position = self.position_of(container, prev, index)
			logger.debug(
				"Replacing %s with %s at %d", describe(prev), describe(next), position
			)
			self.unmount(container, prev, position)
			return self.render_tree(next, container, position)

		if isinstance(prev, str):
			assert isinstance(next, str)
			if prev != next:
				position = self.position_of(container, prev, index)
				self.host.set_text(self.host.child_at(container, position), next)
			return next

		assert isinstance(prev, Element) and isinstance(next, Element)
		if next.is_component:
			return self.update_component(container, prev, next, index)
		return self.update_element(prev, next)

	def update_component(
		self, container: Any, prev: Element, next: Element, index: int | None
	) -> Element:
		position = self.position_of(container, prev, index)
		next.fiber = prev.fiber
		fiber = get_or_create_fiber(next, container)
		fiber.host = self.host
		previous_output = fiber.last_rendered_output
		fiber.host_offset = position
		output = self.render_component(next, container)
		fiber.last_rendered_output = self.update(
			container, previous_output, output, position
		)
		fiber.mounted = True
		return next

	def update_element(self, prev: Element, next: Element) -> Element:
		host_node = next.host
		for child in next.children:
			if isinstance(child, Element):
				child.parent = next
		self.patch_props(host_node, prev.attributes or {}, next.attributes or {})
		self.patch_children(host_node, prev.children, next.children)
		return next

	def patch_props(
		self, host_node: Any, prev: dict[str, Any], next: dict[str, Any]
	) -> None:
		for name, old in prev.items():
			if name not in next:
				remove_prop(self.host, host_node, name, old)
		for name, value in next.items():
			old = prev.get(name, MISSING)
			if old is not MISSING and values_equal(old, value):
				continue
			set_prop(self.host, host_node, name, value, old)

	def patch_children(
		self,
		host_node: Any,
		prev: tuple[Element | str, ...],
		next: tuple[Element | str, ...],
	) -> None:
		offset = 0
		for i in range(max(len(prev), len(next))):
			prev_child = prev[i] if i < len(prev) else None
			next_child = next[i] if i < len(next) else None
			result = self.update(host_node, prev_child, next_child, offset)
			offset += host_count(result)

	def rerender(self, fiber: Fiber) -> RenderedOutput:
		"""Re-run ``fiber``'s component and patch its previous output."""
		element = fiber.owner_element
		if element is None:
			raise RuntimeError(f"{fiber!r} has no owner element")
		container = fiber.host_container
		previous = fiber.last_rendered_output
		with commit():
			position = self.position_of(container, element, None)
			fiber.host_offset = position
			output = self.render_component(element, container)
			fiber.last_rendered_output = self.update(
				container, previous, output, position
			)
		logger.debug("Re-rendered <%s>", fiber.name)
		return fiber.last_rendered_output

	# ------------------------------------------------------------------
	# Unmounting
	# ------------------------------------------------------------------

	def unmount(
		self, container: Any, node: RenderedOutput, index: int | None
	) -> None:
		if node is None:
			return
		if isinstance(node, str):
			self.host.remove_child_at(
				container, self.position_of(container, node, index)
			)
			return
		if node.is_component:
			fiber = node.fiber
			if fiber is None:
				return
			position = self.position_of(container, node, index)
			self.unmount(container, fiber.last_rendered_output, position)
			fiber.dispose()
			node.fiber = None
			logger.debug("Unmounted <%s>", fiber.name)
			return
		for child in node.children:
			dispose_subtree(child)
		if node.host is not None:
			self.host.remove(node.host)
		else:
			self.host.remove_child_at(
				container, self.position_of(container, node, index)
			)

	# ------------------------------------------------------------------
	# Host positions
	# ------------------------------------------------------------------

	def position_of(
		self, container: Any, node: RenderedOutput, index: int | None
	) -> int:
		"""Host index of the first host node of ``node`` inside ``container``.

		Without an explicit ``index``, element outputs are found by host
		identity and other component outputs through the element's parents.
		Root-level text is assumed to be the last child of ``container``.
		"""
		if index is not None:
			return index
		if isinstance(node, Element):
			located = self.locate(container, node)
			if located is not None:
				return located
			if node.is_component:
				return self.offset_in_parent(node)
		return max(self.host.child_count(container) - 1, 0)

	def offset_in_parent(self, node: Element) -> int:
		"""Host index of a component's output, summed over earlier siblings.

		Walks up through component parents to the intrinsic element that owns
		the container. At the root, the offset recorded at mount is used.
		"""
		target = node
		parent = node.parent
		while parent is not None and parent.is_component:
			target = parent
			parent = parent.parent
		if parent is not None:
			offset = 0
			for child in parent.children:
				if child is target:
					return offset
				offset += host_count(child)
		fiber = target.fiber
		if fiber is not None and fiber.host_offset is not None:
			return fiber.host_offset
		return 0

	def locate(self, container: Any, node: RenderedOutput) -> int | None:
		if not isinstance(node, Element):
			return None
		if node.is_component:
			if node.fiber is None:
				return None
			return self.locate(container, node.fiber.last_rendered_output)
		if node.host is None:
			return None
		for idx in range(self.host.child_count(container)):
			if self.host.child_at(container, idx) is node.host:
				return idx
		return None


def same_node(a: RenderedOutput, b: RenderedOutput) -> bool:
	if isinstance(a, str) and isinstance(b, str):
		return True
	if isinstance(a, Element) and isinstance(b, Element):
		return a.kind == b.kind and values_equal(a.key, b.key)
	return False


def host_count(node: RenderedOutput) -> int:
	"""Number of host nodes ``node`` occupies in its container."""
	if node is None:
		return 0
	if isinstance(node, str) or not node.is_component:
		return 1
	if node.fiber is None:
		return 0
	return host_count(node.fiber.last_rendered_output)


def dispose_subtree(node: RenderedOutput) -> None:
	if not isinstance(node, Element):
		return
	if node.is_component:
		if node.fiber is not None:
			dispose_subtree(node.fiber.last_rendered_output)
			node.fiber.dispose()
			node.fiber = None
		return
	for child in node.children:
		dispose_subtree(child)


def describe(node: RenderedOutput) -> str:
	if isinstance(node, Element):
		return f"<{node.name}>"
	return repr(node)


def update(
	container: Any,
	prev: RenderedOutput,
	next: RenderedOutput,
	index: int | None = None,
	*,
	host: HostAdapter | None = None,
) -> RenderedOutput:
	"""Patch ``container`` from the tree ``prev`` to the tree ``next``."""
	if isinstance(next, Element):
		next.parent = None
	with commit():
		return Reconciler(host).update(container, prev, next, index)


__all__ = ["Reconciler", "dispose_subtree", "host_count", "same_node", "update"]
