from __future__ import annotations

import logging
from typing import Any

from ember.fiber import get_or_create_fiber
from ember.hooks.core import RenderFrame
from ember.hooks.effects import commit
from ember.host.base import HostAdapter
from ember.host.memory import MemoryHost
from ember.nodes import Element, RenderedOutput, normalize_output
from ember.props import set_prop

logger = logging.getLogger(__name__)

DEFAULT_HOST: HostAdapter = MemoryHost()


class Renderer:
	"""Mounts element trees into a host container.

	Every intrinsic element rendered through `render_tree` gets a live host
	node on `Element.host`; every component element gets a mounted fiber on
	`Element.fiber`. Components contribute no host node of their own, their
	output is rendered in their place.
	"""

	host: HostAdapter

	def __init__(self, host: HostAdapter | None = None) -> None:
		self.host = host if host is not None else DEFAULT_HOST

	# ------------------------------------------------------------------
	# Rendering
	# ------------------------------------------------------------------

	def render_tree(
		self, node: RenderedOutput, container: Any, index: int | None = None
	) -> RenderedOutput:
		"""Render ``node`` into ``container`` at host position ``index``.

		``index=None`` appends. Returns ``node``, now backed by host nodes.
		"""
		if node is None:
			return None
		if isinstance(node, str):
			self.host.insert(container, self.host.create_text(node), index)
			return node
		if not isinstance(node, Element):
			raise TypeError(f"Unsupported node type: {type(node).__name__}")
		if node.is_component:
			return self.mount_component(node, container, index)
		return self.mount_element(node, container, index)

	def mount_component(
		self, node: Element, container: Any, index: int | None = None
	) -> Element:
		fiber = get_or_create_fiber(node, container)
		fiber.host = self.host
		fiber.host_offset = (
			index if index is not None else self.host.child_count(container)
		)
		output = self.render_component(node, container)
		self.render_tree(output, container, index)
		fiber.mounted = True
		logger.debug("Mounted <%s> at %d", fiber.name, fiber.host_offset)
		return node

	def mount_element(
		self, node: Element, container: Any, index: int | None = None
	) -> Element:
		assert isinstance(node.kind, str)
		host_node = self.host.create_element(node.kind)
		node.host = host_node
		for name, value in (node.attributes or {}).items():
			set_prop(self.host, host_node, name, value)
		for child in node.children:
			if isinstance(child, Element):
				child.parent = node
			self.render_tree(child, host_node)
		self.host.insert(container, host_node, index)
		return node

	def render_component(
		self, node: Element, container: Any = None
	) -> RenderedOutput:
		"""Invoke a component element and return its normalised output.

		The host tree is not touched. The output is stored on the fiber as
		`Fiber.last_rendered_output` only when the component returns normally;
		on failure the fiber keeps its hooks and its previous output.
		"""
		if not node.is_component:
			raise TypeError(f"<{node.name}> is not a component element")
		fiber = get_or_create_fiber(node, container)
		if fiber.host is None:
			fiber.host = self.host
		props = node.attributes if node.attributes is not None else {}
		with commit():
			with RenderFrame(fiber):
				output = normalize_output(node.kind(props))
		if isinstance(output, Element):
			output.parent = node
		fiber.last_rendered_output = output
		return output


def render(
	node: RenderedOutput, container: Any, *, host: HostAdapter | None = None
) -> RenderedOutput:
	"""Mount ``node`` into ``container`` and run the effects it scheduled."""
	if isinstance(node, Element):
		node.parent = None
	with commit():
		return Renderer(host).render_tree(node, container)


def render_component(
	node: Element, container: Any = None, *, host: HostAdapter | None = None
) -> RenderedOutput:
	return Renderer(host).render_component(node, container)


__all__ = ["DEFAULT_HOST", "Renderer", "render", "render_component"]
