from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class HostAdapter(ABC):
	"""Boundary between the engine and a concrete host tree.

	The renderer and reconciler only ever touch host nodes through these
	methods. Containers and nodes are opaque to the engine; ``index``
	arguments count the container's direct children.
	"""

	@abstractmethod
	def create_element(self, tag: str) -> Any: ...

	@abstractmethod
	def create_text(self, text: str) -> Any: ...

	@abstractmethod
	def insert(self, container: Any, node: Any, index: int | None = None) -> None:
		"""Insert ``node`` at ``index``, or append it when ``index`` is None."""
		...

	@abstractmethod
	def remove(self, node: Any) -> None:
		"""Detach ``node`` from its parent."""
		...

	@abstractmethod
	def remove_child_at(self, container: Any, index: int) -> None: ...

	@abstractmethod
	def child_at(self, container: Any, index: int) -> Any: ...

	@abstractmethod
	def child_count(self, container: Any) -> int: ...

	@abstractmethod
	def set_text(self, node: Any, text: str) -> None: ...

	@abstractmethod
	def set_attribute(self, node: Any, name: str, value: Any) -> None: ...

	@abstractmethod
	def remove_attribute(self, node: Any, name: str) -> None: ...

	@abstractmethod
	def add_listener(
		self, node: Any, event: str, handler: Callable[..., Any]
	) -> None: ...

	@abstractmethod
	def remove_listener(
		self, node: Any, event: str, handler: Callable[..., Any]
	) -> None: ...


__all__ = ["HostAdapter"]
