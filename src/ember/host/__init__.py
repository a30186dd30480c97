from ember.host.base import HostAdapter
from ember.host.memory import Event, MemoryElement, MemoryHost, MemoryText

__all__ = ["Event", "HostAdapter", "MemoryElement", "MemoryHost", "MemoryText"]
