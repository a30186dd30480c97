from ember.component import Component, component
from ember.env import EmberEnv, env
from ember.fiber import Fiber, get_or_create_fiber
from ember.hooks import (
	HookError,
	HookOrderError,
	Ref,
	RenderFrame,
	current_fiber,
	current_hook_index,
	use_callback,
	use_effect,
	use_memo,
	use_reducer,
	use_ref,
	use_state,
)
from ember.host import Event, HostAdapter, MemoryElement, MemoryHost, MemoryText
from ember.nodes import Element, RenderedOutput, create_element, h
from ember.reconciler import Reconciler, update
from ember.renderer import Renderer, render, render_component
from ember.version import __version__

__all__ = [
	"Component",
	"Element",
	"EmberEnv",
	"Event",
	"Fiber",
	"HookError",
	"HookOrderError",
	"HostAdapter",
	"MemoryElement",
	"MemoryHost",
	"MemoryText",
	"Reconciler",
	"Ref",
	"RenderFrame",
	"RenderedOutput",
	"Renderer",
	"__version__",
	"component",
	"create_element",
	"current_fiber",
	"current_hook_index",
	"env",
	"get_or_create_fiber",
	"h",
	"render",
	"render_component",
	"update",
	"use_callback",
	"use_effect",
	"use_memo",
	"use_reducer",
	"use_ref",
	"use_state",
]
