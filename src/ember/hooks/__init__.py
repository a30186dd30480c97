from ember.hooks.core import (
	HookError,
	HookOrderError,
	HookSlot,
	RenderFrame,
	current_fiber,
	current_hook_index,
)
from ember.hooks.effects import EffectSlot, commit, use_effect
from ember.hooks.memo import use_callback, use_memo
from ember.hooks.refs import Ref, use_ref
from ember.hooks.state import SetterSlot, StateSlot, use_reducer, use_state

__all__ = [
	"EffectSlot",
	"HookError",
	"HookOrderError",
	"HookSlot",
	"Ref",
	"RenderFrame",
	"SetterSlot",
	"StateSlot",
	"commit",
	"current_fiber",
	"current_hook_index",
	"use_callback",
	"use_effect",
	"use_memo",
	"use_reducer",
	"use_ref",
	"use_state",
]
