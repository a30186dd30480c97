"""Sample components used by the `ember demo` command and the tests."""

from __future__ import annotations

from typing import Any

from ember.component import component
from ember.dom.tags import button, div, h1, li, p, span, ul
from ember.hooks import (
	use_callback,
	use_effect,
	use_memo,
	use_reducer,
	use_ref,
	use_state,
)


@component
def Counter(props: dict[str, Any]):
	count, set_count = use_state(props.get("start", 0))
	label = props.get("label", "Count")

	def increment():
		set_count(lambda c: c + 1)

	return div(
		button("+", className="increment", onClick=increment),
		span(f"{label}: ", count),
		className="counter",
	)


@component
def CounterApp(props: dict[str, Any]):
	return div(
		h1("Counters"),
		Counter(label="First", key="first"),
		Counter(label="Second", key="second"),
		Counter(label="Third", key="third"),
	)


def todo_reducer(state: tuple[dict[str, Any], ...], action: tuple[str, Any]):
	kind, payload = action
	if kind == "add":
		return (*state, {"id": payload["id"], "text": payload["text"], "done": False})
	if kind == "toggle":
		return tuple(
			{**item, "done": not item["done"]} if item["id"] == payload else item
			for item in state
		)
	if kind == "remove":
		return tuple(item for item in state if item["id"] != payload)
	raise ValueError(f"Unknown todo action: {kind!r}")


def initial_todos(texts: list[str]) -> tuple[dict[str, Any], ...]:
	return tuple(
		{"id": idx, "text": text, "done": False} for idx, text in enumerate(texts)
	)


@component
def TodoItem(props: dict[str, Any]):
	item = props["item"]
	return li(
		span(item["text"], className="done" if item["done"] else None),
		button("toggle", onClick=lambda: props["dispatch"](("toggle", item["id"]))),
	)


@component
def TodoApp(props: dict[str, Any]):
	todos, dispatch = use_reducer(todo_reducer, props.get("initial", []), initial_todos)
	next_id = use_ref(len(todos))
	remaining = use_memo(lambda: sum(1 for t in todos if not t["done"]), [todos])

	def add():
		dispatch(("add", {"id": next_id.current, "text": f"Task {next_id.current}"}))
		next_id.current += 1

	on_add = use_callback(add, [dispatch])

	on_change = props.get("on_change")

	def report():
		if on_change is not None:
			on_change(remaining)

	use_effect(report, [remaining])

	return div(
		button("Add todo", onClick=on_add),
		p(f"{remaining} remaining"),
		ul(*(TodoItem(item=item, dispatch=dispatch, key=item["id"]) for item in todos)),
	)


EXAMPLES = {"counter": CounterApp, "todo": TodoApp}

__all__ = ["EXAMPLES", "Counter", "CounterApp", "TodoApp", "TodoItem", "todo_reducer"]
