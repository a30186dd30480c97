"""
End-to-end behaviour of the engine through the public API.
"""

from typing import Any

import pytest
from ember import MemoryElement, component, h, render, update, use_reducer, use_state
from ember._examples import Counter, CounterApp, TodoApp, todo_reducer
from ember.dom import button, span


def test_counter_reaches_three_after_three_clicks(container: MemoryElement):
	@component
	def ClickCounter(props: dict[str, Any]):
		count, set_count = use_state(0)
		return button(span(count), onClick=lambda: set_count(lambda c: c + 1))

	render(ClickCounter(), container)
	target = container.query_selector("button")
	assert target is not None
	for _ in range(3):
		target.click()
	assert target.text_content == "3"
	assert container.inner_html == "<button><span>3</span></button>"


def test_attribute_replacement(container: MemoryElement):
	prev = h("div", {"id": "old", "className": "foo", "title": "gone"})
	render(prev, container)
	next = h("div", {"id": "new", "className": "bar"})
	update(container, prev, next)
	assert container.children[0].attributes == {"id": "new", "class": "bar"}


def test_handler_swap_fires_only_new_handler(container: MemoryElement):
	calls: list[str] = []

	def handler_a():
		calls.append("A")

	def handler_b():
		calls.append("B")

	prev = h("button", {"onClick": handler_a}, "go")
	render(prev, container)
	next = h("button", {"onClick": handler_b}, "go")
	update(container, prev, next)
	container.children[0].click()
	assert calls == ["B"]


def test_lazy_reducer_initializer_runs_once(container: MemoryElement):
	init_calls: list[int] = []
	dispatches: list[Any] = []

	def init(arg: int) -> int:
		init_calls.append(arg)
		return arg

	def App(props: dict[str, Any]):
		state, dispatch = use_reducer(lambda s, a: s + a, 1, init)
		dispatches.append(dispatch)
		return h("output", None, state)

	render(h(App), container)
	for step in (1, 2, 3):
		dispatches[-1](step)
	assert init_calls == [1]
	assert container.inner_html == "<output>7</output>"


class TestExamples:
	def test_counter_app_counters_are_independent(self, container: MemoryElement):
		render(CounterApp(), container)
		buttons = container.query_selector_all("button")
		assert len(buttons) == 3
		buttons[0].click()
		buttons[2].click()
		buttons[2].click()
		labels = [s.text_content for s in container.query_selector_all("span")]
		assert labels == ["First: 1", "Second: 0", "Third: 2"]

	def test_counter_start_prop(self, container: MemoryElement):
		render(Counter(start=5, label="Score"), container)
		assert container.inner_html == (
			'<div class="counter"><button class="increment">+</button>'
			+ "<span>Score: 5</span></div>"
		)

	def test_todo_app(self, container: MemoryElement):
		changes: list[int] = []
		render(TodoApp(initial=["write", "test"], on_change=changes.append), container)
		assert container.query_selector("p").text_content == "2 remaining"  # pyright: ignore[reportOptionalMemberAccess]

		add_button = container.query_selector("button")
		assert add_button is not None
		add_button.click()
		items = container.query_selector_all("li")
		assert [li.query_selector("span").text_content for li in items] == [  # pyright: ignore[reportOptionalMemberAccess]
			"write",
			"test",
			"Task 2",
		]

		toggle_first = items[0].query_selector("button")
		assert toggle_first is not None
		toggle_first.click()
		assert items[0].query_selector("span").attributes == {"class": "done"}  # pyright: ignore[reportOptionalMemberAccess]
		assert container.query_selector("p").text_content == "2 remaining"  # pyright: ignore[reportOptionalMemberAccess]
		assert changes == [2, 3, 2]

	def test_todo_reducer_rejects_unknown_action(self):
		with pytest.raises(ValueError):
			todo_reducer((), ("explode", None))
