from typing import Any

import pytest
from ember import MemoryElement, h, render, render_component, update, use_reducer, use_state


class Tracker:
	"""Component factory that records every render's state and updater."""

	def __init__(self, initial: Any = 0) -> None:
		self.initial = initial
		self.values: list[Any] = []
		self.setters: list[Any] = []

	def __call__(self, props: dict[str, Any]):
		value, set_value = use_state(self.initial)
		self.values.append(value)
		self.setters.append(set_value)
		return h("span", None, str(value))

	@property
	def set(self):
		return self.setters[-1]


def test_state_updates_rerender(container: MemoryElement):
	tracker = Tracker(1)
	render(h(tracker), container)
	tracker.set(2)
	assert container.inner_html == "<span>2</span>"
	assert tracker.values == [1, 2]


def test_setter_identity_is_stable(container: MemoryElement):
	tracker = Tracker()
	render(h(tracker), container)
	tracker.set(1)
	tracker.set(2)
	assert len(tracker.setters) == 3
	assert tracker.setters[0] is tracker.setters[1] is tracker.setters[2]


def test_functional_update_receives_current_value(container: MemoryElement):
	tracker = Tracker(10)
	render(h(tracker), container)
	tracker.set(lambda v: v + 1)
	tracker.set(lambda v: v * 2)
	assert tracker.values == [10, 11, 22]


def test_callable_initial_value_is_stored_verbatim(container: MemoryElement):
	def factory():
		return 1

	seen: list[Any] = []

	def App(props: dict[str, Any]):
		value, _ = use_state(factory)
		seen.append(value)
		return None

	render(h(App), container)
	assert seen == [factory]


def test_equal_value_still_rerenders_by_default(container: MemoryElement):
	tracker = Tracker(1)
	render(h(tracker), container)
	tracker.set(1)
	assert tracker.values == [1, 1]


def test_equal_value_skip_is_opt_in(container: MemoryElement, monkeypatch: pytest.MonkeyPatch):
	monkeypatch.setenv("EMBER_SKIP_EQUAL_UPDATES", "1")
	tracker = Tracker(1)
	render(h(tracker), container)
	tracker.set(1)
	assert tracker.values == [1]
	tracker.set(2)
	assert tracker.values == [1, 2]


def test_update_is_synchronous(container: MemoryElement):
	tracker = Tracker("a")
	render(h(tracker), container)
	tracker.set("b")
	# No flush step needed: the host tree already reflects the update
	assert container.text_content == "b"


def test_update_without_mount_only_writes_state():
	tracker = Tracker(0)
	node = h(tracker)
	render_component(node)
	tracker.set(5)
	assert tracker.values == [0]
	render_component(node)
	assert tracker.values == [0, 5]


def test_update_after_unmount_is_ignored(container: MemoryElement):
	tracker = Tracker(0)
	node = h(tracker)
	render(node, container)
	update(container, node, None)
	tracker.set(3)
	assert tracker.values == [0]
	assert container.children == []


class TestReducer:
	@staticmethod
	def counter(state: int, action: str) -> int:
		if action == "inc":
			return state + 1
		if action == "dec":
			return state - 1
		return state

	def test_dispatch_applies_reducer(self, container: MemoryElement):
		dispatches: list[Any] = []

		def App(props: dict[str, Any]):
			count, dispatch = use_reducer(self.counter, 5)
			dispatches.append(dispatch)
			return h("b", None, count)

		render(h(App), container)
		dispatches[-1]("inc")
		dispatches[-1]("inc")
		dispatches[-1]("dec")
		assert container.inner_html == "<b>6</b>"
		assert len({id(d) for d in dispatches}) == 1

	def test_lazy_initializer_runs_once(self, container: MemoryElement):
		init_calls: list[Any] = []
		dispatches: list[Any] = []

		def init(arg: int) -> int:
			init_calls.append(arg)
			return arg * 10

		def App(props: dict[str, Any]):
			count, dispatch = use_reducer(self.counter, 2, init)
			dispatches.append(dispatch)
			return h("b", None, count)

		render(h(App), container)
		for _ in range(3):
			dispatches[-1]("inc")
		assert init_calls == [2]
		assert container.inner_html == "<b>23</b>"

	def test_latest_reducer_is_used(self, container: MemoryElement):
		dispatches: list[Any] = []

		def App(props: dict[str, Any]):
			step = props["step"]
			value, dispatch = use_reducer(lambda s, a: s + a * step, 0)
			dispatches.append(dispatch)
			return h("b", None, value)

		first = h(App, {"step": 1})
		render(first, container)
		second = h(App, {"step": 10})
		update(container, first, second)
		dispatches[-1](2)
		assert container.inner_html == "<b>20</b>"
