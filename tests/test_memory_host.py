from ember.host.memory import Event, MemoryElement, MemoryHost, MemoryText


def build_list(host: MemoryHost) -> MemoryElement:
	ul = host.create_element("ul")
	for text in ("a", "b", "c"):
		li = host.create_element("li")
		host.insert(li, host.create_text(text))
		host.insert(ul, li)
	return ul


def test_insert_append_and_at_index():
	host = MemoryHost()
	root = MemoryElement("root")
	host.insert(root, host.create_text("b"))
	host.insert(root, host.create_text("a"), 0)
	host.insert(root, host.create_text("c"), 10)
	assert root.inner_html == "abc"
	assert host.child_count(root) == 3
	assert isinstance(host.child_at(root, 1), MemoryText)
	assert host.child_at(root, 5) is None


def test_insert_moves_node_between_parents():
	host = MemoryHost()
	first = MemoryElement("first")
	second = MemoryElement("second")
	node = host.create_element("span")
	host.insert(first, node)
	host.insert(second, node)
	assert first.children == []
	assert second.children == [node]
	assert node.parent is second


def test_remove_and_remove_child_at():
	host = MemoryHost()
	ul = build_list(host)
	middle = ul.children[1]
	host.remove(middle)
	assert middle.parent is None
	assert ul.text_content == "ac"
	host.remove_child_at(ul, 0)
	assert ul.inner_html == "<li>c</li>"
	# Removing a detached node is a no-op
	host.remove(middle)


def test_serialisation():
	host = MemoryHost()
	p = host.create_element("p")
	host.set_attribute(p, "title", 'say "hi"')
	host.set_attribute(p, "hidden", True)
	host.insert(p, host.create_text("<a & b>"))
	host.insert(p, host.create_element("br"))
	assert p.outer_html == '<p title="say &quot;hi&quot;" hidden>&lt;a &amp; b&gt;<br></p>'


def test_attributes_and_text():
	host = MemoryHost()
	el = host.create_element("input")
	host.set_attribute(el, "value", 3)
	assert el.outer_html == '<input value="3">'
	host.remove_attribute(el, "value")
	host.remove_attribute(el, "missing")
	assert el.attributes == {}

	text = host.create_text("x")
	host.set_text(text, "y")
	assert text.text_content == "y"


def test_query_selectors():
	host = MemoryHost()
	root = MemoryElement("root")
	host.insert(root, build_list(host))
	assert root.query_selector("ul") is root.children[0]
	assert [li.text_content for li in root.query_selector_all("li")] == ["a", "b", "c"]
	assert root.query_selector("table") is None


def test_dispatch_calls_listeners_with_or_without_event():
	host = MemoryHost()
	button = host.create_element("button")
	received: list[object] = []
	calls: list[str] = []
	host.add_listener(button, "click", lambda: calls.append("no-arg"))
	host.add_listener(button, "click", lambda event: received.append(event))
	event = button.click()
	assert calls == ["no-arg"]
	assert received == [event]
	assert isinstance(event, Event)
	assert event.type == "click"
	assert event.target is button


def test_events_bubble_until_stopped():
	host = MemoryHost()
	outer = host.create_element("div")
	inner = host.create_element("button")
	host.insert(outer, inner)
	order: list[str] = []
	host.add_listener(outer, "click", lambda: order.append("outer"))
	host.add_listener(inner, "click", lambda: order.append("inner"))
	inner.click()
	assert order == ["inner", "outer"]

	order.clear()
	host.add_listener(inner, "click", lambda e: e.stop_propagation())
	inner.click()
	assert order == ["inner"]


def test_remove_listener():
	host = MemoryHost()
	button = host.create_element("button")
	calls: list[str] = []

	def handler():
		calls.append("x")

	host.add_listener(button, "click", handler)
	host.remove_listener(button, "click", handler)
	host.remove_listener(button, "click", handler)
	button.click()
	assert calls == []
	assert button.listeners == {}
