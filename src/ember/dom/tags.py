from collections.abc import Callable
from typing import Any, Protocol

from ember.nodes import Element, create_element


class Tag(Protocol):
	def __call__(self, *children: Any, key: Any = None, **props: Any) -> Element: ...


class SelfClosingTag(Protocol):
	def __call__(self, *, key: Any = None, **props: Any) -> Element: ...


def define_tag(name: str, default_props: dict[str, Any] | None = None) -> Tag:
	"""Define a helper that builds `Element`s for the host tag ``name``.

	Args:
		name: The tag name (e.g., "div", "span")
		default_props: Default props applied to every element of this tag

	Returns:
		A function ``tag(*children, key=None, **props)``
	"""

	def tag(*children: Any, key: Any = None, **props: Any) -> Element:
		if default_props:
			props = default_props | props
		if key is not None:
			props["key"] = key
		return create_element(name, props or None, *children)

	tag.__name__ = name
	return tag


def define_self_closing_tag(
	name: str, default_props: dict[str, Any] | None = None
) -> SelfClosingTag:
	"""Define a helper for a void tag such as "br" or "input" (no children)."""

	def tag(*, key: Any = None, **props: Any) -> Element:
		if default_props:
			props = default_props | props
		if key is not None:
			props["key"] = key
		return create_element(name, props or None)

	tag.__name__ = name
	return tag


a = define_tag("a")
article = define_tag("article")
b = define_tag("b")
button = define_tag("button")
code = define_tag("code")
div = define_tag("div")
em = define_tag("em")
footer = define_tag("footer")
form = define_tag("form")
h1 = define_tag("h1")
h2 = define_tag("h2")
h3 = define_tag("h3")
header = define_tag("header")
label = define_tag("label")
li = define_tag("li")
main = define_tag("main")
nav = define_tag("nav")
ol = define_tag("ol")
option = define_tag("option")
p = define_tag("p")
pre = define_tag("pre")
section = define_tag("section")
select = define_tag("select")
span = define_tag("span")
strong = define_tag("strong")
table = define_tag("table")
tbody = define_tag("tbody")
td = define_tag("td")
textarea = define_tag("textarea")
th = define_tag("th")
thead = define_tag("thead")
tr = define_tag("tr")
ul = define_tag("ul")

br = define_self_closing_tag("br")
hr = define_self_closing_tag("hr")
img = define_self_closing_tag("img")
input_ = define_self_closing_tag("input")

TAGS: dict[str, Callable[..., Element]] = {
	"a": a,
	"article": article,
	"b": b,
	"button": button,
	"code": code,
	"div": div,
	"em": em,
	"footer": footer,
	"form": form,
	"h1": h1,
	"h2": h2,
	"h3": h3,
	"header": header,
	"label": label,
	"li": li,
	"main": main,
	"nav": nav,
	"ol": ol,
	"option": option,
	"p": p,
	"pre": pre,
	"section": section,
	"select": select,
	"span": span,
	"strong": strong,
	"table": table,
	"tbody": tbody,
	"td": td,
	"textarea": textarea,
	"th": th,
	"thead": thead,
	"tr": tr,
	"ul": ul,
	"br": br,
	"hr": hr,
	"img": img,
	"input": input_,
}

__all__ = [
	"TAGS",
	"SelfClosingTag",
	"Tag",
	"define_self_closing_tag",
	"define_tag",
	*(name if name != "input" else "input_" for name in TAGS),
]
