"""
Tests for component emission: <Card title="A" /> -> Card({"title": "A"}).
"""

from jsx_html.compiler import compile_jsx
from jsx_html.jsx import (
	JsxAttribute,
	JsxElement,
	JsxExpression,
	JsxFragment,
	JsxSpreadAttribute,
	JsxText,
)
from jsx_html.nodes import (
	Array,
	Call,
	HtmlTemplate,
	Identifier,
	Literal,
	Member,
	Object,
	Spread,
	emit,
)


def component_call(node: JsxElement) -> Call:
	value = compile_jsx(node).value
	assert isinstance(value, HtmlTemplate)
	assert len(value.parts) == 3
	assert value.literals == ["", ""]
	(call,) = value.expressions
	assert isinstance(call, Call)
	return call


def props_of(node: JsxElement) -> Object:
	call = component_call(node)
	assert call.callee == Identifier(node.tag)
	(props,) = call.args
	assert isinstance(props, Object)
	return props


class TestComponentCall:
	def test_static_prop(self):
		node = JsxElement("Card", [JsxAttribute("title", "A")], explicitly_closed=False)
		value = compile_jsx(node).value
		assert value == HtmlTemplate(
			["", Call(Identifier("Card"), [Object([("title", Literal("A"))])]), ""]
		)

	def test_no_markup_for_component_tag(self):
		node = JsxElement(
			"Card", [JsxAttribute("title", "A")], [JsxElement("p", children=[JsxText("x")])]
		)
		value = compile_jsx(node).value
		assert isinstance(value, HtmlTemplate)
		assert all("Card" not in p for p in value.literals)
		assert "<Card" not in emit(value)

	def test_no_props(self):
		assert props_of(JsxElement("Spacer")) == Object([])

	def test_emits_as_call(self):
		node = JsxElement("Card", [JsxAttribute("title", "A")])
		assert emit(compile_jsx(node).value) == 'html`${Card({"title": "A"})}`'


class TestProps:
	def test_prop_kinds(self):
		x = Identifier("x")
		node = JsxElement(
			"Button",
			[
				JsxAttribute("label", "Save"),
				JsxAttribute("onClick", x),
				JsxAttribute("primary"),
				JsxAttribute("outline", Literal(True)),
				JsxAttribute("disabled", Literal(False)),
			],
		)
		assert props_of(node) == Object(
			[
				("label", Literal("Save")),
				("onClick", x),
				("primary", Literal(True)),
				("outline", Literal(True)),
			]
		)

	def test_spreads_keep_source_position(self):
		rest, x = Identifier("rest"), Identifier("x")
		node = JsxElement(
			"Card",
			[
				JsxAttribute("a", "1"),
				JsxSpreadAttribute(rest),
				JsxAttribute("b", x),
			],
		)
		assert props_of(node) == Object(
			[("a", Literal("1")), Spread(rest), ("b", x)]
		)

	def test_class_name_is_not_renamed(self):
		node = JsxElement("Card", [JsxAttribute("className", "wide")])
		assert props_of(node) == Object([("className", Literal("wide"))])

	def test_dangerous_html_is_not_a_prop(self):
		node = JsxElement(
			"Card",
			[
				JsxAttribute(
					"dangerouslySetInnerHTML", Object([("__html", Identifier("raw"))])
				)
			],
		)
		assert props_of(node) == Object([])

	def test_member_access_in_props(self):
		product = Identifier("product")
		node = JsxElement(
			"Card",
			[
				JsxAttribute("key", Member(product, "id")),
				JsxAttribute("title", Member(product, "name")),
			],
		)
		assert emit(props_of(node)) == '{"key": product.id, "title": product.name}'


class TestChildren:
	def test_single_text_child(self):
		node = JsxElement("Button", children=[JsxText("  Click  ")])
		assert props_of(node) == Object([("children", Literal("Click"))])

	def test_single_expression_child(self):
		x = Identifier("x")
		node = JsxElement("Button", children=[JsxExpression(x)])
		assert props_of(node) == Object([("children", x)])

	def test_multiple_children_become_list(self):
		x = Identifier("x")
		node = JsxElement(
			"Layout",
			[JsxAttribute("title", "T")],
			[JsxText("a"), JsxExpression(x), JsxElement("hr")],
		)
		assert props_of(node) == Object(
			[
				("title", Literal("T")),
				(
					"children",
					Array([Literal("a"), x, HtmlTemplate(["<hr />"])]),
				),
			]
		)

	def test_whitespace_children_are_dropped(self):
		node = JsxElement("Button", children=[JsxText("\n   ")])
		assert props_of(node) == Object([])

	def test_nested_component_child(self):
		node = JsxElement("Outer", children=[JsxElement("Inner")])
		inner = HtmlTemplate(["", Call(Identifier("Inner"), [Object([])]), ""])
		assert props_of(node) == Object([("children", inner)])

	def test_multi_item_fragment_child_has_no_markers(self):
		x, y = Identifier("x"), Identifier("y")
		node = JsxElement(
			"List", children=[JsxFragment([JsxExpression(x), JsxExpression(y)])]
		)
		props = props_of(node)
		assert props == Object([("children", Array([x, y]))])
		assert "Fragment" not in emit(props)

	def test_single_item_fragment_child(self):
		x = Identifier("x")
		node = JsxElement("List", children=[JsxFragment([JsxExpression(x)])])
		assert props_of(node) == Object([("children", x)])

	def test_fragment_alongside_other_children(self):
		x, y = Identifier("x"), Identifier("y")
		node = JsxElement(
			"List",
			children=[
				JsxText("head"),
				JsxFragment([JsxExpression(x), JsxExpression(y)]),
			],
		)
		assert props_of(node) == Object(
			[("children", Array([Literal("head"), Array([x, y])]))]
		)
