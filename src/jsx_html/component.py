"""Component emission: <Card title="A">...</Card> -> Card({...})."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsx_html.attributes import (
	BooleanAttr,
	DynamicAttr,
	SpreadAttr,
	StaticAttr,
	classify_attributes,
)
from jsx_html.children import (
	ExprItem,
	FragmentItem,
	TemplateItem,
	TextItem,
	process_children,
)
from jsx_html.jsx import JsxElement
from jsx_html.nodes import (
	Array,
	Call,
	ExprNode,
	HtmlTemplate,
	Identifier,
	Literal,
	Object,
	ObjectEntry,
	Spread,
)

if TYPE_CHECKING:
	from jsx_html.compiler import Compiler


def emit_component(node: JsxElement, ctx: Compiler) -> HtmlTemplate:
	"""Compile a component to a template holding a single call expression.

	The tag is called by name with one props object. Props keep source
	order, spreads included, so later entries win. Children go to
	`children`: one value directly, several as a list.
	"""
	out = ctx.builder()
	out.expr(Call(Identifier(node.tag), [build_props(node, ctx)]))
	return out.finish()


def build_props(node: JsxElement, ctx: Compiler) -> Object:
	classified = classify_attributes(node.attributes, ctx.options, host=False)
	props: list[ObjectEntry] = []
	for attr in classified.attrs:
		match attr:
			case StaticAttr(name=name, value=value):
				props.append((name, Literal(value)))
			case DynamicAttr(name=name, expr=expr):
				props.append((name, ctx.compile_expression(expr)))
			case BooleanAttr(name=name):
				props.append((name, Literal(True)))
			case SpreadAttr(expr=expr):
				props.append(Spread(ctx.compile_expression(expr)))

	children = _children_values(node, ctx)
	if len(children) == 1:
		props.append(("children", children[0]))
	elif children:
		props.append(("children", Array(children)))
	return Object(props)


def _children_values(node: JsxElement, ctx: Compiler) -> list[ExprNode]:
	values: list[ExprNode] = []
	for item in process_children(node.children, ctx):
		match item:
			case TextItem(text=text):
				values.append(Literal(text))
			case ExprItem(expr=expr):
				values.append(expr)
			case TemplateItem(template=template):
				values.append(template)
			case FragmentItem(items=items):
				# Same flattening as host elements, without comment markers
				if len(items) == 1:
					values.append(items[0])
				elif items:
					values.append(Array(list(items)))
	return values
