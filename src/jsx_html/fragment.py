"""Bare fragment flattening: <>a<b /></>."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsx_html.children import (
	ExprItem,
	FragmentItem,
	TemplateItem,
	TextItem,
	process_children,
)
from jsx_html.jsx import JsxFragment
from jsx_html.nodes import Array, ExprNode

if TYPE_CHECKING:
	from jsx_html.compiler import Compiler


def flatten_fragment(node: JsxFragment, ctx: Compiler) -> list[ExprNode]:
	"""Flatten a fragment to its ordered values.

	Text becomes a one-part template, expressions pass through, elements
	are compiled and nested fragments are spliced in place.
	"""
	values: list[ExprNode] = []
	for item in process_children(node.children, ctx):
		match item:
			case TextItem(text=text):
				values.append(ctx.text_template(text))
			case ExprItem(expr=expr):
				values.append(expr)
			case TemplateItem(template=template):
				values.append(template)
			case FragmentItem(items=items):
				values.extend(items)
	return values


def emit_fragment(node: JsxFragment, ctx: Compiler) -> ExprNode:
	"""Compile a fragment to a single value.

	No items gives an explicit empty list, one item is returned unwrapped,
	anything else is the ordered list.
	"""
	if not isinstance(node, JsxFragment):  # pyright: ignore[reportUnnecessaryIsInstance]
		raise TypeError(f"Expected a JsxFragment, got {type(node).__name__}")
	values = flatten_fragment(node, ctx)
	if len(values) == 1:
		return values[0]
	return Array(values)
