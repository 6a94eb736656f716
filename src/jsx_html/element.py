"""Host element emission: <div>, <my-widget>, <img />."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jsx_html.attributes import (
	BooleanAttr,
	ClassifiedAttributes,
	DynamicAttr,
	SpreadAttr,
	StaticAttr,
	classify_attributes,
)
from jsx_html.builder import TemplateBuilder
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
	HtmlTemplate,
	Literal,
	Object,
	ObjectEntry,
	Spread,
)

if TYPE_CHECKING:
	from jsx_html.compiler import Compiler

logger = logging.getLogger(__name__)


def emit_element(node: JsxElement, ctx: Compiler) -> HtmlTemplate:
	"""Compile a host element to a template.

	Markup is emitted as literal text and never escaped at compile time.
	Dynamic attribute values and expression children become expression
	parts, escaped by the html tag at render time.
	"""
	options = ctx.options
	tag = node.tag
	self_closing = options.is_self_closing(tag) or not node.explicitly_closed
	classified = classify_attributes(node.attributes, options, host=True)

	out = ctx.builder()
	out.text("<")
	out.text(tag)
	if classified.has_spread:
		_emit_spread_attributes(classified, out, ctx)
	else:
		_emit_attributes(classified, out, ctx)

	if self_closing:
		if node.children:
			logger.warning(
				"<%s> is self-closing; dropping %d child node(s)",
				tag,
				len(node.children),
			)
		if classified.dangerous_html is not None:
			logger.warning(
				"<%s> is self-closing; dropping %s",
				tag,
				options.dangerous_html_prop,
			)
		out.text(" />")
		return out.finish()
	out.text(">")

	if classified.dangerous_html is not None:
		payload = ctx.compile_expression(classified.dangerous_html)
		out.expr(Call(ctx.helper(options.unsafe_html), [payload]))
	else:
		_emit_children(node, out, ctx)

	out.text("</")
	out.text(tag)
	out.text(">")
	return out.finish()


def _emit_attributes(
	classified: ClassifiedAttributes, out: TemplateBuilder, ctx: Compiler
) -> None:
	for attr in classified.attrs:
		match attr:
			case BooleanAttr(name=name):
				out.text(" ")
				out.text(name)
			case StaticAttr(name=name, value=value):
				out.text(" ")
				out.text(name)
				out.text('="')
				out.text(value)
				out.text('"')
			case DynamicAttr(name=name, expr=expr):
				out.text(" ")
				out.text(name)
				out.text('="')
				out.expr(ctx.compile_expression(expr))
				out.text('"')
			case SpreadAttr():
				raise AssertionError("spread attributes take the merged path")


def _emit_spread_attributes(
	classified: ClassifiedAttributes, out: TemplateBuilder, ctx: Compiler
) -> None:
	"""Emit all attributes as one merged, runtime-rendered expression.

	Named attributes form the base object and every spread is merged over
	it left to right: unsafeHTML(spreadAttrs({...named, ...a, ...b})).
	"""
	options = ctx.options
	named: list[ObjectEntry] = []
	spreads: list[ObjectEntry] = []
	for attr in classified.attrs:
		match attr:
			case BooleanAttr(name=name):
				named.append((name, Literal(True)))
			case StaticAttr(name=name, value=value):
				named.append((name, Literal(value)))
			case DynamicAttr(name=name, expr=expr):
				named.append((name, ctx.compile_expression(expr)))
			case SpreadAttr(expr=expr):
				spreads.append(Spread(ctx.compile_expression(expr)))

	joined = Call(ctx.helper(options.spread_attrs), [Object(named + spreads)])
	out.expr(Call(ctx.helper(options.unsafe_html), [joined]))


def _emit_children(node: JsxElement, out: TemplateBuilder, ctx: Compiler) -> None:
	options = ctx.options
	for item in process_children(node.children, ctx):
		match item:
			case TextItem(text=text):
				out.text(text)
			case ExprItem(expr=expr):
				out.expr(expr)
			case TemplateItem(template=template):
				out.expr(template)
			case FragmentItem(items=items):
				if not items:
					continue
				if len(items) == 1:
					out.expr(items[0])
					continue
				# Multi-item fragments are bracketed by comment markers
				out.text(options.fragment_start)
				out.expr(Array(list(items)))
				out.text(options.fragment_end)
