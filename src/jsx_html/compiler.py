"""JSX tree -> html template compiler.

Compiles a JSX tree into HtmlTemplate values: literal markup interleaved with
embedded expressions, rendered to a string at runtime by the html tag. No
virtual DOM is involved.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, Literal

from jsx_html.builder import TemplateBuilder, empty_template, text_template
from jsx_html.component import emit_component
from jsx_html.config import CompilerOptions, default_options
from jsx_html.element import emit_element
from jsx_html.fragment import emit_fragment, flatten_fragment
from jsx_html.jsx import (
	JsxElement,
	JsxEmptyExpression,
	JsxExpression,
	JsxFragment,
	JsxNode,
	JsxText,
)
from jsx_html.nodes import ExprNode, HtmlTemplate, Identifier, Jsx

logger = logging.getLogger(__name__)

TagKind = Literal["host", "component", "unsupported"]

# div, my_tag, my-widget, font-Face
_HOST_TAG = re.compile(
	r"^(?:[a-z][A-Za-z0-9_$]*|[A-Za-z][A-Za-z0-9_$]*(?:-[A-Za-z0-9_$]+)+)$"
)
# Card, MyButton2
_COMPONENT_TAG = re.compile(r"^[A-Z][A-Za-z0-9_$]*$")


def tag_kind(tag: str) -> TagKind:
	"""Classify a tag name.

	Lowercase or hyphenated names are host elements, capitalized identifiers
	are components. Anything else (`motion.div`, `svg:rect`) is unsupported.
	"""
	if _HOST_TAG.match(tag):
		return "host"
	if _COMPONENT_TAG.match(tag):
		return "component"
	return "unsupported"


@dataclass(slots=True, frozen=True)
class CompileResult:
	"""Compiled value plus the runtime helper names it references."""

	value: ExprNode
	helpers: frozenset[str] = frozenset()

	def merge(self, other: CompileResult) -> frozenset[str]:
		return self.helpers | other.helpers


def merge_helpers(results: Iterable[CompileResult]) -> frozenset[str]:
	"""Union of the helpers used across several compiled trees."""
	helpers: set[str] = set()
	for result in results:
		helpers |= result.helpers
	return frozenset(helpers)


class Compiler:
	"""State for one top-level compile call.

	Emitters receive the compiler as `ctx` and call back into it for nested
	nodes. `helpers` records which runtime helpers the output references.
	"""

	__slots__: tuple[str, ...] = ("options", "helpers")
	options: CompilerOptions
	helpers: set[str]

	def __init__(self, options: CompilerOptions | None = None) -> None:
		self.options = options if options is not None else default_options()
		self.helpers = set()

	def result(self, value: ExprNode) -> CompileResult:
		return CompileResult(value, frozenset(self.helpers))

	# --- Helpers ------------------------------------------------------------

	def helper(self, name: str) -> Identifier:
		self.helpers.add(name)
		return Identifier(name)

	def builder(self) -> TemplateBuilder:
		self.helpers.add(self.options.html_tag)
		return TemplateBuilder(self.options.html_tag)

	def text_template(self, text: str) -> HtmlTemplate:
		self.helpers.add(self.options.html_tag)
		return text_template(text, self.options.html_tag)

	def empty_template(self) -> HtmlTemplate:
		self.helpers.add(self.options.html_tag)
		return empty_template(self.options.html_tag)

	# --- Dispatch -----------------------------------------------------------

	def compile(self, node: JsxNode) -> ExprNode:
		match node:
			case JsxElement():
				return self.compile_element(node)
			case JsxFragment():
				return self.compile_fragment(node)
			case JsxText(raw=raw):
				return self.text_template(raw.strip())
			case JsxExpression(expr=expr):
				return self.compile_expression(expr)
			case JsxEmptyExpression():
				return self.empty_template()
			case _:  # pyright: ignore[reportUnnecessaryComparison]
				raise TypeError(f"Cannot compile {type(node).__name__} as JSX")

	def compile_element(self, node: JsxElement) -> HtmlTemplate:
		kind = tag_kind(node.tag)
		if kind == "host":
			return emit_element(node, self)
		if kind == "component":
			return emit_component(node, self)
		logger.warning("Unsupported tag name <%s>; emitting an empty template", node.tag)
		return self.empty_template()

	def compile_fragment(self, node: JsxFragment) -> ExprNode:
		return emit_fragment(node, self)

	def flatten_fragment(self, node: JsxFragment) -> list[ExprNode]:
		return flatten_fragment(node, self)

	def compile_expression(self, expr: ExprNode) -> ExprNode:
		"""Replace JSX nested inside an expression with its compiled value.

		Expressions without JSX are returned as-is (same object).
		"""
		return self._rewrite(expr)

	def _rewrite(self, value: Any) -> Any:
		if isinstance(value, Jsx):
			return self.compile(value.node)
		if isinstance(value, ExprNode):
			if not is_dataclass(value):
				return value
			changes: dict[str, Any] = {}
			for f in fields(value):
				old = getattr(value, f.name)
				new = self._rewrite(old)
				if new is not old:
					changes[f.name] = new
			return replace(value, **changes) if changes else value
		if isinstance(value, (list, tuple)):
			items = [self._rewrite(v) for v in value]  # pyright: ignore[reportUnknownVariableType]
			if all(n is o for n, o in zip(items, value)):  # pyright: ignore[reportUnknownArgumentType]
				return value
			return tuple(items) if isinstance(value, tuple) else items
		return value


# =============================================================================
# Entry points
# =============================================================================


def compile_jsx(node: JsxNode, options: CompilerOptions | None = None) -> CompileResult:
	"""Compile one top-level JSX node.

	Elements and components compile to an HtmlTemplate, fragments to their
	flattened value, expression containers to the (rewritten) expression.
	"""
	ctx = Compiler(options)
	return ctx.result(ctx.compile(node))


def compile_fragment(
	node: JsxFragment, options: CompilerOptions | None = None
) -> CompileResult:
	"""Compile a bare fragment. Raises TypeError for any other node."""
	if not isinstance(node, JsxFragment):  # pyright: ignore[reportUnnecessaryIsInstance]
		raise TypeError(f"compile_fragment() expects a JsxFragment, got {type(node).__name__}")
	ctx = Compiler(options)
	return ctx.result(ctx.compile_fragment(node))


def compile_expression(
	expr: ExprNode, options: CompilerOptions | None = None
) -> CompileResult:
	"""Compile JSX embedded anywhere inside an expression."""
	ctx = Compiler(options)
	return ctx.result(ctx.compile_expression(expr))
