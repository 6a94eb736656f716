"""Child classification shared by the element, component and fragment emitters."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from jsx_html.jsx import (
	JsxElement,
	JsxEmptyExpression,
	JsxExpression,
	JsxFragment,
	JsxNode,
	JsxText,
)
from jsx_html.nodes import ExprNode, HtmlTemplate

if TYPE_CHECKING:
	from jsx_html.compiler import Compiler


@dataclass(slots=True, frozen=True)
class TextItem:
	text: str


@dataclass(slots=True, frozen=True)
class ExprItem:
	expr: ExprNode


@dataclass(slots=True, frozen=True)
class TemplateItem:
	"""A nested element, already compiled."""

	template: HtmlTemplate


@dataclass(slots=True, frozen=True)
class FragmentItem:
	"""A nested fragment, flattened to its ordered values."""

	items: tuple[ExprNode, ...]


ChildItem: TypeAlias = TextItem | ExprItem | TemplateItem | FragmentItem


def process_children(children: Sequence[JsxNode], ctx: Compiler) -> list[ChildItem]:
	"""Classify children in order.

	Text is trimmed and dropped when empty, `{/* comments */}` are dropped,
	nested elements are compiled and nested fragments flattened.
	"""
	items: list[ChildItem] = []
	for child in children:
		match child:
			case JsxText(raw=raw):
				text = raw.strip()
				if text:
					items.append(TextItem(text))
			case JsxEmptyExpression():
				continue
			case JsxExpression(expr=expr):
				items.append(ExprItem(ctx.compile_expression(expr)))
			case JsxElement():
				items.append(TemplateItem(ctx.compile_element(child)))
			case JsxFragment():
				items.append(FragmentItem(tuple(ctx.flatten_fragment(child))))
			case _:  # pyright: ignore[reportUnnecessaryComparison]
				raise TypeError(f"Cannot process {type(child).__name__} as a JSX child")
	return items
