"""Input JSX tree.

Trees are produced by an external parser and never mutated by the compiler.
The node set is closed: element, fragment, text, expression container and
the empty `{/* comment */}` container.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from jsx_html.nodes import ExprNode


@dataclass(slots=True, frozen=True)
class JsxAttribute:
	"""A named attribute on an opening tag.

	value is None for a bare attribute (`<input disabled>`), a str for a
	string literal (`type="text"`) and an ExprNode for an expression
	container (`id={x}`).
	"""

	name: str
	value: str | ExprNode | None = None


@dataclass(slots=True, frozen=True)
class JsxSpreadAttribute:
	"""A spread attribute: {...expr}"""

	expr: ExprNode


RawAttribute: TypeAlias = JsxAttribute | JsxSpreadAttribute


@dataclass(slots=True, frozen=True)
class JsxElement:
	"""<tag attr={...}>children</tag>

	explicitly_closed is False for `<tag />` in the source.
	"""

	tag: str
	attributes: Sequence[RawAttribute] = field(default_factory=tuple)
	children: Sequence[JsxNode] = field(default_factory=tuple)
	explicitly_closed: bool = True


@dataclass(slots=True, frozen=True)
class JsxFragment:
	"""<>children</>"""

	children: Sequence[JsxNode] = field(default_factory=tuple)


@dataclass(slots=True, frozen=True)
class JsxText:
	raw: str


@dataclass(slots=True, frozen=True)
class JsxExpression:
	"""{expr} in child position."""

	expr: ExprNode


@dataclass(slots=True, frozen=True)
class JsxEmptyExpression:
	"""{/* comment */}: always dropped."""


JsxNode: TypeAlias = (
	JsxElement | JsxFragment | JsxText | JsxExpression | JsxEmptyExpression
)
