"""Attribute classification for opening tags."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from jsx_html.config import CompilerOptions
from jsx_html.jsx import JsxAttribute, JsxSpreadAttribute, RawAttribute
from jsx_html.nodes import ExprNode, Literal, Object

logger = logging.getLogger(__name__)

DANGEROUS_HTML_KEY = "__html"


@dataclass(slots=True, frozen=True)
class StaticAttr:
	"""name="value" from a string literal. The value is kept verbatim."""

	name: str
	value: str


@dataclass(slots=True, frozen=True)
class DynamicAttr:
	name: str
	expr: ExprNode


@dataclass(slots=True, frozen=True)
class BooleanAttr:
	"""Bare attribute or {true}. Statically false attributes never get here."""

	name: str
	present: bool = True


@dataclass(slots=True, frozen=True)
class SpreadAttr:
	expr: ExprNode


Attr: TypeAlias = StaticAttr | DynamicAttr | BooleanAttr | SpreadAttr


@dataclass(slots=True, frozen=True)
class ClassifiedAttributes:
	attrs: tuple[Attr, ...] = ()
	dangerous_html: ExprNode | None = None

	@property
	def has_spread(self) -> bool:
		return any(isinstance(a, SpreadAttr) for a in self.attrs)


def classify_attributes(
	raw: Sequence[RawAttribute],
	options: CompilerOptions,
	*,
	host: bool,
) -> ClassifiedAttributes:
	"""Classify the attributes of one opening tag, preserving source order.

	The dangerous-HTML attribute is pulled out into `dangerous_html` and never
	appears in `attrs`. On host elements the class-name alias is renamed to
	`class`; component props keep their names.
	"""
	attrs: list[Attr] = []
	dangerous_html: ExprNode | None = None

	for attr in raw:
		if isinstance(attr, JsxSpreadAttribute):
			attrs.append(SpreadAttr(attr.expr))
			continue
		if not isinstance(attr, JsxAttribute):  # pyright: ignore[reportUnnecessaryIsInstance]
			raise TypeError(f"Cannot classify {type(attr).__name__} as an attribute")

		if attr.name == options.dangerous_html_prop:
			payload = _dangerous_html_payload(attr.value)
			if payload is None:
				logger.debug(
					"Dropping %s: value is not an object literal with %r",
					attr.name,
					DANGEROUS_HTML_KEY,
				)
			elif dangerous_html is None:
				dangerous_html = payload
			continue

		name = attr.name
		if host and name == options.class_name_prop:
			name = "class"

		classified = _classify_value(name, attr.value)
		if classified is not None:
			attrs.append(classified)

	return ClassifiedAttributes(tuple(attrs), dangerous_html)


def _classify_value(name: str, value: str | ExprNode | None) -> Attr | None:
	if value is None:
		return BooleanAttr(name, True)
	if isinstance(value, str):
		return StaticAttr(name, value)
	if isinstance(value, Literal) and isinstance(value.value, bool):
		if value.value:
			return BooleanAttr(name, True)
		return None
	return DynamicAttr(name, value)


def _dangerous_html_payload(value: str | ExprNode | None) -> ExprNode | None:
	if not isinstance(value, Object):
		return None
	return value.get(DANGEROUS_HTML_KEY)
