"""Reference runtime for compiled templates.

Implements the three helpers compiled output calls (html, unsafeHTML,
spreadAttrs) on top of MarkupSafe, and a small evaluator that renders
compiled values against a scope of Python values. Components are looked up
in the scope by name and called with a props dict; they should return
Markup (e.g. the result of `render`) so their output is not escaped again.
"""

from __future__ import annotations

import math
from collections import ChainMap
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from markupsafe import Markup, escape

from jsx_html.config import CompilerOptions, default_options
from jsx_html.errors import RenderError
from jsx_html.nodes import (
	Array,
	Arrow,
	Binary,
	Call,
	ExprNode,
	HtmlTemplate,
	Identifier,
	Jsx,
	Literal,
	Member,
	Object,
	Spread,
	Subscript,
	Template,
	Ternary,
	Unary,
	Undefined,
)

# =============================================================================
# Helpers
# =============================================================================


def html(strings: Sequence[str], *values: Any) -> Markup:
	"""Tag function: join literal markup with escaped values."""
	out: list[str] = []
	for i, s in enumerate(strings):
		out.append(s)
		if i < len(values):
			out.append(to_html(values[i]))
	return Markup("".join(out))


def unsafe_html(value: Any) -> Markup:
	"""Mark a value as trusted markup so `html` inserts it unescaped."""
	if value is None or value is False:
		return Markup("")
	if hasattr(value, "__html__"):
		return Markup(value)
	return Markup(str(value))


def spread_attrs(attrs: Mapping[str, Any]) -> str:
	"""Render merged attributes: ` key` for true, ` key="value"` otherwise.

	null/undefined/false entries are skipped. Every rendered pair carries its
	leading space, so nothing at all is rendered when every entry is skipped.
	Values are escaped here and the result is wrapped in unsafeHTML by
	compiled output.
	"""
	pairs: list[str] = []
	for key, value in attrs.items():
		if value is None or value is False:
			continue
		if value is True:
			pairs.append(key)
		else:
			pairs.append(f'{key}="{escape(_js_string(value))}"')
	return "".join(f" {pair}" for pair in pairs)


def to_html(value: Any) -> str:
	"""Convert a value to markup the way the html tag inserts it."""
	if value is None or isinstance(value, bool):
		return ""
	if hasattr(value, "__html__"):
		return value.__html__()
	if isinstance(value, (list, tuple)):
		return "".join(to_html(v) for v in value)  # pyright: ignore[reportUnknownVariableType]
	return str(escape(_js_string(value)))


# =============================================================================
# Evaluator
# =============================================================================


class Evaluator:
	"""Evaluates compiled expression nodes against a scope."""

	__slots__: tuple[str, ...] = ("scope",)
	scope: ChainMap[str, Any]

	def __init__(
		self,
		scope: Mapping[str, Any] | None = None,
		options: CompilerOptions | None = None,
		*,
		_chain: ChainMap[str, Any] | None = None,
	) -> None:
		if _chain is not None:
			self.scope = _chain
			return
		options = options if options is not None else default_options()
		helpers: dict[str, Callable[..., Any]] = {
			options.html_tag: html,
			options.unsafe_html: unsafe_html,
			options.spread_attrs: spread_attrs,
		}
		self.scope = ChainMap(dict(scope or {}), helpers)

	def child(self, bindings: Mapping[str, Any]) -> Evaluator:
		return Evaluator(_chain=self.scope.new_child(dict(bindings)))

	def eval(self, node: ExprNode) -> Any:
		match node:
			case Literal(value=value):
				return value
			case Undefined():
				return None
			case Identifier(name=name):
				if name not in self.scope:
					raise RenderError(f"'{name}' is not defined")
				return self.scope[name]
			case HtmlTemplate(parts=parts, tag=tag):
				tag_fn = self._callable(self.eval(Identifier(tag)), tag)
				strings = [p for p in parts[::2] if isinstance(p, str)]
				values = [self.eval(p) for p in parts[1::2] if isinstance(p, ExprNode)]
				return tag_fn(strings, *values)
			case Template(parts=parts):
				return "".join(
					p if isinstance(p, str) else _js_string(self.eval(p)) for p in parts
				)
			case Array(elements=elements):
				items: list[Any] = []
				for e in elements:
					if isinstance(e, Spread):
						items.extend(self.eval(e.expr) or ())
					else:
						items.append(self.eval(e))
				return items
			case Object(props=props):
				obj: dict[str, Any] = {}
				for entry in props:
					if isinstance(entry, Spread):
						spread = self.eval(entry.expr)
						if spread is not None:
							if not isinstance(spread, Mapping):
								raise RenderError(
									f"Cannot spread {type(spread).__name__} into an object"
								)
							obj.update(spread)  # pyright: ignore[reportUnknownArgumentType]
					else:
						obj[entry[0]] = self.eval(entry[1])
				return obj
			case Member(obj=obj_node, prop=prop):
				return _get(self.eval(obj_node), prop)
			case Subscript(obj=obj_node, key=key):
				return _get(self.eval(obj_node), self.eval(key))
			case Call(callee=callee, args=args):
				fn = self._callable(self.eval(callee), _describe(callee))
				return fn(*[self.eval(a) for a in args])
			case Unary(op="!", operand=operand):
				return not _truthy(self.eval(operand))
			case Unary(op="-", operand=operand):
				return -self.eval(operand)
			case Binary(left=left, op=op, right=right):
				return self._binary(left, op, right)
			case Ternary(cond=cond, then=then, else_=else_):
				return self.eval(then) if _truthy(self.eval(cond)) else self.eval(else_)
			case Arrow(params=params, body=body):
				return self._arrow(params, body)
			case Jsx():
				raise RenderError("Cannot render uncompiled JSX")
			case _:
				raise RenderError(f"Cannot evaluate {type(node).__name__}")

	def _binary(self, left: ExprNode, op: str, right: ExprNode) -> Any:
		lhs = self.eval(left)
		if op == "&&":
			return self.eval(right) if _truthy(lhs) else lhs
		if op == "||":
			return lhs if _truthy(lhs) else self.eval(right)
		if op == "??":
			return self.eval(right) if lhs is None else lhs
		rhs = self.eval(right)
		if op == "===":
			return lhs == rhs
		if op == "!==":
			return lhs != rhs
		# "+": string concatenation as soon as either side is a string
		if isinstance(lhs, str) or isinstance(rhs, str):
			return _js_string(lhs) + _js_string(rhs)
		return lhs + rhs

	def _arrow(self, params: Sequence[str], body: ExprNode) -> Callable[..., Any]:
		def fn(*args: Any) -> Any:
			bindings = {p: args[i] if i < len(args) else None for i, p in enumerate(params)}
			return self.child(bindings).eval(body)

		return fn

	def _callable(self, value: Any, label: str) -> Callable[..., Any]:
		if not callable(value):
			raise RenderError(f"'{label}' is not a function")
		return value


def render(
	value: ExprNode,
	scope: Mapping[str, Any] | None = None,
	options: CompilerOptions | None = None,
) -> Markup:
	"""Render a compiled value to an HTML string."""
	return Markup(to_html(Evaluator(scope, options).eval(value)))


def _get(obj: Any, key: Any) -> Any:
	if obj is None:
		raise RenderError(f"Cannot read properties of null (reading {key!r})")
	if isinstance(obj, Mapping):
		return obj.get(key)  # pyright: ignore[reportUnknownMemberType]
	if isinstance(obj, (list, tuple, str)) and isinstance(key, int):
		return obj[key] if 0 <= key < len(obj) else None  # pyright: ignore[reportUnknownVariableType]
	if isinstance(key, str):
		return getattr(obj, key, None)
	raise RenderError(f"Cannot read {key!r} of {type(obj).__name__}")


def _truthy(value: Any) -> bool:
	if value is None or value is False:
		return False
	if isinstance(value, (int, float)):
		return value != 0 and not math.isnan(value)
	if isinstance(value, str):
		return value != ""
	return True


def _js_string(value: Any) -> str:
	if value is None:
		return "null"
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return str(value)


def _describe(node: ExprNode) -> str:
	if isinstance(node, Identifier):
		return node.name
	if isinstance(node, Member):
		return f"{_describe(node.obj)}.{node.prop}"
	return type(node).__name__
