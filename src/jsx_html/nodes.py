"""Expression nodes for compiled JSX output.

Expression handles embedded in a JSX tree and everything the compiler
produces are ExprNode instances. `HtmlTemplate` is the compiled template:
alternating literal strings and embedded expressions, emitted as a tagged
template literal (html`...`).

The operator set is the one compiled output needs and the reference
runtime evaluates: `!` and unary `-`, `+`, strict (in)equality and the
logical operators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias, override

if TYPE_CHECKING:
	from jsx_html.jsx import JsxNode

# Binding strength, higher binds tighter
PRIMARY = 20
UNARY = 17
TERNARY = 4
ARROW = 3

UNARY_OPERATORS: frozenset[str] = frozenset({"!", "-"})
BINARY_OPERATORS: dict[str, int] = {
	"+": 14,
	"===": 12,
	"!==": 12,
	"&&": 7,
	"||": 6,
	"??": 6,
}
# `??` cannot share an unparenthesized operand with `&&` or `||`
_NULLISH_EXCLUSIVE = frozenset({"&&", "||"})


# =============================================================================
# Base classes
# =============================================================================
class Node(ABC):
	"""Base class for all output nodes."""

	__slots__: tuple[str, ...] = ()

	@abstractmethod
	def emit(self, out: list[str]) -> None:
		"""Emit this node as JavaScript code into the output buffer."""


class ExprNode(Node, ABC):
	"""Base class for expression nodes."""

	__slots__: tuple[str, ...] = ()

	def precedence(self) -> int:
		return PRIMARY


# =============================================================================
# Values
# =============================================================================


@dataclass(slots=True)
class Identifier(ExprNode):
	"""JS identifier: x, foo, myFunc"""

	name: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)


@dataclass(slots=True)
class Literal(ExprNode):
	"""JS literal: 42, "hello", true, null"""

	value: int | float | str | bool | None

	@override
	def precedence(self) -> int:
		# -1 is emitted with its sign and binds like a unary minus
		value = self.value
		if isinstance(value, (int, float)) and not isinstance(value, bool) and value < 0:
			return UNARY
		return PRIMARY

	@override
	def emit(self, out: list[str]) -> None:
		if self.value is None:
			out.append("null")
		elif isinstance(self.value, bool):
			out.append("true" if self.value else "false")
		elif isinstance(self.value, str):
			out.append(_string(self.value))
		else:
			out.append(str(self.value))


class Undefined(ExprNode):
	"""JS undefined literal.

	Literal(None) emits `null`.
	"""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str]) -> None:
		out.append("undefined")

	@override
	def __eq__(self, other: object) -> bool:
		return isinstance(other, Undefined)

	@override
	def __hash__(self) -> int:
		return hash(Undefined)


UNDEFINED = Undefined()


@dataclass(slots=True)
class Array(ExprNode):
	"""JS array: [a, b, c]. Fragment values and multi-child props."""

	elements: Sequence[ExprNode]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("[")
		_emit_list(self.elements, out)
		out.append("]")


ObjectEntry: TypeAlias = "tuple[str, ExprNode] | Spread"


@dataclass(slots=True)
class Object(ExprNode):
	"""JS object: { key: value, ...rest }

	Entries keep source order. A Spread entry merges its object at that
	position, so later entries override earlier ones on key collision.
	"""

	props: Sequence[ObjectEntry]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{")
		for i, entry in enumerate(self.props):
			if i:
				out.append(", ")
			if isinstance(entry, Spread):
				entry.emit(out)
			else:
				out.append(_string(entry[0]))
				out.append(": ")
				entry[1].emit(out)
		out.append("}")

	def get(self, key: str) -> ExprNode | None:
		"""Return the first value stored under `key`, ignoring spreads."""
		for entry in self.props:
			if isinstance(entry, Spread):
				continue
			if entry[0] == key:
				return entry[1]
		return None


@dataclass(slots=True)
class Spread(ExprNode):
	"""JS spread: ...expr"""

	expr: ExprNode

	@override
	def emit(self, out: list[str]) -> None:
		out.append("...")
		self.expr.emit(out)


# =============================================================================
# Access and calls
# =============================================================================


@dataclass(slots=True)
class Member(ExprNode):
	"""Property access: product.name"""

	obj: ExprNode
	prop: str

	@override
	def emit(self, out: list[str]) -> None:
		_emit_operand(self.obj, out, self.obj.precedence() < PRIMARY)
		out.append(f".{self.prop}")


@dataclass(slots=True)
class Subscript(ExprNode):
	"""Computed access: items[i]"""

	obj: ExprNode
	key: ExprNode

	@override
	def emit(self, out: list[str]) -> None:
		_emit_operand(self.obj, out, self.obj.precedence() < PRIMARY)
		out.append("[")
		self.key.emit(out)
		out.append("]")


@dataclass(slots=True)
class Call(ExprNode):
	"""Call: Card({...}), items.map(fn), unsafeHTML(raw)"""

	callee: ExprNode
	args: Sequence[ExprNode]

	@override
	def emit(self, out: list[str]) -> None:
		_emit_operand(self.callee, out, self.callee.precedence() < PRIMARY)
		out.append("(")
		_emit_list(self.args, out)
		out.append(")")


# =============================================================================
# Operators
# =============================================================================


@dataclass(slots=True)
class Unary(ExprNode):
	"""Prefix operator: !x, -x"""

	op: str
	operand: ExprNode

	def __post_init__(self) -> None:
		if self.op not in UNARY_OPERATORS:
			raise TypeError(f"Unsupported unary operator {self.op!r}")

	@override
	def precedence(self) -> int:
		return UNARY

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.op)
		prec = self.operand.precedence()
		# `- -x` must not collapse into `--x`
		_emit_operand(
			self.operand, out, prec < UNARY or (prec == UNARY and self.op == "-")
		)


@dataclass(slots=True)
class Binary(ExprNode):
	"""Binary operator: a + b, show && html`...`, x ?? fallback"""

	left: ExprNode
	op: str
	right: ExprNode

	def __post_init__(self) -> None:
		if self.op not in BINARY_OPERATORS:
			raise TypeError(f"Unsupported binary operator {self.op!r}")

	@override
	def precedence(self) -> int:
		return BINARY_OPERATORS[self.op]

	@override
	def emit(self, out: list[str]) -> None:
		prec = self.precedence()
		# Left-associative: equal precedence groups without parens on the left only
		left, right = self.left.precedence(), self.right.precedence()
		_emit_operand(self.left, out, left < prec or self._mixes_nullish(self.left))
		out.append(f" {self.op} ")
		_emit_operand(self.right, out, right <= prec or self._mixes_nullish(self.right))

	def _mixes_nullish(self, operand: ExprNode) -> bool:
		if not isinstance(operand, Binary):
			return False
		if self.op == "??":
			return operand.op in _NULLISH_EXCLUSIVE
		return self.op in _NULLISH_EXCLUSIVE and operand.op == "??"


@dataclass(slots=True)
class Ternary(ExprNode):
	"""Conditional: ok ? html`...` : null"""

	cond: ExprNode
	then: ExprNode
	else_: ExprNode

	@override
	def precedence(self) -> int:
		return TERNARY

	@override
	def emit(self, out: list[str]) -> None:
		_emit_operand(self.cond, out, self.cond.precedence() <= TERNARY)
		out.append(" ? ")
		self.then.emit(out)
		out.append(" : ")
		self.else_.emit(out)


@dataclass(slots=True)
class Arrow(ExprNode):
	"""Callback: item => html`<li>${item}</li>`"""

	params: Sequence[str]
	body: ExprNode

	@override
	def precedence(self) -> int:
		return ARROW

	@override
	def emit(self, out: list[str]) -> None:
		if len(self.params) == 1:
			out.append(self.params[0])
		else:
			out.append(f"({', '.join(self.params)})")
		out.append(" => ")
		# An object body would parse as a block
		_emit_operand(self.body, out, isinstance(self.body, Object))


# =============================================================================
# Templates
# =============================================================================


@dataclass(slots=True)
class Template(ExprNode):
	"""JS template literal: `item-${id}`

	Parts alternate: [str, ExprNode, str, ExprNode, str, ...]
	Always starts and ends with a string (may be empty).
	"""

	parts: Sequence[str | ExprNode]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("`")
		_emit_template_parts(self.parts, out)
		out.append("`")


@dataclass(slots=True)
class Jsx(ExprNode):
	"""A JSX node embedded inside an expression: {cond && <b>x</b>}.

	Only valid as compiler input. The compiler replaces it with the compiled
	template before anything is emitted.
	"""

	node: JsxNode

	@override
	def emit(self, out: list[str]) -> None:
		raise TypeError(
			"Cannot emit uncompiled JSX. Run the tree through compile_jsx() first."
		)


Segment: TypeAlias = str | ExprNode


@dataclass(slots=True)
class HtmlTemplate(ExprNode):
	"""A compiled template: html`<div id="${x}">...</div>`

	Parts alternate [str, ExprNode, str, ..., str], so a finished template
	always holds 2k+1 parts. Strings are literal markup, emitted as-is at
	render time. Expressions are escaped by the `tag` function unless they
	are themselves templates or wrapped by the escape-bypass helper.
	"""

	parts: Sequence[Segment]
	tag: str = "html"

	@property
	def literals(self) -> list[str]:
		return [p for p in self.parts[::2] if isinstance(p, str)]

	@property
	def expressions(self) -> list[ExprNode]:
		return [p for p in self.parts[1::2] if isinstance(p, ExprNode)]

	def is_empty(self) -> bool:
		return len(self.parts) == 1 and self.parts[0] == ""

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.tag)
		out.append("`")
		_emit_template_parts(self.parts, out)
		out.append("`")


# =============================================================================
# Emit logic
# =============================================================================


def emit(node: Node) -> str:
	"""Emit a node as JavaScript code."""
	out: list[str] = []
	node.emit(out)
	return "".join(out)


_STRING_ESCAPES = str.maketrans(
	{
		"\\": "\\\\",
		'"': '\\"',
		"\n": "\\n",
		"\r": "\\r",
		"\t": "\\t",
		"\b": "\\b",
		"\f": "\\f",
		"\v": "\\v",
		"\x00": "\\x00",
		"\u2028": "\\u2028",
		"\u2029": "\\u2029",
	}
)


def _string(s: str) -> str:
	"""Double-quoted JS string literal."""
	return f'"{s.translate(_STRING_ESCAPES)}"'


def _escape_template(s: str) -> str:
	"""Escape literal text for a template literal body."""
	return (
		s.replace("\\", "\\\\")
		.replace("`", "\\`")
		.replace("${", "\\${")
		.replace("\r", "\\r")
		.replace("\x00", "\\x00")
	)


def _emit_template_parts(parts: Sequence[Segment], out: list[str]) -> None:
	for p in parts:
		if isinstance(p, str):
			out.append(_escape_template(p))
		else:
			out.append("${")
			p.emit(out)
			out.append("}")


def _emit_list(items: Sequence[ExprNode], out: list[str]) -> None:
	for i, item in enumerate(items):
		if i:
			out.append(", ")
		item.emit(out)


def _emit_operand(node: ExprNode, out: list[str], parens: bool) -> None:
	if parens:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)
