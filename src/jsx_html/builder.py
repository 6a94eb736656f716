from __future__ import annotations

from jsx_html.nodes import ExprNode, HtmlTemplate, Segment


class TemplateBuilder:
	"""Accumulates literal markup and expressions into an HtmlTemplate.

	Literal text is buffered and concatenated. Every expression flushes the
	buffer first, even when it is empty, so parts always alternate
	str/expr/str and a finished template has 2k+1 parts.
	"""

	__slots__: tuple[str, ...] = ("_buffer", "_parts", "tag")
	_buffer: list[str]
	_parts: list[Segment]
	tag: str

	def __init__(self, tag: str = "html") -> None:
		self._buffer = []
		self._parts = []
		self.tag = tag

	def text(self, s: str) -> None:
		self._buffer.append(s)

	def expr(self, value: ExprNode) -> None:
		self._flush()
		self._parts.append(value)

	def finish(self) -> HtmlTemplate:
		self._flush()
		parts = self._parts
		self._parts = []
		return HtmlTemplate(parts, tag=self.tag)

	def _flush(self) -> None:
		self._parts.append("".join(self._buffer))
		self._buffer = []


def empty_template(tag: str = "html") -> HtmlTemplate:
	return HtmlTemplate([""], tag=tag)


def text_template(s: str, tag: str = "html") -> HtmlTemplate:
	return HtmlTemplate([s], tag=tag)
