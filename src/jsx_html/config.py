"""Compiler options and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

ENV_JSX_HTML_TAG = "JSX_HTML_TAG"
ENV_JSX_HTML_UNSAFE = "JSX_HTML_UNSAFE"
ENV_JSX_HTML_SPREAD_ATTRS = "JSX_HTML_SPREAD_ATTRS"

# Elements that never carry children or a closing tag in HTML output
SELF_CLOSING_TAGS: frozenset[str] = frozenset(
	{
		"area",
		"base",
		"br",
		"col",
		"embed",
		"hr",
		"img",
		"input",
		"link",
		"meta",
		"param",
		"source",
		"track",
		"wbr",
	}
)

FRAGMENT_START = "<!-- Fragment Start -->"
FRAGMENT_END = "<!-- Fragment End -->"


@dataclass(slots=True, frozen=True)
class CompilerOptions:
	"""Names and vocabulary the compiler bakes into its output.

	html_tag, unsafe_html and spread_attrs are the identifiers of the three
	render-time helpers the output calls. The runtime must provide callables
	under these names.
	"""

	html_tag: str = "html"
	unsafe_html: str = "unsafeHTML"
	spread_attrs: str = "spreadAttrs"
	dangerous_html_prop: str = "dangerouslySetInnerHTML"
	class_name_prop: str = "className"
	fragment_start: str = FRAGMENT_START
	fragment_end: str = FRAGMENT_END
	self_closing_tags: frozenset[str] = field(default=SELF_CLOSING_TAGS)

	@classmethod
	def from_env(cls) -> CompilerOptions:
		"""Defaults, with helper names overridden from the environment."""
		defaults = cls()
		return cls(
			html_tag=os.environ.get(ENV_JSX_HTML_TAG) or defaults.html_tag,
			unsafe_html=os.environ.get(ENV_JSX_HTML_UNSAFE) or defaults.unsafe_html,
			spread_attrs=os.environ.get(ENV_JSX_HTML_SPREAD_ATTRS)
			or defaults.spread_attrs,
		)

	def is_self_closing(self, tag: str) -> bool:
		return tag in self.self_closing_tags


def default_options() -> CompilerOptions:
	return CompilerOptions.from_env()
