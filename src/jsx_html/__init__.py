"""Compile JSX trees into html tagged templates for server-side rendering."""

# Attributes
from jsx_html.attributes import BooleanAttr as BooleanAttr
from jsx_html.attributes import ClassifiedAttributes as ClassifiedAttributes
from jsx_html.attributes import DynamicAttr as DynamicAttr
from jsx_html.attributes import SpreadAttr as SpreadAttr
from jsx_html.attributes import StaticAttr as StaticAttr
from jsx_html.attributes import classify_attributes as classify_attributes

# Builder
from jsx_html.builder import TemplateBuilder as TemplateBuilder

# Compiler
from jsx_html.compiler import CompileResult as CompileResult
from jsx_html.compiler import Compiler as Compiler
from jsx_html.compiler import compile_expression as compile_expression
from jsx_html.compiler import compile_fragment as compile_fragment
from jsx_html.compiler import compile_jsx as compile_jsx
from jsx_html.compiler import merge_helpers as merge_helpers
from jsx_html.compiler import tag_kind as tag_kind

# Config
from jsx_html.config import CompilerOptions as CompilerOptions
from jsx_html.config import default_options as default_options

# Errors
from jsx_html.errors import RenderError as RenderError

# Input tree
from jsx_html.jsx import JsxAttribute as JsxAttribute
from jsx_html.jsx import JsxElement as JsxElement
from jsx_html.jsx import JsxEmptyExpression as JsxEmptyExpression
from jsx_html.jsx import JsxExpression as JsxExpression
from jsx_html.jsx import JsxFragment as JsxFragment
from jsx_html.jsx import JsxNode as JsxNode
from jsx_html.jsx import JsxSpreadAttribute as JsxSpreadAttribute
from jsx_html.jsx import JsxText as JsxText

# Expression nodes
from jsx_html.nodes import UNDEFINED as UNDEFINED
from jsx_html.nodes import Array as Array
from jsx_html.nodes import Arrow as Arrow
from jsx_html.nodes import Binary as Binary
from jsx_html.nodes import Call as Call
from jsx_html.nodes import ExprNode as ExprNode
from jsx_html.nodes import HtmlTemplate as HtmlTemplate
from jsx_html.nodes import Identifier as Identifier
from jsx_html.nodes import Jsx as Jsx
from jsx_html.nodes import Literal as Literal
from jsx_html.nodes import Member as Member
from jsx_html.nodes import Object as Object
from jsx_html.nodes import Spread as Spread
from jsx_html.nodes import Subscript as Subscript
from jsx_html.nodes import Template as Template
from jsx_html.nodes import Ternary as Ternary
from jsx_html.nodes import Unary as Unary
from jsx_html.nodes import Undefined as Undefined

# Emit
from jsx_html.nodes import emit as emit

# Runtime
from jsx_html.runtime import html as html
from jsx_html.runtime import render as render
from jsx_html.runtime import spread_attrs as spread_attrs
from jsx_html.runtime import unsafe_html as unsafe_html
