import logging

import pytest
from jsx_html.attributes import (
	BooleanAttr,
	DynamicAttr,
	SpreadAttr,
	StaticAttr,
	classify_attributes,
)
from jsx_html.config import CompilerOptions
from jsx_html.jsx import JsxAttribute, JsxSpreadAttribute
from jsx_html.nodes import Identifier, Literal, Object, Spread, Template

OPTIONS = CompilerOptions()


def classify(*attrs, host=True):
	return classify_attributes(attrs, OPTIONS, host=host)


class TestValueKinds:
	def test_bare_attribute_is_boolean(self):
		assert classify(JsxAttribute("disabled")).attrs == (BooleanAttr("disabled", True),)

	def test_string_literal_is_static(self):
		assert classify(JsxAttribute("type", "text")).attrs == (StaticAttr("type", "text"),)

	def test_static_value_is_verbatim(self):
		attrs = classify(JsxAttribute("title", 'a "b" & <c>')).attrs
		assert attrs == (StaticAttr("title", 'a "b" & <c>'),)

	def test_literal_true_is_boolean(self):
		attrs = classify(JsxAttribute("hidden", Literal(True))).attrs
		assert attrs == (BooleanAttr("hidden", True),)

	def test_literal_false_is_dropped(self):
		assert classify(JsxAttribute("hidden", Literal(False))).attrs == ()

	def test_expression_is_dynamic(self):
		x = Identifier("x")
		assert classify(JsxAttribute("id", x)).attrs == (DynamicAttr("id", x),)

	def test_string_expression_is_dynamic(self):
		value = Literal("a")
		assert classify(JsxAttribute("id", value)).attrs == (DynamicAttr("id", value),)

	def test_template_literal_is_dynamic(self):
		value = Template(["item-", Identifier("id"), ""])
		attrs = classify(JsxAttribute("data-custom", value)).attrs
		assert attrs == (DynamicAttr("data-custom", value),)

	def test_spread(self):
		rest = Identifier("rest")
		result = classify(JsxSpreadAttribute(rest))
		assert result.attrs == (SpreadAttr(rest),)
		assert result.has_spread

	def test_order_is_preserved(self):
		x, rest = Identifier("x"), Identifier("rest")
		result = classify(
			JsxAttribute("a", "1"),
			JsxSpreadAttribute(rest),
			JsxAttribute("b", x),
			JsxAttribute("c"),
		)
		assert result.attrs == (
			StaticAttr("a", "1"),
			SpreadAttr(rest),
			DynamicAttr("b", x),
			BooleanAttr("c", True),
		)

	def test_rejects_foreign_attribute(self):
		with pytest.raises(TypeError, match="Cannot classify dict"):
			classify({"name": "id"})


class TestClassNameAlias:
	def test_renamed_on_host(self):
		attrs = classify(JsxAttribute("className", "card")).attrs
		assert attrs == (StaticAttr("class", "card"),)

	def test_kept_on_component(self):
		attrs = classify(JsxAttribute("className", "card"), host=False).attrs
		assert attrs == (StaticAttr("className", "card"),)

	def test_plain_class_untouched(self):
		attrs = classify(JsxAttribute("class", "card")).attrs
		assert attrs == (StaticAttr("class", "card"),)


class TestDangerousHtml:
	def test_payload_is_extracted(self):
		raw = Identifier("raw")
		result = classify(
			JsxAttribute("dangerouslySetInnerHTML", Object([("__html", raw)]))
		)
		assert result.attrs == ()
		assert result.dangerous_html == raw

	def test_first_html_key_wins(self):
		first, second = Identifier("first"), Identifier("second")
		value = Object([("__html", first), ("__html", second)])
		result = classify(JsxAttribute("dangerouslySetInnerHTML", value))
		assert result.dangerous_html == first

	def test_non_object_is_dropped(self, caplog: pytest.LogCaptureFixture):
		with caplog.at_level(logging.DEBUG, logger="jsx_html.attributes"):
			result = classify(
				JsxAttribute("dangerouslySetInnerHTML", Identifier("html")),
				JsxAttribute("id", "a"),
			)
		assert result.dangerous_html is None
		assert result.attrs == (StaticAttr("id", "a"),)
		assert "dangerouslySetInnerHTML" in caplog.text

	def test_missing_html_key_is_dropped(self):
		value = Object([("html", Identifier("x")), Spread(Identifier("rest"))])
		result = classify(JsxAttribute("dangerouslySetInnerHTML", value))
		assert result.dangerous_html is None
		assert result.attrs == ()

	def test_string_value_is_dropped(self):
		result = classify(JsxAttribute("dangerouslySetInnerHTML", "<b>x</b>"))
		assert result.dangerous_html is None
		assert result.attrs == ()

	def test_custom_prop_name(self):
		raw = Identifier("raw")
		options = CompilerOptions(dangerous_html_prop="innerHTML")
		result = classify_attributes(
			[JsxAttribute("innerHTML", Object([("__html", raw)]))],
			options,
			host=True,
		)
		assert result.dangerous_html == raw
