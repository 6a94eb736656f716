from jsx_html.builder import TemplateBuilder, empty_template, text_template
from jsx_html.nodes import HtmlTemplate, Identifier


class TestTemplateBuilder:
	def test_empty_finish_has_single_empty_literal(self):
		assert TemplateBuilder().finish().parts == [""]

	def test_text_is_concatenated(self):
		out = TemplateBuilder()
		out.text("<div")
		out.text(">")
		assert out.finish().parts == ["<div>"]

	def test_expression_is_surrounded_by_literals(self):
		x = Identifier("x")
		out = TemplateBuilder()
		out.expr(x)
		assert out.finish().parts == ["", x, ""]

	def test_adjacent_expressions_get_empty_flush(self):
		x, y = Identifier("x"), Identifier("y")
		out = TemplateBuilder()
		out.text("<p>")
		out.expr(x)
		out.expr(y)
		out.text("</p>")
		assert out.finish().parts == ["<p>", x, "", y, "</p>"]

	def test_parts_alternate(self):
		out = TemplateBuilder()
		for i in range(5):
			if i % 2:
				out.text("t")
			out.expr(Identifier(f"v{i}"))
		parts = out.finish().parts
		assert len(parts) % 2 == 1
		assert all(isinstance(p, str) for p in parts[::2])
		assert all(isinstance(p, Identifier) for p in parts[1::2])

	def test_tag_is_carried(self):
		out = TemplateBuilder("h")
		out.text("<br />")
		assert out.finish() == HtmlTemplate(["<br />"], tag="h")


def test_empty_and_text_templates():
	assert empty_template() == HtmlTemplate([""])
	assert text_template("hi") == HtmlTemplate(["hi"])
