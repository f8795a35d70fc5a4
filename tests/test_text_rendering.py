"""Tests for the inline formatting resolver."""

import unittest

from notion2html.models import FormattedText, NoContextFormat, StyleKind
from notion2html.rendering.text import render_text


def _runs(*wire):
    return [FormattedText.model_validate(w) for w in wire]


class RenderTextTest(unittest.TestCase):
    def test_plain_runs_are_concatenated_verbatim(self):
        html = render_text(_runs(["Hello "], ["world"])).render()
        self.assertEqual(html, "Hello world")

    def test_formatted_run_gets_positional_span(self):
        html = render_text(_runs(["Hello "], ["world", [["b"]]], ["!"])).render()
        self.assertEqual(
            html, 'Hello <span data-token-index="1"><b>world</b></span>!'
        )

    def test_first_instruction_is_innermost(self):
        html = render_text(_runs(["x", [["b"], ["i"]]])).render()
        self.assertEqual(html, '<span data-token-index="0"><em><b>x</b></em></span>')

        html = render_text(_runs(["x", [["i"], ["b"]]])).render()
        self.assertEqual(html, '<span data-token-index="0"><b><em>x</em></b></span>')

    def test_unmapped_styles_pass_through(self):
        html = render_text(_runs(["gone", [["s"], ["_"], ["c"]]])).render()
        self.assertEqual(html, '<span data-token-index="0">gone</span>')

    def test_with_context_instructions_pass_through(self):
        html = render_text(
            _runs(["site", [["a", "https://example.com"], ["b"]]])
        ).render()
        self.assertEqual(html, '<span data-token-index="0"><b>site</b></span>')

    def test_empty_formatting_still_wraps_in_span(self):
        html = render_text(_runs(["t", []])).render()
        self.assertEqual(html, '<span data-token-index="0">t</span>')

    def test_index_counts_unformatted_runs(self):
        html = render_text(_runs(["a"], ["b"], ["c", [["i"]]])).render()
        self.assertEqual(html, 'ab<span data-token-index="2"><em>c</em></span>')

    def test_text_is_escaped(self):
        html = render_text(_runs(["a < b & c"])).render()
        self.assertEqual(html, "a &lt; b &amp; c")

    def test_typed_instructions(self):
        run = FormattedText(
            text="typed",
            formatting=[NoContextFormat(style=StyleKind.ITALIC)],
        )
        html = render_text([run]).render()
        self.assertEqual(html, '<span data-token-index="0"><em>typed</em></span>')

    def test_no_runs(self):
        self.assertEqual(render_text([]).render(), "")


if __name__ == "__main__":
    unittest.main()
