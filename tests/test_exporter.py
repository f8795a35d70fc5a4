import json
import os
import tempfile
import unittest

from notion2html.exceptions import BlockNotFound, ExportLoadError
from notion2html.rendering.exporter import (
    export_page,
    find_root_id,
    load_block_table,
    page_title,
    write_html,
)
from notion2html.rendering.renderer import BlockRenderer

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "page_export.json")
ROOT_ID = "0c6f1a52-8d4e-4c1a-9a55-3a1e2b7f9d01"

EXPECTED_ROOT_HTML = (
    '<h1 class="notion-page-block">Weekly '
    '<span data-token-index="1"><b>plan</b></span></h1>'
    "<div>"
    '<p class="notion-text-block">Things to '
    '<span data-token-index="1"><em>remember</em></span> this week</p>'
    "<ul>"
    '<li class="notion-bulleted_list-block">Milk</li>'
    '<div><p class="notion-text-block">Whole, not skimmed</p></div>'
    '<li class="notion-bulleted_list-block">'
    '<span data-token-index="0"><em><b>Eggs</b></em></span></li>'
    "</ul>"
    "<ul><h1>Could not render!</h1><h1>Could not render!</h1></ul>"
    '<p class="notion-text-block"></p>'
    "<h1>Could not render!</h1><div></div>"
    "</div>"
)


class TestExporter(unittest.TestCase):
    def setUp(self):
        self.table = load_block_table(FIXTURE)
        self._tmp = tempfile.TemporaryDirectory()
        self.out_dir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_render_fixture_output(self):
        """The captured export renders to the exact expected fragment."""
        html = BlockRenderer().render(ROOT_ID, self.table)
        self.assertEqual(html, EXPECTED_ROOT_HTML)

    def test_find_root_id(self):
        self.assertEqual(find_root_id(self.table), ROOT_ID)

    def test_find_root_id_without_pages(self):
        table = {k: v for k, v in self.table.items() if k != ROOT_ID}
        self.assertIsNone(find_root_id(table))

    def test_page_title(self):
        self.assertEqual(page_title(self.table, ROOT_ID), "Weekly plan")
        # text blocks and missing ids have no page title
        self.assertEqual(page_title(self.table, ROOT_ID[:-2] + "02"), "untitled")
        self.assertEqual(page_title(self.table, "missing"), "untitled")

    def test_write_html_sanitizes_name(self):
        path = write_html("a/b: c?", "<p>x</p>", self.out_dir)
        self.assertEqual(os.path.dirname(path), self.out_dir)
        self.assertEqual(os.path.basename(path), "a-b- c-.html")
        with open(path, "r", encoding="utf-8") as f:
            self.assertEqual(f.read(), "<p>x</p>")

    def test_write_html_full_page(self):
        path = write_html("Doc <1>", "<p>x</p>", self.out_dir, full_page=True)
        with open(path, "r", encoding="utf-8") as f:
            page = f.read()
        self.assertTrue(page.startswith("<!doctype html>"))
        self.assertIn("<title>Doc &lt;1&gt;</title>", page)
        self.assertIn('<div class="notion-content"><p>x</p></div>', page)

    def test_export_page(self):
        path = export_page(self.table, ROOT_ID, self.out_dir)
        self.assertEqual(os.path.basename(path), "Weekly plan.html")
        with open(path, "r", encoding="utf-8") as f:
            self.assertEqual(f.read(), EXPECTED_ROOT_HTML)

    def test_export_page_refuses_unrenderable_root(self):
        for block_id in ("missing", ROOT_ID[:-2] + "0a", ROOT_ID[:-2] + "0c"):
            with self.subTest(block_id=block_id):
                with self.assertRaises(BlockNotFound):
                    export_page(self.table, block_id, self.out_dir)
        self.assertEqual(os.listdir(self.out_dir), [])


class TestLoadBlockTable(unittest.TestCase):
    def test_missing_file(self):
        with self.assertRaises(ExportLoadError):
            load_block_table(os.path.join(tempfile.gettempdir(), "no-such-export.json"))

    def test_invalid_json(self):
        with tempfile.NamedTemporaryFile(
            "w", suffix=".json", delete=False, encoding="utf-8"
        ) as f:
            f.write("{not json")
        self.addCleanup(os.unlink, f.name)
        with self.assertRaises(ExportLoadError):
            load_block_table(f.name)

    def test_not_a_block_table(self):
        with tempfile.NamedTemporaryFile(
            "w", suffix=".json", delete=False, encoding="utf-8"
        ) as f:
            json.dump([1, 2, 3], f)
        self.addCleanup(os.unlink, f.name)
        with self.assertRaises(ExportLoadError) as cm:
            load_block_table(f.name)
        self.assertIsNotNone(cm.exception.__cause__)


if __name__ == "__main__":
    unittest.main()
