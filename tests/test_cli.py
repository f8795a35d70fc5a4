import os
import tempfile
import unittest

from typer.testing import CliRunner

from notion2html import __version__
from notion2html.cli.main import app

FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "page_export.json")


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(app, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_render_stdout(self):
        result = self.runner.invoke(app, ["render", FIXTURE, "--stdout"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('<h1 class="notion-page-block">Weekly ', result.stdout)
        self.assertIn("<ul>", result.stdout)

    def test_render_stdout_full_page(self):
        result = self.runner.invoke(
            app, ["render", FIXTURE, "--stdout", "--full-page"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("<title>Weekly plan</title>", result.stdout)

    def test_render_to_file(self):
        with tempfile.TemporaryDirectory() as out_dir:
            result = self.runner.invoke(app, ["render", FIXTURE, "-o", out_dir])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(os.listdir(out_dir), ["Weekly plan.html"])

    def test_render_unknown_root(self):
        result = self.runner.invoke(
            app, ["render", FIXTURE, "--root", "nope", "--stdout"]
        )
        self.assertEqual(result.exit_code, 1)

    def test_render_missing_export(self):
        result = self.runner.invoke(app, ["render", "does-not-exist.json"])
        self.assertNotEqual(result.exit_code, 0)

    def test_blocks(self):
        result = self.runner.invoke(app, ["blocks", FIXTURE])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Resolved", result.output)


if __name__ == "__main__":
    unittest.main()
