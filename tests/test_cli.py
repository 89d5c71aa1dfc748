"""
Tests for the command-line entry point.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from memory_layers import cli

TEXT = "SECTION ONE\n\nDeliberate practice targets specific weaknesses with feedback. Deliberate practice is effortful.\n"


class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = Path(self.tmpdir.name) / "notes.txt"
        self.path.write_text(TEXT, encoding="utf-8")

    def tearDown(self):
        self.tmpdir.cleanup()

    def run_cli(self, *args):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = cli.main([str(self.path), *args])
        return code, buffer.getvalue()

    def test_structure_layer(self):
        code, output = self.run_cli("--layer", "structure")
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "SECTION ONE")

    def test_keyword_layer(self):
        code, output = self.run_cli("--layer", "keywords")
        self.assertEqual(code, 0)
        self.assertIn("- deliberate (2", output)

    def test_fulltext_marks_keywords(self):
        code, output = self.run_cli("--layer", "fulltext")
        self.assertEqual(code, 0)
        self.assertIn("[Deliberate]", output)

    def test_json_output(self):
        code, output = self.run_cli("--layer", "keywords", "--json")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["layer"], "keywords")

    def test_missing_file(self):
        self.assertEqual(cli.main([str(self.path) + ".missing"]), 1)


if __name__ == "__main__":
    unittest.main()
