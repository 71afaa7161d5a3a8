"""Tests for the click command line."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PhraseQuery.cli import cli


_CONFIG_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

backend:
  name: neutral
  field: body
"""


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "config.yml"
        self.config_path.write_text(_CONFIG_YAML, encoding="utf-8")
        self.runner = CliRunner()

    def _invoke(self, *args: str):
        return self.runner.invoke(cli, ["--config", str(self.config_path), *args])

    def test_compile_neutral(self) -> None:
        result = self._invoke("compile", "--", '+urgent "quarterly report" -draft')
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            json.loads(result.output),
            {
                "optional": [{"match_phrase": "quarterly report"}],
                "required": [{"match": "urgent"}],
                "excluded": [{"match": "draft"}],
            },
        )

    def test_compile_backend_override(self) -> None:
        result = self._invoke("compile", "--backend", "elasticsearch", "--", "+foo qux")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            json.loads(result.output),
            {
                "bool": {
                    "should": [{"match": {"body": "qux"}}],
                    "must": [{"match": {"body": "foo"}}],
                }
            },
        )

    def test_compile_empty_query(self) -> None:
        result = self._invoke("compile", "")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.output), {})

    def test_compile_parse_error_aborts(self) -> None:
        result = self._invoke("compile", '"unterminated')
        self.assertEqual(result.exit_code, 1)
        self.assertIn("unterminated quote", result.output)

    def test_parse_logs_buckets(self) -> None:
        result = self._invoke("parse", "--", "+foo qux -bar +baz")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Parsed 4 clauses", result.output)
        self.assertIn("required (2):", result.output)
        self.assertLess(result.output.index("1. term   foo"), result.output.index("2. term   baz"))
        self.assertIn("excluded (1):", result.output)

    def test_parse_dangling_operator_aborts(self) -> None:
        result = self._invoke("parse", "foo -")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("operator '-'", result.output)

    def test_unknown_backend_choice(self) -> None:
        result = self._invoke("compile", "--backend", "solr", "foo")
        self.assertNotEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
