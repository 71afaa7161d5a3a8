"""Tests for config override behavior with defaults."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PhraseQuery.config import load_config_with_defaults


_BASE_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

backend:
  name: neutral
  field: text
"""


class TestConfigOverride(unittest.TestCase):
    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: DEBUG

backend:
  name: elasticsearch
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")

            cfg = load_config_with_defaults(override_path, defaults_text=_BASE_YAML)

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.backend.name, "elasticsearch")
        self.assertEqual(cfg.backend.field, "text")

    def test_empty_override_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("{}", encoding="utf-8")

            cfg = load_config_with_defaults(override_path, defaults_text=_BASE_YAML)

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.backend.name, "neutral")

    def test_defaults_file_is_merged(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default_path = Path(tmp) / "default.yml"
            default_path.write_text(_BASE_YAML, encoding="utf-8")
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("backend:\n  field: body\n", encoding="utf-8")

            cfg = load_config_with_defaults(override_path, default_path=default_path)

        self.assertEqual(cfg.backend.name, "neutral")
        self.assertEqual(cfg.backend.field, "body")

    def test_non_mapping_root_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("- a\n- b\n", encoding="utf-8")

            with self.assertRaisesRegex(ValueError, "Config root must be a mapping"):
                load_config_with_defaults(override_path, defaults_text=_BASE_YAML)


if __name__ == "__main__":
    unittest.main()
