"""Tests for layered config parsing and validation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PhraseQuery.config import load_config, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "backend": {"name": "elasticsearch", "field": "body"},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.backend.name, "elasticsearch")
        self.assertEqual(cfg.backend.field, "body")

    def test_backend_section_is_optional(self) -> None:
        raw = _base_raw_config()
        del raw["backend"]
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.backend.name, "neutral")
        self.assertEqual(cfg.backend.field, "text")

    def test_backend_name_normalization(self) -> None:
        raw = _base_raw_config()
        raw["backend"]["name"] = "  Neutral "
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.backend.name, "neutral")

    def test_backend_unknown_name_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["backend"]["name"] = "solr"
        with self.assertRaisesRegex(ValueError, "backend\\.name"):
            parse_config_dict(raw)

    def test_backend_field_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["backend"]["field"] = 3
        with self.assertRaisesRegex(TypeError, "backend\\.field"):
            parse_config_dict(raw)

    def test_backend_field_empty(self) -> None:
        raw = _base_raw_config()
        raw["backend"]["field"] = "  "
        with self.assertRaisesRegex(ValueError, "backend\\.field"):
            parse_config_dict(raw)

    def test_backend_section_must_be_object(self) -> None:
        raw = _base_raw_config()
        raw["backend"] = "neutral"
        with self.assertRaisesRegex(TypeError, "backend must be an object"):
            parse_config_dict(raw)

    def test_missing_log_section(self) -> None:
        raw = _base_raw_config()
        del raw["log"]
        with self.assertRaisesRegex(ValueError, "Missing required config: log"):
            parse_config_dict(raw)

    def test_log_level_invalid(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "verbose"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_log_to_file_type_error(self) -> None:
        raw = _base_raw_config()
        raw["log"]["to_file"] = "yes"
        with self.assertRaisesRegex(TypeError, "log\\.to_file"):
            parse_config_dict(raw)

    def test_shipped_default_config_is_valid(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.backend.name, "neutral")
        self.assertEqual(cfg.runtime.level, "INFO")


if __name__ == "__main__":
    unittest.main()
