"""Tests for config persistence and input sanitization.

Ensures malformed config data is safely normalized on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from notefind import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_defaults_when_config_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("notefind.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_document_extension(), "md")
                self.assertFalse(config.load_case_sensitive())
                self.assertFalse(config.load_use_regex())
                self.assertEqual(config.load_style(), "monokai")

    def test_values_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("notefind.config.CONFIG_PATH", Path(tmp) / "nested" / "config.json"):
                config.save_document_extension(".txt")
                config.save_case_sensitive(True)
                config.save_use_regex(True)
                config.save_style("friendly")

                self.assertEqual(config.load_document_extension(), "txt")
                self.assertTrue(config.load_case_sensitive())
                self.assertTrue(config.load_use_regex())
                self.assertEqual(config.load_style(), "friendly")

    def test_malformed_values_fall_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("notefind.config.CONFIG_PATH", Path(tmp) / "config.json"):
                config.save_config({"document_extension": ".", "case_sensitive": "yes", "use_regex": 1, "style": 3})
                self.assertEqual(config.load_document_extension(), "md")
                self.assertFalse(config.load_case_sensitive())
                self.assertFalse(config.load_use_regex())
                self.assertEqual(config.load_style(), "monokai")

    def test_invalid_json_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            with mock.patch("notefind.config.CONFIG_PATH", path):
                self.assertEqual(config.load_config(), {})
            path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("notefind.config.CONFIG_PATH", path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
