"""Tests for read-only config loading.

Malformed or missing config data must fall back to defaults.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfileops.runtime import config


class RuntimeConfigTests(unittest.TestCase):
    def _with_config(self, payload: str | None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if payload is not None:
            config_path.write_text(payload, encoding="utf-8")
        patcher = mock.patch("lazyfileops.runtime.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        return config_path

    def test_default_path_lives_under_app_config_dir(self) -> None:
        self.assertEqual(config.DEFAULT_CONFIG_PATH.name, "config.json")
        self.assertEqual(config.DEFAULT_CONFIG_PATH.parent.name, "lazyfileops")

    def test_missing_file_yields_defaults(self) -> None:
        self._with_config(None)

        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_log_level())
        self.assertIsNone(config.load_result_delay_seconds())

    def test_malformed_or_non_object_json_yields_defaults(self) -> None:
        for payload in ("{not json", "[1, 2]", '"ocean"'):
            with self.subTest(payload=payload):
                self._with_config(payload)
                self.assertEqual(config.load_config(), {})

    def test_valid_values_are_loaded(self) -> None:
        self._with_config(json.dumps({"theme": " ocean ", "result_delay_seconds": 3, "log_level": "debug"}))

        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_result_delay_seconds(), 3.0)
        self.assertEqual(config.load_log_level(), "debug")

    def test_invalid_values_are_ignored(self) -> None:
        for delay in (True, 0, -1.5, "2", None):
            with self.subTest(delay=delay):
                self._with_config(json.dumps({"theme": "   ", "result_delay_seconds": delay, "log_level": 10}))
                self.assertIsNone(config.load_result_delay_seconds())
                self.assertIsNone(config.load_theme_name())
                self.assertIsNone(config.load_log_level())


if __name__ == "__main__":
    unittest.main()
