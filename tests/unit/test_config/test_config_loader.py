# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Unit Tests for configuration loading

Tests YAML/JSON file loading, deep merging over defaults, and validation.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from regcodec.config.config_loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    CodecConfig,
    _deep_merge_dict,
    load_config,
)
from regcodec.core.exceptions import ConfigError


class TestDefaults(unittest.TestCase):
    def test_defaults_without_file(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop(CONFIG_ENV_VAR, None)
            cfg = load_config()

        self.assertEqual(cfg, CodecConfig())
        self.assertEqual(cfg.multi_text_separator, "\n")
        self.assertEqual(cfg.logging.verbose, 0)
        self.assertTrue(cfg.logging.color)

    def test_defaults_not_mutated(self):
        load_config(overrides={"codec": {"multi_text_separator": ";"}})
        self.assertEqual(DEFAULT_CONFIG["codec"]["multi_text_separator"], "\n")


class TestFiles(unittest.TestCase):
    def test_yaml_file(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "regcodec.yaml"
            cfg_path.write_text(
                """
codec:
  multi_text_separator: "; "
logging:
  verbose: 2
  json: true
""",
                encoding="utf-8",
            )
            cfg = load_config(cfg_path)

        self.assertEqual(cfg.multi_text_separator, "; ")
        self.assertEqual(cfg.logging.verbose, 2)
        self.assertTrue(cfg.logging.json)
        # untouched keys keep their defaults
        self.assertEqual(cfg.logging.quiet, 0)
        self.assertTrue(cfg.logging.color)

    def test_json_file(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "regcodec.json"
            cfg_path.write_text(json.dumps({"logging": {"log_file": "/tmp/x.log"}}), encoding="utf-8")
            cfg = load_config(str(cfg_path))

        self.assertEqual(cfg.logging.log_file, "/tmp/x.log")

    def test_no_suffix_falls_back_to_yaml(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "regcodecrc"
            cfg_path.write_text("logging:\n  quiet: 1\n", encoding="utf-8")
            cfg = load_config(cfg_path)

        self.assertEqual(cfg.logging.quiet, 1)

    def test_empty_file_means_defaults(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "empty.yaml"
            cfg_path.write_text("", encoding="utf-8")
            self.assertEqual(load_config(cfg_path), CodecConfig())

    def test_env_var_names_the_file(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "env.yaml"
            cfg_path.write_text("logging:\n  verbose: 3\n", encoding="utf-8")
            with patch.dict(os.environ, {CONFIG_ENV_VAR: str(cfg_path)}):
                cfg = load_config()

        self.assertEqual(cfg.logging.verbose, 3)

    def test_overrides_win_over_file(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "base.yaml"
            cfg_path.write_text("logging:\n  verbose: 1\n  color: false\n", encoding="utf-8")
            cfg = load_config(cfg_path, overrides={"logging": {"verbose": 2}})

        self.assertEqual(cfg.logging.verbose, 2)
        self.assertFalse(cfg.logging.color)

    def test_unknown_sections_ignored(self):
        cfg = load_config(overrides={"transport": {"hive": "SYSTEM"}})
        self.assertEqual(cfg, CodecConfig())


class TestErrors(unittest.TestCase):
    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config("/nonexistent/regcodec.yaml")

    def test_malformed_yaml(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "bad.yaml"
            cfg_path.write_text("codec: [unclosed\n", encoding="utf-8")
            with self.assertRaises(ConfigError) as cm:
                load_config(cfg_path)

        self.assertIsNotNone(cm.exception.cause)

    def test_top_level_must_be_mapping(self):
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "list.json"
            cfg_path.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(cfg_path)

    def test_bad_types(self):
        bad = [
            {"codec": {"multi_text_separator": 5}},
            {"codec": None},
            {"logging": {"verbose": -1}},
            {"logging": {"verbose": True}},
            {"logging": {"json": "yes"}},
            {"logging": {"log_file": 12}},
        ]
        for ov in bad:
            with self.subTest(ov=ov):
                with self.assertRaises(ConfigError):
                    load_config(overrides=ov)


class TestDeepMerge(unittest.TestCase):
    def test_dicts_merge_lists_replace(self):
        base = {"a": {"x": 1, "y": [1, 2]}, "b": 1}
        out = _deep_merge_dict(base, {"a": {"y": [3]}, "c": 2})

        self.assertEqual(out, {"a": {"x": 1, "y": [3]}, "b": 1, "c": 2})
        self.assertEqual(base["a"]["y"], [1, 2])


if __name__ == "__main__":
    unittest.main()
