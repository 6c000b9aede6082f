import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from .. import config as config_module
from ..config import DEFAULT_CONFIG, PaperOptions, load_config, save_config
from ..errors import ConfigError


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)
        self.default_file = self.tmp_dir / "default.json"

        patcher = patch.object(config_module, "CONFIG_FILE", str(self.default_file))
        patcher.start()
        self.addCleanup(patcher.stop)
        env = patch.dict(os.environ, {}, clear=True)
        env.start()
        self.addCleanup(env.stop)
        self.addCleanup(self._tmp.cleanup)

    def write(self, name, payload):
        path = self.tmp_dir / name
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return path

    def test_defaults_without_file(self):
        config = load_config()
        self.assertEqual(config, DEFAULT_CONFIG)
        config["paper"]["page_size"] = 99
        self.assertEqual(DEFAULT_CONFIG["paper"]["page_size"], 20)

    def test_file_overrides_defaults_per_key(self):
        path = self.write("paper.json", {"paper": {"page_size": 5}, "demo": {"latency": 0}})
        config = load_config(path)

        self.assertEqual(config["paper"]["page_size"], 5)
        self.assertEqual(config["paper"]["window_size"], DEFAULT_CONFIG["paper"]["window_size"])
        self.assertEqual(config["demo"]["latency"], 0)

    def test_default_file_is_picked_up(self):
        self.write("default.json", {"paper": {"total_pages": 3}})
        self.assertEqual(load_config()["paper"]["total_pages"], 3)

    def test_missing_explicit_file_is_an_error(self):
        with self.assertRaises(ConfigError):
            load_config(self.tmp_dir / "missing.json")

    def test_invalid_json_is_an_error(self):
        with self.assertRaises(ConfigError):
            load_config(self.write("broken.json", "{not json"))
        with self.assertRaises(ConfigError):
            load_config(self.write("list.json", [1, 2]))

    def test_environment_overrides_file(self):
        path = self.write("paper.json", {"paper": {"page_size": 5}})
        os.environ["INFINITE_PAPER_PAGE_SIZE"] = "7"
        os.environ["INFINITE_PAPER_LOG_LEVEL"] = "DEBUG"
        os.environ["INFINITE_PAPER_DEMO_LATENCY"] = "0.5"

        config = load_config(path)
        self.assertEqual(config["paper"]["page_size"], 7)
        self.assertEqual(config["logging"]["level"], "DEBUG")
        self.assertEqual(config["demo"]["latency"], 0.5)

    def test_invalid_environment_value_is_an_error(self):
        os.environ["INFINITE_PAPER_WINDOW_SIZE"] = "wide"
        with self.assertRaises(ConfigError):
            load_config()

    def test_save_and_reload(self):
        path = self.tmp_dir / "saved.json"
        config = load_config()
        config["paper"]["window_size"] = 4

        self.assertTrue(save_config(config, path))
        self.assertEqual(load_config(path)["paper"]["window_size"], 4)

    def test_save_to_unwritable_path_returns_false(self):
        self.assertFalse(save_config({}, self.tmp_dir / "no-such-dir" / "c.json"))


class TestPaperOptions(unittest.TestCase):
    def test_from_config_fills_defaults(self):
        options = PaperOptions.from_config({"paper": {"page_size": 3, "total_pages": 4}})
        self.assertEqual(options.page_size, 3)
        self.assertEqual(options.total_pages, 4)
        self.assertEqual(options.window_size, DEFAULT_CONFIG["paper"]["window_size"])

    def test_from_config_rejects_unknown_keys(self):
        with self.assertRaises(ConfigError):
            PaperOptions.from_config({"paper": {"page_sise": 3}})

    def test_validation(self):
        PaperOptions(page_size=1, total_pages=0, prefetch_threshold_pages=0)
        for bad in (
            {"page_size": 0, "total_pages": 4},
            {"page_size": 3, "total_pages": -1},
            {"page_size": 3, "total_pages": 4, "window_size": 0},
            {"page_size": 3, "total_pages": 4, "initial_page": 0},
            {"page_size": 3, "total_pages": 4, "prefetch_threshold_pages": -1},
            {"page_size": 2.5, "total_pages": 4},
            {"page_size": True, "total_pages": 4},
        ):
            with self.subTest(options=bad), self.assertRaises(ConfigError):
                PaperOptions(**bad)


if __name__ == "__main__":
    unittest.main()
