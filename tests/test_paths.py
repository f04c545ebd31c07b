import os
import unittest
from unittest.mock import patch

from colordump.core import paths


class TestPaths(unittest.TestCase):
    def setUp(self):
        self._platform = patch.object(paths.sys, "platform", "linux")
        self._os_name = patch.object(paths.os, "name", "posix")
        self._platform.start()
        self._os_name.start()

    def tearDown(self):
        self._os_name.stop()
        self._platform.stop()

    def test_override(self):
        with patch.dict(os.environ, {"COLORDUMP_CONFIG": "/tmp/custom.json"}):
            self.assertEqual(paths.config_path(), "/tmp/custom.json")

    def test_xdg_config_home(self):
        env = {"XDG_CONFIG_HOME": "/xdg", "COLORDUMP_CONFIG": ""}
        with patch.dict(os.environ, env):
            self.assertEqual(
                paths.config_path(),
                os.path.join("/xdg", "colordump", "config.json"),
            )

    def test_home_fallback(self):
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            self.assertEqual(
                paths.config_dir(),
                os.path.join(os.path.expanduser("~"), ".config", "colordump"),
            )


if __name__ == "__main__":
    unittest.main()
