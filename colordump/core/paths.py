from __future__ import annotations

import os
import sys

APP_NAME = "colordump"


def config_dir() -> str:
    home = os.path.expanduser("~")
    if sys.platform == "darwin":
        return os.path.join(home, "Library", "Application Support", APP_NAME)
    if os.name == "nt":
        base = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA") or home
        return os.path.join(base, APP_NAME)
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")
    return os.path.join(base, APP_NAME)


def config_path() -> str:
    override = os.environ.get("COLORDUMP_CONFIG")
    if override:
        return override
    return os.path.join(config_dir(), "config.json")
