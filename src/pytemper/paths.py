from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

CONFIG_ENV = "TEMPER_CONFIG"
CONFIG_FILENAME = "temper.ini"


def _app_name(default: str) -> str:
    return os.getenv("TEMPER_APP_NAME", default)


def user_config_dir(app_name: str = "pytemper") -> Path:
    app = _app_name(app_name)
    return Path(_uc(appname=app)).resolve()


def config_file() -> Path:
    """Return the configuration file in effect, which may not exist."""
    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env).expanduser().resolve()
    return user_config_dir() / CONFIG_FILENAME
