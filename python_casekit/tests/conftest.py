import logging
import os
import sys

import pytest

# ensure project root on path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    """Default settings, isolated from the caller's env and working directory."""
    import common.config as config

    for var in ("LOGGING__LEVEL", "LOGGING__FORMAT", "CONVERTER__DEFAULT_STYLE", "NAME"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    settings = config.AppConfig()
    monkeypatch.setattr(config, "settings", settings)
    return settings
