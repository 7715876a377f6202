import json
import os
import sys

import pytest

# Ensure project root is on sys.path so root modules (ecosystem_config,
# fix_emoji) import alongside the agent_deploy package
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "posix: mark test as relying on POSIX file modes"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip POSIX permission tests elsewhere."""
    if os.name == "posix":
        return

    skip_posix = pytest.mark.skip(reason="POSIX file modes not available")
    for item in items:
        if "posix" in item.keywords:
            item.add_marker(skip_posix)


@pytest.fixture
def app_dict():
    """A complete app entry matching the shipped declaration."""
    return {
        "name": "base-agent",
        "script": "index.js",
        "interpreter": "node",
        "interpreter_args": "--experimental-modules",
        "env_file": ".env",
        "env": {"NODE_ENV": "development"},
        "env_production": {"NODE_ENV": "production"},
        "error_file": "./logs/base-agent-error.log",
        "out_file": "./logs/base-agent-out.log",
        "log_file": "./logs/base-agent-combined.log",
        "time": True,
    }


@pytest.fixture
def env_file(tmp_path):
    """Create a .env file in tmp_path and return its path."""
    path = tmp_path / ".env"
    path.write_text(
        "# agent secrets\n"
        "OPENAI_API_KEY=sk-test\n"
        "XMTP_ENV=dev\n"
        "NODE_ENV=from-file\n"
    )
    os.chmod(path, 0o600)
    return path


@pytest.fixture
def ecosystem_json(tmp_path, app_dict):
    """Write an ecosystem JSON file holding app_dict and return its path."""
    path = tmp_path / "ecosystem.config.json"
    path.write_text(json.dumps({"apps": [app_dict]}))
    return str(path)


@pytest.fixture
def bad_config(tmp_path):
    """Create an invalid JSON config file and return its path."""
    path = tmp_path / "ecosystem.config.json"
    path.write_text("{invalid json content")
    return str(path)
