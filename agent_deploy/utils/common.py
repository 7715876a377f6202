"""
Centralized paths, config loading, and project constants.
Single source of truth -- all modules import from here.
"""
import json
import logging
import os
import stat

log = logging.getLogger("config")


# ── Canonical Paths ──────────────────────────────────────────
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

ECOSYSTEM_JSON = os.path.join(BASE_DIR, 'ecosystem.config.json')

# Target of the emoji repair script, relative to the working directory.
PATCH_TARGET = 'index.js'


_UNSET = object()


def check_config_permissions(path):
    """Warn if an env file has overly permissive modes (POSIX only).

    Returns a list of warning strings (empty when permissions are fine).
    """
    warnings = []
    if os.name != 'posix':
        return warnings
    try:
        mode = os.stat(path).st_mode
        if mode & stat.S_IROTH:
            warnings.append(
                f"{path} is world-readable (mode {oct(mode)}). "
                "Consider: chmod 600 " + path
            )
        if mode & stat.S_IWOTH:
            warnings.append(
                f"{path} is world-writable (mode {oct(mode)}). "
                "Consider: chmod 600 " + path
            )
    except OSError:
        pass
    return warnings


def load_config(path=None, fallback=_UNSET):
    """Load a JSON config file, returning *fallback* on failure.

    Ecosystem files hold no secrets and are usually committed, so their
    modes are not checked; check_config_permissions guards the env file.

    Args:
        path: File to read. Defaults to ECOSYSTEM_JSON.
        fallback: Value to return if the file cannot be loaded.
                  Defaults to empty dict {} when not specified.
    """
    if fallback is _UNSET:
        fallback = {}
    path = path or ECOSYSTEM_JSON
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError, PermissionError):
        log.debug("Could not load %s, using fallback", path)
        return fallback
