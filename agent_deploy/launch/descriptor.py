"""
Launch descriptor for the external process manager.

A LaunchDescriptor is inert data: it records how a PM2-style supervisor
should start one application instance (entry point, interpreter, env file,
per-profile variables, log destinations). Nothing here spawns or watches
a process. The helpers only answer questions about the declaration:

- what command line would be executed
- which environment variables are in effect for a given profile
- where stdout, stderr and combined output are written

Usage:
    from agent_deploy.launch import load_apps

    for app in load_apps():
        print(app.name, app.command(), app.environment("production"))
"""
import json
import logging
import os
import shlex
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dotenv import dotenv_values

from ..utils.common import check_config_permissions, load_config

log = logging.getLogger("descriptor")

PRODUCTION = "production"
PROFILES = (PRODUCTION,)

_PATH_FIELDS = ("interpreter", "interpreter_args", "env_file",
                "error_file", "out_file", "log_file")
_ENV_FIELDS = ("env", "env_production")
KNOWN_KEYS = ("name", "script") + _PATH_FIELDS + _ENV_FIELDS + ("time",)


class UnknownProfileError(ValueError):
    """Raised when an environment profile has no ``env_<profile>`` block."""

    def __init__(self, profile: str):
        super().__init__(
            f"unknown profile {profile!r}, expected one of {PROFILES}"
        )
        self.profile = profile


@dataclass
class LaunchDescriptor:
    """Declaration of one supervised application instance."""

    name: str
    script: str
    interpreter: Optional[str] = None
    interpreter_args: Optional[str] = None
    env_file: Optional[str] = None
    env: Dict[str, str] = field(default_factory=dict)
    env_production: Dict[str, str] = field(default_factory=dict)
    error_file: Optional[str] = None
    out_file: Optional[str] = None
    log_file: Optional[str] = None
    time: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LaunchDescriptor":
        """Build a descriptor, ignoring keys this model does not know."""
        return cls(**{k: v for k, v in data.items() if k in KNOWN_KEYS})

    def to_dict(self) -> Dict[str, Any]:
        """Return the declaration with its original key names, dropping unset paths."""
        data: Dict[str, Any] = {
            "name": self.name,
            "script": self.script,
            "interpreter": self.interpreter,
            "interpreter_args": self.interpreter_args,
            "env_file": self.env_file,
            "env": dict(self.env),
            "env_production": dict(self.env_production),
            "error_file": self.error_file,
            "out_file": self.out_file,
            "log_file": self.log_file,
            "time": self.time,
        }
        return {k: v for k, v in data.items() if v is not None}

    def command(self) -> List[str]:
        """Argument vector the supervisor would execute."""
        argv: List[str] = []
        if self.interpreter:
            argv.append(self.interpreter)
            if self.interpreter_args:
                argv.extend(shlex.split(self.interpreter_args))
        argv.append(self.script)
        return argv

    def env_file_path(self, base_dir: Optional[str] = None) -> Optional[str]:
        if not self.env_file:
            return None
        if base_dir and not os.path.isabs(self.env_file):
            return os.path.join(base_dir, self.env_file)
        return self.env_file

    def load_env_file(self, base_dir: Optional[str] = None) -> Dict[str, str]:
        """Variables defined in ``env_file``; empty when the file is absent."""
        path = self.env_file_path(base_dir)
        if path is None:
            return {}
        if not os.path.isfile(path):
            log.debug(f"{self.name}: env file {path} not found, skipping")
            return {}
        for warning in check_config_permissions(path):
            log.warning(warning)
        values = dotenv_values(path)
        return {k: v for k, v in values.items() if v is not None}

    def environment(self, profile: Optional[str] = None,
                    base_dir: Optional[str] = None) -> Dict[str, str]:
        """
        Effective environment for *profile*.

        Precedence, lowest first: env file, ``env``, ``env_<profile>``.

        Raises:
            UnknownProfileError: profile is not None and not supported
        """
        if profile is not None and profile not in PROFILES:
            raise UnknownProfileError(profile)

        merged = self.load_env_file(base_dir)
        merged.update(self.env)
        if profile == PRODUCTION:
            merged.update(self.env_production)
        return merged

    def log_paths(self) -> Dict[str, Optional[str]]:
        return {
            "error": self.error_file,
            "out": self.out_file,
            "combined": self.log_file,
        }


def validate_descriptor(data: Any) -> List[str]:
    """Return advisory warnings for a raw descriptor mapping.

    Malformed values are ultimately the supervisor's problem; these checks
    are only logged and never block loading.
    """
    if not isinstance(data, dict):
        return ["app entry is not a JSON object"]

    warnings = []
    label = data.get("name") if isinstance(data.get("name"), str) else "<unnamed>"

    for key in ("name", "script"):
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            warnings.append(f"{label}: {key} must be a non-empty string")

    for key in _PATH_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            warnings.append(f"{label}: {key} must be a string, got {type(value).__name__}")

    for key in _ENV_FIELDS:
        block = data.get(key)
        if block is None:
            continue
        if not isinstance(block, dict):
            warnings.append(f"{label}: {key} must be a mapping")
            continue
        for var, value in block.items():
            if not isinstance(value, str):
                warnings.append(
                    f"{label}: {key}.{var} should be a string, got {type(value).__name__}"
                )

    timed = data.get("time")
    if timed is not None and not isinstance(timed, bool):
        warnings.append(f"{label}: time must be true or false, got {timed!r}")

    for key in data:
        if key not in KNOWN_KEYS:
            warnings.append(f"{label}: unrecognized option {key!r}")

    return warnings


def load_raw_apps(path: Optional[str] = None) -> List[Any]:
    """Raw app entries from a JSON ecosystem file or the built-in data.

    A missing or unreadable JSON file yields an empty list.
    """
    if path is None:
        import ecosystem_config
        return list(ecosystem_config.APPS)
    cfg = load_config(path, fallback={})
    apps = cfg.get("apps", []) if isinstance(cfg, dict) else []
    return apps if isinstance(apps, list) else []


def usable_fields(data: Any) -> Optional[Dict[str, Any]]:
    """
    Subset of a raw entry that the descriptor helpers can work with.

    Returns None when ``name`` or ``script`` is not a non-empty string.
    Path fields that are not strings and env blocks that are not mappings
    are dropped; env values that are not strings are converted with str().
    Whatever is dropped here has already been reported by validate_descriptor.
    """
    if not isinstance(data, dict):
        return None
    for key in ("name", "script"):
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            return None

    fields = {"name": data["name"], "script": data["script"]}
    for key in _PATH_FIELDS:
        if isinstance(data.get(key), str):
            fields[key] = data[key]
    for key in _ENV_FIELDS:
        block = data.get(key)
        if isinstance(block, dict):
            fields[key] = {str(k): v if isinstance(v, str) else str(v)
                           for k, v in block.items()}
    if isinstance(data.get("time"), bool):
        fields["time"] = data["time"]
    return fields


def build_apps(raw_apps: List[Any]) -> List[LaunchDescriptor]:
    """Descriptors for raw entries, logging advisory warnings and skipping unusable ones."""
    apps = []
    for raw in raw_apps:
        for warning in validate_descriptor(raw):
            log.warning(warning)
        fields = usable_fields(raw)
        if fields is None:
            continue
        apps.append(LaunchDescriptor.from_dict(fields))
    log.debug(f"Loaded {len(apps)} app descriptor(s)")
    return apps


def load_apps(path: Optional[str] = None) -> List[LaunchDescriptor]:
    """Load descriptors from a JSON ecosystem file or the built-in data."""
    return build_apps(load_raw_apps(path))


def timestamps_enabled(raw_apps: List[Any]) -> bool:
    """True when any declared app asks for timestamped log lines."""
    return any(isinstance(raw, dict) and raw.get("time") is True for raw in raw_apps)


def write_ecosystem(path: str, apps: List[LaunchDescriptor]) -> None:
    """Write ``{"apps": [...]}`` JSON that a PM2-style manager can start from."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"apps": [app.to_dict() for app in apps]}, f, indent=2)
        f.write("\n")
    log.info(f"Wrote {len(apps)} app(s) to {path}")
