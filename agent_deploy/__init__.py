"""
agent-deploy - deployment helpers for the base-agent application

- Launch descriptor for a PM2-style process manager
- One-off repair of broken emoji sequences in the agent source

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .utils import setup_logging
from .launch import LaunchDescriptor, load_apps
from .patching import EMOJI_REPLACEMENTS, patch_file

__all__ = [
    "setup_logging",
    "LaunchDescriptor",
    "load_apps",
    "EMOJI_REPLACEMENTS",
    "patch_file",
]
