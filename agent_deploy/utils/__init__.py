"""
Utility modules for agent-deploy.

Provides logging setup, canonical paths and JSON config loading.
"""

from .log import setup_logging
from .common import check_config_permissions, load_config

__all__ = [
    "setup_logging",
    "check_config_permissions",
    "load_config",
]
