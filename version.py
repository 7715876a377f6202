"""
Version information for agent-deploy.
"""

MAJOR = 1
MINOR = 0
PATCH = 0

__version__ = f"{MAJOR}.{MINOR}.{PATCH}"


def get_version() -> str:
    """Get the full version string."""
    return __version__
