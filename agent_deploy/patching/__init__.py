"""
One-off text repair helpers.
"""

from .emoji import (
    EMOJI_REPLACEMENTS,
    apply_replacements,
    count_matches,
    patch_file,
)

__all__ = [
    "EMOJI_REPLACEMENTS",
    "apply_replacements",
    "count_matches",
    "patch_file",
]
