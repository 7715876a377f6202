#!/usr/bin/env python3
"""
Repair broken emoji sequences in index.js, in place.

Run once from the agent's directory:

    python fix_emoji.py

No backup is taken. Any file error aborts with a traceback.
"""
import logging

from agent_deploy.patching import patch_file
from agent_deploy.utils.common import PATCH_TARGET
from agent_deploy.utils.log import setup_logging


def main():
    # Per-rule counts are logged at DEBUG; the console only shows problems.
    setup_logging(level=logging.WARNING)
    patch_file(PATCH_TARGET)
    print("All broken emojis have been fixed!")


if __name__ == "__main__":
    main()
