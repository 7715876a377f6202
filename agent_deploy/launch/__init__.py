"""
Process launch descriptor model.

Describes how an external process manager starts the application;
no process control happens in this package.
"""

from .descriptor import (
    LaunchDescriptor,
    UnknownProfileError,
    build_apps,
    load_apps,
    load_raw_apps,
    timestamps_enabled,
    usable_fields,
    validate_descriptor,
    write_ecosystem,
)

__all__ = [
    "LaunchDescriptor",
    "UnknownProfileError",
    "build_apps",
    "load_apps",
    "load_raw_apps",
    "timestamps_enabled",
    "usable_fields",
    "validate_descriptor",
    "write_ecosystem",
]
