"""
agent-ecosystem: inspect and export the launch descriptor.

Prints what the external process manager would run for each declared app
(command line, effective environment, log destinations). Nothing is
started.

Usage:
    agent-ecosystem                      # built-in declaration, default profile
    agent-ecosystem --env production     # resolve the production overlay
    agent-ecosystem --check              # advisory warnings, exit 1 if any
    agent-ecosystem --export ecosystem.config.json
    agent-ecosystem -v --log-file logs/agent-ecosystem.log
"""
import argparse
import json
import logging
import os
import sys

from .launch import (
    UnknownProfileError,
    build_apps,
    load_raw_apps,
    timestamps_enabled,
    validate_descriptor,
    write_ecosystem,
)
from .utils.log import setup_logging

log = logging.getLogger("cli")


def build_plan(app, profile=None, base_dir=None):
    """Resolved launch plan for one app as a plain dict."""
    return {
        "name": app.name,
        "command": app.command(),
        "profile": profile or "default",
        "environment": app.environment(profile, base_dir=base_dir),
        "logs": app.log_paths(),
        "timestamped": app.time,
    }


def format_plan(plan):
    lines = [f"{plan['name']} ({plan['profile']})"]
    lines.append(f"  command:     {' '.join(plan['command'])}")
    lines.append("  environment:")
    for key in sorted(plan["environment"]):
        lines.append(f"    {key}={plan['environment'][key]}")
    for kind, path in plan["logs"].items():
        lines.append(f"  {kind + ' log:':<12} {path or '-'}")
    lines.append(f"  timestamps:  {'yes' if plan['timestamped'] else 'no'}")
    return "\n".join(lines)


def run_check(raw_apps):
    """Print advisory warnings for every raw app entry. Returns the warning count."""
    count = 0
    for raw in raw_apps:
        for warning in validate_descriptor(raw):
            print(f"WARNING: {warning}")
            count += 1
    if not count:
        print(f"OK: {len(raw_apps)} app(s), no warnings")
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="agent-ecosystem",
        description="Inspect the process manager launch descriptor",
    )
    parser.add_argument(
        '--config', metavar='PATH',
        help="JSON ecosystem file (default: built-in declaration)",
    )
    parser.add_argument(
        '--env', metavar='NAME', dest='profile',
        help="Environment profile to resolve (e.g. production)",
    )
    parser.add_argument(
        '--export', metavar='PATH',
        help="Write the declaration as ecosystem JSON",
    )
    parser.add_argument('--check', action='store_true', help="Report advisory warnings")
    parser.add_argument('--json', action='store_true', help="Print plans as JSON")
    parser.add_argument(
        '--log-file', metavar='PATH',
        help="Also write log lines to a rotating file",
    )
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    args = parser.parse_args(argv)

    raw_apps = load_raw_apps(args.config)
    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
        timestamps=timestamps_enabled(raw_apps),
    )
    if not raw_apps:
        print("No apps declared.", file=sys.stderr)
        return 1

    if args.check:
        return 1 if run_check(raw_apps) else 0

    apps = build_apps(raw_apps)
    if not apps:
        print("No apps declared.", file=sys.stderr)
        return 1

    if args.export:
        write_ecosystem(args.export, apps)
        print(f"Exported {len(apps)} app(s) to {args.export}")
        return 0

    base_dir = os.path.dirname(os.path.abspath(args.config)) if args.config else os.getcwd()
    log.debug(f"Resolving env files relative to {base_dir}")
    try:
        plans = [build_plan(app, args.profile, base_dir) for app in apps]
    except UnknownProfileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(plans, indent=2))
    else:
        print("\n\n".join(format_plan(plan) for plan in plans))
    return 0


if __name__ == "__main__":
    sys.exit(main())
