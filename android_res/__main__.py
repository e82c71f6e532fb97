#!/usr/bin/env python3
"""
Android Resource Tool - CLI Entry Point
=======================================

Usage:
    python -m android_res ls drawable app/src/main/res
    python -m android_res cp drawable app/src/main/res/ic_launcher.png lib/src/main/res
    python -m android_res mv drawable old/res/Icon.png new/res/icon_new.png
"""

import argparse
import sys

from . import __version__
from .commands import ls, cp, mv
from .config import ResConfig
from .utils import print_error, print_info, print_success, print_warning


def _report_placement(config: ResConfig):
    action = "MOVE" if config.delete_source else "COPY"

    def on_placed(placement):
        if config.dry_run:
            print_info(f"[DRY-RUN] Would {action.lower()} {placement.source} -> {placement.destination}")
        elif config.verbose:
            print_info(f"[{action}] {placement.source} -> {placement.destination}")

    return on_placed


def _finish_placement(config: ResConfig, report: dict) -> int:
    for collision in report["collisions"]:
        print_warning(f"Destination written more than once: {collision}")

    if report["placed_count"] == 0:
        print_warning(f"No '{config.res_type}' resources matched")
    elif config.dry_run:
        print_info(f"[DRY-RUN] {report['placed_count']} files, nothing was changed")
    elif config.verbose:
        verb = "moved" if config.delete_source else "copied"
        print_success(f"{report['placed_count']} files {verb} to {report['dest_root']}")
    return 0


def cmd_ls(config: ResConfig) -> int:
    """List command - print the buckets of each resource."""
    listing = ls(config)
    if not listing:
        print_warning(f"No '{config.res_type}' resources found")
    print(listing, end="")
    return 0


def cmd_cp(config: ResConfig) -> int:
    """Copy command - copy resources with all their buckets."""
    report = cp(config, on_placed=_report_placement(config))
    return _finish_placement(config, report)


def cmd_mv(config: ResConfig) -> int:
    """Move command - copy resources, then delete the sources."""
    report = mv(config, on_placed=_report_placement(config))
    return _finish_placement(config, report)


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="res",
        description="res: android resource management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"Version {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- LS command ---
    ls_parser = subparsers.add_parser("ls", aliases=["list"], help="List the buckets of each resource")
    ls_parser.add_argument("type", help="Resource type, e.g. drawable or layout")
    ls_parser.add_argument("paths", nargs="+", metavar="source",
                           help="Resource directory, or res_dir/<file name> for a single resource")
    ls_parser.set_defaults(func=cmd_ls)

    # --- CP / MV commands ---
    for name, alias, help_text, handler in (
        ("cp", "copy", "Copy resources with all their buckets", cmd_cp),
        ("mv", "move", "Move resources with all their buckets", cmd_mv),
    ):
        sub = subparsers.add_parser(name, aliases=[alias], help=help_text)
        sub.add_argument("type", help="Resource type, e.g. drawable or layout")
        sub.add_argument("paths", nargs="+", metavar="path",
                         help="Sources followed by the destination directory or file name")
        sub.add_argument("--dry-run", action="store_true",
                         help="Show what would be done without touching any file")
        sub.add_argument("--progress", action="store_true",
                         help="Show a progress bar")
        sub.add_argument("-v", "--verbose", action="store_true",
                         help="Print every file as it is placed")
        sub.set_defaults(func=handler)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = ResConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        return args.func(config)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except OSError as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
