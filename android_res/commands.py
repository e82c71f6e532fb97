"""
The ls, cp and mv operations.

Each takes a ResConfig, collects the matching entries once and then lists
or places them. Errors are not caught here.
"""

from .config import ResConfig
from .executor import place_entries
from .listing import render_listing
from .scanner import collect_entries


def ls(config: ResConfig) -> str:
    """Return the bucket listing for the configured type and sources."""
    entries = collect_entries(config.res_type, config.sources)
    return render_listing(config.res_type, entries)


def _cp_or_mv(config: ResConfig, delete_source: bool, on_placed=None) -> dict:
    entries = collect_entries(config.res_type, config.sources)
    return place_entries(
        entries,
        config.dest,
        delete_source=delete_source,
        dry_run=config.dry_run,
        progress=config.progress,
        on_placed=on_placed,
    )


def cp(config: ResConfig, on_placed=None) -> dict:
    """Copy every bucket variant of the matching resources to config.dest."""
    return _cp_or_mv(config, False, on_placed)


def mv(config: ResConfig, on_placed=None) -> dict:
    """Move every bucket variant of the matching resources to config.dest."""
    return _cp_or_mv(config, True, on_placed)

