"""
Plain-text listing of which qualifier buckets hold each resource.
"""

from pathlib import Path

from .utils import bucket_suffix


def entry_buckets(res_type: str, paths: list[Path]) -> list[str]:
    """Get the qualifiers of the directories holding an entry's files."""
    buckets = []
    for path in paths:
        bucket = bucket_suffix(res_type, path.parent.name)
        if bucket is not None:
            buckets.append(bucket)
    return buckets


def bucket_columns(res_type: str, entries: dict[str, list[Path]]) -> list[str]:
    """
    Get the listing columns: every qualifier, in the order first met while
    walking the entries sorted by name.
    """
    columns: list[str] = []
    seen: set[str] = set()
    for name in sorted(entries):
        for bucket in entry_buckets(res_type, entries[name]):
            if bucket not in seen:
                seen.add(bucket)
                columns.append(bucket)
    return columns


def render_listing(res_type: str, entries: dict[str, list[Path]]) -> str:
    """
    Render one line per resource name with a column per qualifier.

    Example for a tree holding drawable-hdpi/icon.png, drawable-mdpi/icon.png
    and drawable-mdpi/logo.png:

        icon.png hdpi mdpi
        logo.png      mdpi

    Args:
        res_type: Resource type prefix, e.g. "drawable".
        entries: Output of collect_entries().

    Returns:
        The table text, every line newline-terminated ("" if no entries).
    """
    name_width = max((len(name) for name in entries), default=0)
    columns = bucket_columns(res_type, entries)

    lines = []
    for name in sorted(entries):
        buckets = set(entry_buckets(res_type, entries[name]))
        line = name.ljust(name_width)
        for column in columns:
            line += " " + (column if column in buckets else " " * len(column))
        lines.append(line + "\n")

    return "".join(lines)
