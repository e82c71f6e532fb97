"""
Resource directory scanning.

Walks the qualifier directories (drawable, drawable-mdpi, ...) of a resource
tree and groups the resource files found in them by sanitized name.
"""

from collections import defaultdict
from pathlib import Path
from typing import Iterable

from .utils import is_resource_type_dir, is_resource_file, sanitize_name


def resolve_source(source: Path) -> tuple[Path, str | None]:
    """
    Split a source argument into the directory to search and a name filter.

    Args:
        source: Either a resource root directory, or a path whose final
            component names a single resource file (the file itself lives
            in the bucket directories next to it, not at this path).

    Returns:
        (search_root, name_filter); name_filter is None for a directory.

    Raises:
        FileNotFoundError: If the source has no file name to filter on.
    """
    if source.is_dir():
        return source, None

    if not source.name:
        raise FileNotFoundError(f"Cannot determine parent directory of: {source}")
    return source.parent, source.name


def _sorted_children(directory: Path) -> list[Path]:
    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")
    return sorted(directory.iterdir(), key=lambda p: p.name)


def scan_source(res_type: str, source: Path):
    """
    Yield (sanitized_name, path) for every resource file matched by a source.

    Args:
        res_type: Resource type prefix, e.g. "drawable".
        source: Directory or single-file source (see resolve_source).

    Yields:
        Tuples of sanitized name and file path, bucket by bucket.
    """
    search_root, name_filter = resolve_source(source)

    for bucket_dir in _sorted_children(search_root):
        if not bucket_dir.is_dir() or not is_resource_type_dir(res_type, bucket_dir):
            continue

        for filepath in _sorted_children(bucket_dir):
            if not filepath.is_file() or not is_resource_file(filepath):
                continue

            # The filter compares raw names, before sanitizing
            if name_filter is not None and filepath.name != name_filter:
                continue

            name = sanitize_name(filepath)
            if name is None:
                continue

            yield name, filepath


def collect_entries(res_type: str, sources: Iterable[Path]) -> dict[str, list[Path]]:
    """
    Group the resource files of every source by sanitized name.

    Later sources append to the names found by earlier ones; duplicates are
    kept as-is.

    Args:
        res_type: Resource type prefix, e.g. "drawable".
        sources: Source directories or single-file sources.

    Returns:
        Dict mapping sanitized name to the file paths, one per bucket.

    Raises:
        FileNotFoundError: If a directory to search does not exist.
        OSError: If a directory cannot be read.
    """
    files: dict[str, list[Path]] = defaultdict(list)

    for source in sources:
        for name, filepath in scan_source(res_type, Path(source)):
            files[name].append(filepath)

    return dict(files)
