"""
Copy and move execution for the Android resource tool.

Places collected resource files under a destination tree, keeping each
file's qualifier directory (drawable-mdpi, layout-land, ...).
"""

import shutil
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator
from tqdm import tqdm


@dataclass(frozen=True)
class Placement:
    """A single source file and where it ends up."""
    source: Path
    destination: Path
    bucket: str
    name: str


def resolve_destination(dest: Path) -> tuple[Path, str | None]:
    """
    Split a destination argument into the root directory and a file name.

    An existing directory keeps the sanitized names; anything else is taken
    as a file path whose name replaces the name of every placed file.

    Returns:
        (dest_root, override_name); override_name is None for a directory.
    """
    if dest.is_dir():
        return dest, None
    return dest.parent, dest.name


def plan_placements(entries: dict[str, list[Path]], dest: Path) -> Iterator[Placement]:
    """
    Yield the placement of every collected file, entries in name order.

    The destination is dest_root / <original bucket directory> / <name>.
    """
    dest_root, override_name = resolve_destination(dest)

    for name in sorted(entries):
        target_name = override_name if override_name is not None else name
        for path in entries[name]:
            bucket = path.parent.name
            yield Placement(
                source=path,
                destination=dest_root / bucket / target_name,
                bucket=bucket,
                name=target_name,
            )


def place_entries(
    entries: dict[str, list[Path]],
    dest: Path,
    delete_source: bool = False,
    dry_run: bool = False,
    progress: bool = False,
    on_placed=None,
) -> dict:
    """
    Copy (or move) collected resource files into a destination.

    Stops at the first failure; files already placed stay where they are.

    Args:
        entries: Output of collect_entries().
        dest: Destination directory, or file path to rename every file to.
        delete_source: If True, remove each source after copying it (move).
        dry_run: If True, only compute the placements.
        progress: If True, show a progress bar on stderr.
        on_placed: Optional callback called with each Placement once done.

    Returns:
        Report dict with counts, the collisions and the destination root.

    Raises:
        OSError: If a directory cannot be created, or a copy or delete fails.
    """
    placements = list(plan_placements(entries, dest))
    dest_root, _ = resolve_destination(dest)

    # Destinations written more than once; the last copy wins
    targets = Counter(p.destination for p in placements)
    collisions = sorted(str(d) for d, count in targets.items() if count > 1)

    placed_count = 0
    deleted_count = 0
    created_dirs: set[Path] = set()

    with tqdm(total=len(placements), unit="file", disable=not progress or dry_run) as pbar:
        for placement in placements:
            if not dry_run:
                parent = placement.destination.parent
                if not parent.is_dir():
                    parent.mkdir(parents=True, exist_ok=True)
                    created_dirs.add(parent)

                # Fails if the destination is a directory
                shutil.copyfile(placement.source, placement.destination)
                shutil.copymode(placement.source, placement.destination)

                if delete_source:
                    placement.source.unlink()
                    deleted_count += 1

            placed_count += 1
            if on_placed is not None:
                on_placed(placement)
            pbar.update(1)

    return {
        "dest_root": str(dest_root),
        "placed_count": placed_count,
        "deleted_count": deleted_count,
        "created_dirs_count": len(created_dirs),
        "collisions": collisions,
    }
