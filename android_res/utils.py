"""
Utility functions for the Android resource tool.

Includes:
- Console helpers
- Resource name sanitizing
- Resource directory / file classification
"""

from pathlib import Path
from rich.console import Console
from rich.markup import escape

# Data goes to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


def print_error(msg: str):
    err_console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}", highlight=False, soft_wrap=True)

def print_warning(msg: str):
    err_console.print(f"[bold yellow]WARNING:[/bold yellow] {escape(msg)}", highlight=False, soft_wrap=True)

def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}", highlight=False, soft_wrap=True)

def print_info(msg: str):
    console.print(f"[INFO] {msg}", markup=False, highlight=False, soft_wrap=True)


# -----------------------------------------------------------------------------
# Resource naming
# -----------------------------------------------------------------------------

RESOURCE_EXTENSIONS = {"png", "xml"}

_PASSTHROUGH_CHARS = set("abcdefghijklmnopqrstuvwxyz0123456789._")
_UPPERCASE_CHARS = set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_UNDERSCORE_CHARS = set(" -")


def sanitize_name(path: str | Path) -> str | None:
    """
    Turn a file name into a lowercase, filesystem-safe resource name.

    Lowercase ASCII letters, digits, '.' and '_' are kept, uppercase ASCII
    letters are lowered, space and '-' become '_', anything else is dropped.

    Args:
        path: A file name or a path; only the final component is used.

    Returns:
        The sanitized name, or None if the path has no file name.
    """
    name = Path(path).name
    if not name:
        return None

    chars = []
    for c in name:
        if c in _PASSTHROUGH_CHARS:
            chars.append(c)
        elif c in _UPPERCASE_CHARS:
            chars.append(c.lower())
        elif c in _UNDERSCORE_CHARS:
            chars.append("_")
    return "".join(chars)


def is_resource_type_dir(res_type: str, path: str | Path) -> bool:
    """
    Check if a directory name belongs to a resource type.

    This is a plain prefix match, so both "drawable" and "drawable-mdpi"
    match "drawable" (and so does "drawableX").
    """
    name = Path(path).name
    if not name:
        return False
    return name.startswith(res_type)


def is_resource_file(path: str | Path) -> bool:
    """Check if a path has a resource extension (png or xml, case-sensitive)."""
    suffix = Path(path).suffix
    return suffix[1:] in RESOURCE_EXTENSIONS if suffix else False


def bucket_suffix(res_type: str, dir_name: str) -> str | None:
    """
    Get the qualifier of a resource directory name.

    Args:
        res_type: Resource type, e.g. "drawable".
        dir_name: Directory name, e.g. "drawable-mdpi".

    Returns:
        The text after the last '-' ("mdpi"), or None for the unqualified
        directory (when that text is the resource type itself) or an empty
        qualifier.
    """
    suffix = dir_name.rsplit("-", 1)[-1]
    if not suffix or suffix == res_type:
        return None
    return suffix
