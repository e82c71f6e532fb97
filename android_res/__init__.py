"""
Android Resource Tool
=====================

A command-line tool to list, copy and move Android resources (png and xml
files) together with all of their qualifier variants (drawable-mdpi,
drawable-hdpi, layout-land, ...).
"""

__version__ = "0.0.1"

from .config import ResConfig
from .commands import ls, cp, mv
from .scanner import collect_entries
from .listing import render_listing
from .executor import place_entries, Placement
from .utils import (
    sanitize_name,
    is_resource_type_dir,
    is_resource_file,
    bucket_suffix,
    RESOURCE_EXTENSIONS,
)

__all__ = [
    "ResConfig",
    "ls",
    "cp",
    "mv",
    "collect_entries",
    "render_listing",
    "place_entries",
    "Placement",
    "sanitize_name",
    "is_resource_type_dir",
    "is_resource_file",
    "bucket_suffix",
    "RESOURCE_EXTENSIONS",
]
