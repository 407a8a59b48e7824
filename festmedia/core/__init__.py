"""
Core utilities for FreakFest media.

Shared paths, file operations, formatting and logging.
"""

from .paths import (
    get_app_dir,
    get_data_dir,
    get_log_path,
    get_assets_root,
    get_flyers_dir,
    get_gallery_dir,
    get_venue_dir,
    get_slots_config_path,
)

from .files import (
    is_lfs_pointer,
    write_json_atomic,
)

from .formatting import (
    format_duration,
    normalize_name_key,
    name_sort_key,
    sort_by_name,
)

from .logging import TeeOutput, log, debug_log

__all__ = [
    # Paths
    "get_app_dir",
    "get_data_dir",
    "get_log_path",
    "get_assets_root",
    "get_flyers_dir",
    "get_gallery_dir",
    "get_venue_dir",
    "get_slots_config_path",
    # Files
    "is_lfs_pointer",
    "write_json_atomic",
    # Formatting
    "format_duration",
    "normalize_name_key",
    "name_sort_key",
    "sort_by_name",
    # Logging
    "TeeOutput",
    "log",
    "debug_log",
]
