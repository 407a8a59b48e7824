"""
File helpers for FreakFest media.
"""

import json
import os
from pathlib import Path


# git-lfs pointer files are tiny text files starting with this line
LFS_POINTER_PREFIX = b"version https://git-lfs.github.com/spec/v1"
LFS_POINTER_MAX_SIZE = 1024


def is_lfs_pointer(path: Path) -> bool:
    """
    Check if a file is a git-lfs pointer instead of real content.

    A pointer is left in place of the binary when the repo was cloned without
    LFS. It must be treated as an absent file.
    """
    try:
        if path.stat().st_size > LFS_POINTER_MAX_SIZE:
            return False
        with open(path, "rb") as f:
            head = f.read(len(LFS_POINTER_PREFIX))
    except OSError:
        return False
    return head == LFS_POINTER_PREFIX


def write_json_atomic(path: Path, data) -> None:
    """
    Atomic write: write to .tmp file, then rename.

    Readers see either the previous file or the complete new one. If anything
    fails the temp file is removed and the previous file is left untouched.
    """
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        try:
            tmp_path.unlink()
        except OSError:
            pass
        raise
