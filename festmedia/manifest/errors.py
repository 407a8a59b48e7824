"""
Manifest generation errors.

These never escape build_manifest(): it logs them and degrades to an empty
or unchanged manifest so a bad asset folder can't take the site down.
"""


class ManifestError(Exception):
    """Base class for manifest generation errors."""


class DirectoryUnreadable(ManifestError):
    """Asset directory is missing or can't be listed."""


class ManifestWriteError(ManifestError):
    """manifest.json could not be written; the previous file is untouched."""
