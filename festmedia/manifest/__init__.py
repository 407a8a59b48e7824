"""
Manifest generation for FreakFest media.

Resolves asset folder listings into the manifest.json files the frontend
reads for its flyer, gallery and venue sections.
"""

from .errors import ManifestError, DirectoryUnreadable, ManifestWriteError
from .manifest import Manifest, MANIFEST_KINDS
from .normalize import (
    IMAGE_EXTENSIONS,
    is_image_file,
    is_resource_fork,
    is_manifest_candidate,
    normalize_flyer_name,
    numbered_copy_base,
)
from .resolver import (
    ResolveResult,
    filter_candidates,
    dedupe_by_key,
    order_by_slots,
    resolve,
)
from .builder import (
    list_image_files,
    apply_aliases,
    build_manifest,
    build_all_manifests,
)

__all__ = [
    # Errors
    "ManifestError",
    "DirectoryUnreadable",
    "ManifestWriteError",
    # Model
    "Manifest",
    "MANIFEST_KINDS",
    # Normalization
    "IMAGE_EXTENSIONS",
    "is_image_file",
    "is_resource_fork",
    "is_manifest_candidate",
    "normalize_flyer_name",
    "numbered_copy_base",
    # Resolution
    "ResolveResult",
    "filter_candidates",
    "dedupe_by_key",
    "order_by_slots",
    "resolve",
    # Directory builds
    "list_image_files",
    "apply_aliases",
    "build_manifest",
    "build_all_manifests",
]
