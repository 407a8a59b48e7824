"""
Configuration management for FreakFest media.

Config sources:
- flyers.json: Ordered canonical flyer slots (optional, bundled defaults otherwise)
- Environment: assets root, lineup sheet, artist cache lifetime
"""

from .slots import CanonicalSlot, FlyerSlotsConfig, DEFAULT_FLYER_SLOTS
from .settings import (
    AssetCategory,
    CATEGORIES,
    MediaSettings,
    get_category,
)

__all__ = [
    "CanonicalSlot",
    "FlyerSlotsConfig",
    "DEFAULT_FLYER_SLOTS",
    "AssetCategory",
    "CATEGORIES",
    "MediaSettings",
    "get_category",
]
