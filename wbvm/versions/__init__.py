"""Release catalog and version resolution."""

from .models import ReleaseRecord, AssetRecord
from .catalog import CatalogStore, ReleaseIndexClient
from .resolver import Platform, detect_platform, resolve, select_asset, LATEST

__all__ = [
    "ReleaseRecord", "AssetRecord", "CatalogStore", "ReleaseIndexClient",
    "Platform", "detect_platform", "resolve", "select_asset", "LATEST",
]
