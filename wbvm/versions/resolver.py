"""Maps user version tokens and host platforms onto releases and assets."""

import logging
import platform
from enum import Enum
from typing import Dict, List, Optional

from ..errors import AssetNotFound, UnsupportedPlatform, VersionNotFound
from .models import AssetRecord, ReleaseRecord

logger = logging.getLogger(__name__)

LATEST = "latest"


class Platform(str, Enum):
    LINUX_X64 = "linux-x64"
    WINDOWS_X64 = "windows-x64"
    MACOS_X64 = "macos-x64"


PLATFORM_TRIPLES: Dict[Platform, str] = {
    Platform.LINUX_X64: "x86_64-unknown-linux-gnu",
    Platform.WINDOWS_X64: "x86_64-pc-windows-msvc",
    Platform.MACOS_X64: "x86_64-apple-darwin",
}

_SYSTEMS = {
    "linux": "linux",
    "windows": "windows",
    "darwin": "macos",
}

_ARCHES = {
    "x86_64": "x64",
    "amd64": "x64",
}


def detect_platform(system: Optional[str] = None, machine: Optional[str] = None) -> Platform:
    """Get the platform identifier of the running host."""
    system = (system or platform.system()).lower()
    machine = (machine or platform.machine()).lower()

    os_id = _SYSTEMS.get(system, system)
    arch_id = _ARCHES.get(machine, machine)
    try:
        return Platform(f"{os_id}-{arch_id}")
    except ValueError:
        raise UnsupportedPlatform(f"{system}/{machine}") from None


def asset_name_for(product: str, platform_id) -> str:
    """Expected archive name for a platform, e.g. worterbuch-x86_64-apple-darwin.zip."""
    try:
        triple = PLATFORM_TRIPLES[Platform(platform_id)]
    except (ValueError, KeyError):
        raise UnsupportedPlatform(str(platform_id)) from None
    return f"{product}-{triple}.zip"


def resolve(token: str, catalog: List[ReleaseRecord], prefix: str = "v") -> ReleaseRecord:
    """Turn "latest" or a bare version string into a release from the catalog."""
    if token == LATEST:
        if not catalog:
            raise VersionNotFound(LATEST)
        return catalog[0]

    name = prefix + token
    for release in catalog:
        if release.name == name:
            return release
    raise VersionNotFound(name)


def select_asset(release: ReleaseRecord, platform_id, product: str = "worterbuch") -> AssetRecord:
    """Pick the archive of ``release`` built for ``platform_id``."""
    expected = asset_name_for(product, platform_id)
    matches = [a for a in release.assets if a.name == expected]
    if not matches:
        raise AssetNotFound(release.name, expected)
    if len(matches) > 1:
        logger.warning(
            "Release %s lists %d assets named %s, using the first one",
            release.name, len(matches), expected,
        )
    return matches[0]
