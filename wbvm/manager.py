"""Command-level orchestration of catalog, resolver, installs and alias."""

import logging
from typing import List, Optional

from .config import Settings
from .installs import (
    AcquisitionPipeline, ActivationManager, DownloadManager, InstallationTracker, ZipExtractor,
)
from .utils import AsyncHTTPClient
from .versions import CatalogStore, ReleaseIndexClient, ReleaseRecord, detect_platform, resolve, select_asset

logger = logging.getLogger(__name__)


class VersionManager:
    """Wires the components for one invocation.

    Collaborators can be injected; by default the release index client and
    downloader share one aiohttp session opened by ``async with``.
    """

    def __init__(self, settings: Optional[Settings] = None, provider=None,
                 downloader=None, extractor=None, platform_id=None):
        self.settings = settings or Settings()
        self.http: Optional[AsyncHTTPClient] = None
        self.platform_id = platform_id

        self.tracker = InstallationTracker(
            self.settings.root_dir,
            self.settings.executable_name,
            reserved=(self.settings.alias_name, self.settings.staging_name),
        )
        self.activation = ActivationManager(self.settings.alias_path, self.tracker)
        self.catalog = CatalogStore(self.settings.catalog_path, provider)
        self.acquisition = AcquisitionPipeline(
            self.tracker,
            self.settings.staging_dir,
            downloader,
            extractor or ZipExtractor(),
            prefix=self.settings.version_prefix,
        )

    async def __aenter__(self):
        self.settings.ensure_root()
        if self.catalog.provider is None or self.acquisition.downloader is None:
            self.http = await AsyncHTTPClient().__aenter__()
            if self.catalog.provider is None:
                self.catalog.provider = ReleaseIndexClient(self.http, self.settings.releases_url)
            if self.acquisition.downloader is None:
                self.acquisition.downloader = DownloadManager(self.http)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.http:
            await self.http.__aexit__(exc_type, exc, tb)
            self.http = None

    async def list_versions(self) -> List[str]:
        """Refresh the catalog and return one display line per release."""
        await self.catalog.refresh()
        if not self.catalog.exists():
            logger.warning("No releases known yet")
            return []
        releases = self.catalog.load()
        installed = self.tracker.list_installed()
        lines = []
        for release in releases:
            version = release.bare_version(self.settings.version_prefix)
            lines.append(f"{version} (installed)" if version in installed else version)
        return lines

    async def install(self, token: str) -> str:
        """Resolve ``token`` and install the matching platform archive."""
        release = await self.resolve(token)
        platform_id = self.platform_id or detect_platform()
        asset = select_asset(release, platform_id, self.settings.product_name)
        await self.acquisition.acquire(release, asset)
        return release.bare_version(self.settings.version_prefix)

    async def set_default(self, token: str) -> str:
        """Resolve ``token`` and make it the default version."""
        release = await self.resolve(token)
        version = release.bare_version(self.settings.version_prefix)
        self.activation.set_default(version)
        return version

    def get_default(self) -> Optional[str]:
        return self.activation.get_default()

    async def resolve(self, token: str) -> ReleaseRecord:
        if not self.catalog.exists():
            await self.catalog.refresh()
        return resolve(token, self.catalog.load(), self.settings.version_prefix)
