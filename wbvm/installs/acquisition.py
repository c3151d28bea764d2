"""Fetch, unpack and place a release archive."""

import logging
import os
import shutil
from pathlib import Path

from ..errors import FilesystemFailed
from ..versions.models import AssetRecord, ReleaseRecord
from .tracker import InstallationTracker

logger = logging.getLogger(__name__)


class AcquisitionPipeline:
    """Installs one release asset into its version directory.

    Work happens under the staging directory; the finished tree is renamed
    to ``<root>/<version>`` last, so a version directory only ever appears
    complete. A failed attempt leaves its staging files behind for
    inspection; the next attempt clears them.
    """

    EXECUTABLE_MODE = 0o755

    def __init__(self, tracker: InstallationTracker, staging_dir: Path,
                 downloader, extractor, prefix: str = "v"):
        self.tracker = tracker
        self.staging_dir = staging_dir
        self.downloader = downloader
        self.extractor = extractor
        self.prefix = prefix

    async def acquire(self, release: ReleaseRecord, asset: AssetRecord) -> Path:
        version = release.bare_version(self.prefix)
        if not self.tracker.is_valid_version(version):
            raise FilesystemFailed(
                f"Release {release.name!r} does not name a usable version directory"
            )
        version_dir = self.tracker.version_dir(version)
        if self.tracker.is_installed(version):
            logger.info("Version %s is already installed", version)
            return version_dir

        archive = self.staging_dir / asset.name
        unpack_dir = self.staging_dir / version
        self._prepare_staging(unpack_dir)

        await self.downloader.download_file(asset.download_url, archive)
        logger.info("Extracting %s", asset.name)
        self.extractor.extract(archive, unpack_dir)
        self._mark_executable(unpack_dir)
        self._move_into_place(unpack_dir, version_dir)

        archive.unlink(missing_ok=True)
        logger.debug("Installed %s into %s", release.name, version_dir)
        return version_dir

    def _prepare_staging(self, unpack_dir: Path):
        try:
            self.staging_dir.mkdir(parents=True, exist_ok=True)
            if unpack_dir.exists():
                logger.debug("Clearing leftover staging directory %s", unpack_dir)
                shutil.rmtree(unpack_dir)
        except OSError as e:
            raise FilesystemFailed(f"Could not prepare {self.staging_dir}: {e}") from e

    def _mark_executable(self, directory: Path):
        try:
            for item in directory.iterdir():
                if item.is_file() and not item.is_symlink():
                    os.chmod(item, self.EXECUTABLE_MODE)
        except OSError as e:
            raise FilesystemFailed(f"Could not set permissions in {directory}: {e}") from e

    def _move_into_place(self, unpack_dir: Path, version_dir: Path):
        try:
            if version_dir.is_symlink():
                version_dir.unlink()
            elif version_dir.exists():
                # left over from an install that predates staging
                logger.warning("Replacing incomplete installation at %s", version_dir)
                shutil.rmtree(version_dir)
            unpack_dir.rename(version_dir)
        except OSError as e:
            raise FilesystemFailed(f"Could not move {unpack_dir} to {version_dir}: {e}") from e
