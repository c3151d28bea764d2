"""Download and unpack collaborators for release archives."""

import asyncio
import logging
import zipfile
import zlib
from pathlib import Path

import aiohttp

from ..errors import ExtractFailed, FetchFailed
from ..utils import AsyncHTTPClient

logger = logging.getLogger(__name__)


class DownloadManager:
    def __init__(self, http: AsyncHTTPClient):
        self.http = http

    async def download_file(self, url: str, dest: Path) -> Path:
        """Download ``url`` into ``dest``."""
        dest.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Downloading %s", url)
        try:
            size = await self.http.stream_to(url, dest)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise FetchFailed(f"Could not download {url}: {e}") from e
        logger.debug("Wrote %d bytes to %s", size, dest)
        return dest


class ZipExtractor:
    """Unpacks zip archives."""

    def extract(self, archive: Path, dest: Path) -> Path:
        try:
            with zipfile.ZipFile(archive, 'r') as zip_ref:
                zip_ref.extractall(dest)
        # corrupt streams surface as zlib.error/EOFError, encrypted members as
        # RuntimeError, unknown compression methods as NotImplementedError
        except (zipfile.BadZipFile, zlib.error, EOFError, RuntimeError,
                NotImplementedError, OSError) as e:
            raise ExtractFailed(f"Could not extract {archive.name}: {e}") from e
        return dest
