"""Local cache of the release index."""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, List

import aiohttp
from pydantic import ValidationError

from ..errors import CatalogUnavailable, FetchFailed
from ..utils import AsyncHTTPClient
from .models import ReleaseRecord

logger = logging.getLogger(__name__)


class ReleaseIndexClient:
    """Fetches the whole release list from the GitHub releases API."""

    HEADERS = {"Accept": "application/vnd.github+json"}

    def __init__(self, http: AsyncHTTPClient, url: str):
        self.http = http
        self.url = url

    async def fetch_releases(self) -> List[Any]:
        try:
            data = await self.http.get(self.url, headers=self.HEADERS)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise FetchFailed(f"Could not fetch available releases: {e}") from e
        if not isinstance(data, list):
            raise FetchFailed("Release index did not return a list of releases")
        return data


class CatalogStore:
    """Persists the last successful release index response."""

    def __init__(self, path: Path, provider=None):
        self.path = path
        self.provider = provider

    async def refresh(self) -> bool:
        """Replace the stored catalog with a fresh fetch.

        Failures are logged and leave the previous catalog in place, so
        callers can carry on against stale (or no) data.
        """
        try:
            releases = await self.provider.fetch_releases()
            parse_releases(releases)
        except FetchFailed as e:
            logger.warning("%s", e)
            return False
        except ValidationError as e:
            logger.warning("Could not fetch available releases: malformed response (%s)", e)
            return False

        try:
            self._write(releases)
        except OSError as e:
            logger.warning("Could not write releases file: %s", e)
            return False

        logger.debug("Stored %d releases in %s", len(releases), self.path)
        return True

    def load(self) -> List[ReleaseRecord]:
        """Read the stored catalog."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise CatalogUnavailable(
                "No release catalog available, run `wbvm list` to fetch one"
            ) from None
        except (OSError, ValueError) as e:
            raise CatalogUnavailable(f"Could not read releases file {self.path}: {e}") from e

        try:
            return parse_releases(data)
        except (ValidationError, TypeError) as e:
            raise CatalogUnavailable(f"Releases file {self.path} is corrupt: {e}") from e

    def exists(self) -> bool:
        return self.path.is_file()

    def _write(self, releases: List[Any]):
        fd, tmp_name = tempfile.mkstemp(prefix=".releases-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(releases, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def parse_releases(data: Any) -> List[ReleaseRecord]:
    if not isinstance(data, list):
        raise TypeError("release catalog must be a list")
    return [ReleaseRecord.model_validate(item) for item in data]
