"""Async HTTP client utilities."""

import aiohttp
import aiofiles
from pathlib import Path
from typing import Optional, Dict, Any


class AsyncHTTPClient:
    """Reusable async HTTP client."""

    CHUNK_SIZE = 64 * 1024

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self.default_headers = headers or {}
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(headers=self.default_headers)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session:
            await self.session.close()
            self.session = None

    async def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """GET request returning the decoded JSON body."""
        async with self.session.get(url, headers=headers) as resp:
            resp.raise_for_status()
            return await resp.json()

    async def stream_to(self, url: str, dest: Path) -> int:
        """Stream a response body into ``dest``, returning the bytes written."""
        async with self.session.get(url) as resp:
            resp.raise_for_status()
            downloaded = 0

            async with aiofiles.open(dest, 'wb') as f:
                async for chunk in resp.content.iter_chunked(self.CHUNK_SIZE):
                    await f.write(chunk)
                    downloaded += len(chunk)

        return downloaded
