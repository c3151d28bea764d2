"""Shared fixtures: a throwaway root directory and fake collaborators."""

import shutil
import zipfile
from pathlib import Path

import pytest

from wbvm.config import Settings
from wbvm.errors import FetchFailed
from wbvm.manager import VersionManager
from wbvm.versions import Platform

LINUX_ASSET = "worterbuch-x86_64-unknown-linux-gnu.zip"


def release(name, *asset_names, url_base="https://example.invalid"):
    return {
        "name": name,
        "tag_name": name,
        "draft": False,
        "assets": [
            {"name": a, "browser_download_url": f"{url_base}/{name}/{a}"} for a in asset_names
        ],
    }


def make_zip(path: Path, files) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return path


class FakeProvider:
    def __init__(self, releases=None, error=None):
        self.releases = releases if releases is not None else []
        self.error = error
        self.calls = 0

    async def fetch_releases(self):
        self.calls += 1
        if self.error:
            raise FetchFailed(self.error)
        return self.releases


class FakeDownloader:
    def __init__(self, archive: Path = None, error=None):
        self.archive = archive
        self.error = error
        self.urls = []

    async def download_file(self, url, dest):
        self.urls.append(url)
        if self.error:
            raise FetchFailed(self.error)
        shutil.copyfile(self.archive, dest)
        return dest


@pytest.fixture
def settings(tmp_path):
    return Settings(root_dir=tmp_path / "root", log_dir=tmp_path / "logs")


@pytest.fixture
def root(settings):
    return settings.ensure_root()


@pytest.fixture
def archive(settings, tmp_path):
    return make_zip(tmp_path / LINUX_ASSET, {
        settings.executable_name: "#!/bin/sh\necho worterbuch\n",
        "LICENSE": "MIT\n",
    })


@pytest.fixture
def install_version(settings, root):
    """Lay out an installed version directory by hand."""
    def _install(version):
        version_dir = root / version
        version_dir.mkdir()
        (version_dir / settings.executable_name).write_text("#!/bin/sh\n")
        return version_dir
    return _install


@pytest.fixture
def make_manager(settings, archive):
    def _make(releases=None, provider=None, downloader=None):
        return VersionManager(
            settings,
            provider=provider or FakeProvider(releases),
            downloader=downloader or FakeDownloader(archive),
            platform_id=Platform.LINUX_X64,
        )
    return _make
