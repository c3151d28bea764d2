"""Errors raised by the version manager."""


class WbvmError(Exception):
    """Base class for all version manager failures."""


class CatalogUnavailable(WbvmError):
    """No usable release catalog is stored locally."""


class VersionNotFound(WbvmError):
    def __init__(self, token: str):
        super().__init__(f"No release with name {token} found")
        self.token = token


class UnsupportedPlatform(WbvmError):
    def __init__(self, platform_id: str):
        super().__init__(f"Operating system {platform_id} is not supported")
        self.platform_id = platform_id


class AssetNotFound(WbvmError):
    def __init__(self, release: str, asset_name: str):
        super().__init__(f"Release {release} has no asset {asset_name}")
        self.release = release
        self.asset_name = asset_name


class VersionNotInstalled(WbvmError):
    def __init__(self, version: str):
        super().__init__(f"Version {version} is not installed, please install it first!")
        self.version = version


class FetchFailed(WbvmError):
    """A download or release index request failed."""


class ExtractFailed(WbvmError):
    """An archive could not be unpacked."""


class FilesystemFailed(WbvmError):
    """mkdir, chmod, symlink, rename or remove failed."""
