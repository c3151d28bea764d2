"""Installation state derived from the root directory."""

from pathlib import Path
from typing import Set


class InstallationTracker:
    """Answers "is this version installed" by looking at the filesystem.

    A version is installed when ``<root>/<version>`` is a real directory
    holding a regular file named like the product executable. Nothing is
    cached; every call stats the tree again.
    """

    def __init__(self, root_dir: Path, executable_name: str, reserved=()):
        self.root_dir = root_dir
        self.executable_name = executable_name
        self.reserved = set(reserved)

    def version_dir(self, version: str) -> Path:
        return self.root_dir / version

    def is_installed(self, version: str) -> bool:
        if not self.is_valid_version(version):
            return False
        version_dir = self.version_dir(version)
        if version_dir.is_symlink() or not version_dir.is_dir():
            return False
        executable = version_dir / self.executable_name
        return executable.is_file()

    def list_installed(self) -> Set[str]:
        """All installed versions directly under the root."""
        if not self.root_dir.is_dir():
            return set()
        return {
            entry.name for entry in self.root_dir.iterdir()
            if self.is_installed(entry.name)
        }

    def is_valid_version(self, version: str) -> bool:
        """Whether ``version`` can name a directory directly under the root."""
        if not version or version in (".", "..") or version in self.reserved:
            return False
        return "/" not in version and "\\" not in version
