"""The default alias pointing at the active version."""

import logging
import os
from pathlib import Path
from typing import Optional

from ..errors import FilesystemFailed, VersionNotInstalled
from .tracker import InstallationTracker

logger = logging.getLogger(__name__)


class ActivationManager:
    """Only writer of the default alias.

    The alias is removed before the new one is created, so an interrupted
    switch leaves no alias rather than a wrong one.
    """

    def __init__(self, alias_path: Path, tracker: InstallationTracker):
        self.alias_path = alias_path
        self.tracker = tracker

    def set_default(self, version: str):
        """Point the alias at an installed version."""
        if not self.tracker.is_installed(version):
            raise VersionNotInstalled(version)

        target = self.tracker.version_dir(version)
        self._remove_alias()
        try:
            self.alias_path.symlink_to(target, target_is_directory=True)
        except OSError as e:
            raise FilesystemFailed(f"Could not link {self.alias_path} to {target}: {e}") from e
        logger.info("Default version set to %s", version)

    def get_default(self) -> Optional[str]:
        """Version the alias points at, or None if absent or stale."""
        if not self.alias_path.is_symlink():
            return None
        try:
            target = Path(os.readlink(self.alias_path))
        except OSError as e:
            raise FilesystemFailed(f"Could not read {self.alias_path}: {e}") from e

        if not target.is_absolute():
            target = self.alias_path.parent / target
        version = target.name
        if target.parent.resolve() != self.tracker.root_dir.resolve():
            logger.debug("Alias %s points outside the root: %s", self.alias_path, target)
            return None
        if not self.tracker.is_installed(version):
            logger.debug("Alias %s points at %s which is not installed", self.alias_path, target)
            return None
        return version

    def _remove_alias(self):
        if self.alias_path.is_symlink():
            try:
                self.alias_path.unlink()
            except OSError as e:
                raise FilesystemFailed(f"Could not remove {self.alias_path}: {e}") from e
        elif self.alias_path.exists():
            raise FilesystemFailed(
                f"{self.alias_path} exists and is not a link, refusing to replace it"
            )
