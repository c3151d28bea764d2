"""Installed versions and the default alias."""

from .tracker import InstallationTracker
from .activation import ActivationManager
from .acquisition import AcquisitionPipeline
from .download_manager import DownloadManager, ZipExtractor

__all__ = [
    "InstallationTracker", "ActivationManager", "AcquisitionPipeline",
    "DownloadManager", "ZipExtractor",
]
