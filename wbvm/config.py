"""Runtime settings."""

import os
import platform
from pathlib import Path
from typing import ClassVar, Optional, Mapping

from pydantic import BaseModel, Field

from .errors import FilesystemFailed


class Settings(BaseModel):
    RELEASES_URL: ClassVar[str] = "https://api.github.com/repos/babymotte/worterbuch/releases?per_page=100"

    root_dir: Path = Field(default_factory=lambda: Path.home() / ".wbvm")
    releases_url: str = RELEASES_URL
    product_name: str = "worterbuch"
    version_prefix: str = "v"
    alias_name: str = "bin"
    catalog_file: str = "releases.json"
    staging_name: str = ".staging"
    log_dir: Path = Field(default_factory=lambda: Path.home() / ".cache" / "wbvm")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings, applying WBVM_* environment overrides."""
        environ = os.environ if environ is None else environ
        overrides = {}
        if environ.get("WBVM_ROOT"):
            overrides["root_dir"] = Path(environ["WBVM_ROOT"]).expanduser()
        if environ.get("WBVM_RELEASES_URL"):
            overrides["releases_url"] = environ["WBVM_RELEASES_URL"]
        if environ.get("WBVM_LOG_DIR"):
            overrides["log_dir"] = Path(environ["WBVM_LOG_DIR"]).expanduser()
        return cls(**overrides)

    @property
    def catalog_path(self) -> Path:
        return self.root_dir / self.catalog_file

    @property
    def alias_path(self) -> Path:
        return self.root_dir / self.alias_name

    @property
    def staging_dir(self) -> Path:
        return self.root_dir / self.staging_name

    @property
    def executable_name(self) -> str:
        if platform.system() == "Windows":
            return f"{self.product_name}.exe"
        return self.product_name

    def ensure_root(self) -> Path:
        """Create the root directory if it is missing."""
        try:
            self.root_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemFailed(f"Error creating app dir {self.root_dir}: {e}") from e
        if not self.root_dir.is_dir():
            raise FilesystemFailed(f"App dir {self.root_dir} is not a directory")
        return self.root_dir
