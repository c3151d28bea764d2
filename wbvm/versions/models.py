"""Data models for released versions."""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional


class AssetRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    download_url: str = Field(alias="browser_download_url")


class ReleaseRecord(BaseModel):
    """One published release as returned by the release index."""

    name: str
    tag_name: Optional[str] = None
    assets: List[AssetRecord] = []

    @model_validator(mode="before")
    @classmethod
    def _name_from_tag(cls, data):
        # Untitled GitHub releases come back with a null name
        if isinstance(data, dict) and not data.get("name") and data.get("tag_name"):
            data = {**data, "name": data["tag_name"]}
        return data

    def bare_version(self, prefix: str = "v") -> str:
        """Release name with the version prefix stripped."""
        if prefix and self.name.startswith(prefix):
            return self.name[len(prefix):]
        return self.name
