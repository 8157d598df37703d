"""
API metadata for the xyz provider.

The metadata is not part of the Pulumi schema but the provider needs it at
runtime: the base URL of the backend and the creation path of each resource
type. It is produced by the schema generator and shipped with the package.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

METADATA_FILE = "metadata.json"
SCHEMA_FILE = "schema.json"


class APIMetadata(BaseModel):
    """Base URL and per-resource creation paths of the backend API."""

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(..., alias="baseUrl", description="Scheme, host and base path of the API")
    resource_urls: Dict[str, str] = Field(
        default_factory=dict,
        alias="resourceUrls",
        description="Resource type token -> creation path",
    )

    def resource_url(self, resource_type: str) -> str:
        """Full creation URL for a resource type."""
        try:
            path = self.resource_urls[resource_type]
        except KeyError:
            raise KeyError(f"unknown resource type {resource_type!r}") from None
        return f"{self.base_url}{path}"


def _read_bundled(name: str) -> str:
    return resources.files("pulumi_xyz").joinpath("data").joinpath(name).read_text(encoding="utf-8")


def load_api_metadata(path: Optional[Path] = None) -> APIMetadata:
    """
    Load API metadata from a JSON file, or the copy bundled with the package.

    Raises:
        FileNotFoundError: If an explicit path doesn't exist.
        pydantic.ValidationError: If the document is not valid metadata.
    """
    if path is None:
        raw = _read_bundled(METADATA_FILE)
    else:
        raw = Path(path).read_text(encoding="utf-8")
    return APIMetadata.model_validate_json(raw)


def save_api_metadata(metadata: APIMetadata, path: Path) -> None:
    """Write metadata as indented JSON, using the wire field names."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = metadata.model_dump(mode="json", by_alias=True)
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")


def load_package_schema(path: Optional[Path] = None) -> dict:
    """Load the Pulumi package schema as a plain dictionary."""
    if path is None:
        raw = _read_bundled(SCHEMA_FILE)
    else:
        raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)
