"""
Pulumi schema generation from an OpenAPI (Swagger 2.0) document.

Resources are discovered from operation IDs of the shape `Resource_Action`.
A resource is emitted when its API offers Create, Get, Update and Delete:

- input properties come from the body parameter of Create
- output properties come from the lowest 2xx response of Get

Besides the schema, generation yields the API metadata the provider needs at
runtime (base URL and creation path per resource).
"""

import copy
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

import httpx
import yaml
from pydantic import BaseModel, ConfigDict, Field

from pulumi_xyz.config.logging_config import get_logger
from pulumi_xyz.config.metadata import (
    METADATA_FILE,
    SCHEMA_FILE,
    APIMetadata,
    save_api_metadata,
)
from pulumi_xyz.errors import SchemaGenerationError

log = get_logger(__name__)

# POST first: its path is the creation URL recorded in the metadata
RESOURCE_METHODS = ("post", "get", "patch", "delete")
REQUIRED_ACTIONS = ("Create", "Get", "Update", "Delete")

DEFAULT_LANGUAGE = {
    "nodejs": {"dependencies": {"@pulumi/pulumi": "^3.0.0"}},
    "python": {"usesIOClasses": True},
    "csharp": {
        "packageReferences": {
            "Pulumi": "3.*",
            "System.Collections.Immutable": "1.6.0",
        }
    },
    "go": {},
}


class PropertySpec(BaseModel):
    description: Optional[str] = None
    type: Optional[str] = None


class ResourceSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = "object"
    properties: Dict[str, PropertySpec] = Field(default_factory=dict)
    required: List[str] = Field(default_factory=list)
    input_properties: Dict[str, PropertySpec] = Field(default_factory=dict, alias="inputProperties")
    required_inputs: List[str] = Field(default_factory=list, alias="requiredInputs")


class PackageSpec(BaseModel):
    """The subset of the Pulumi package schema this generator emits."""

    name: str
    version: Optional[str] = None
    language: Dict[str, Any] = Field(default_factory=dict)
    types: Dict[str, Any] = Field(default_factory=dict)
    resources: Dict[str, ResourceSpec] = Field(default_factory=dict)
    functions: Dict[str, Any] = Field(default_factory=dict)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass
class _PropertyBag:
    props: Dict[str, PropertySpec] = field(default_factory=dict)
    required: Set[str] = field(default_factory=set)


def load_swagger_spec(source: str | Path) -> Dict[str, Any]:
    """
    Load a Swagger document from a local JSON/YAML file or an http(s) URL.

    Raises:
        FileNotFoundError: If a local file doesn't exist.
        httpx.HTTPStatusError: If the URL can't be fetched.
        SchemaGenerationError: If the document cannot be parsed or is not a mapping.
    """
    source_str = str(source)
    if source_str.startswith(("http://", "https://")):
        log.info("Fetching OpenAPI document from %s", source_str)
        response = httpx.get(source_str, follow_redirects=True)
        response.raise_for_status()
        text = response.text
    else:
        text = Path(source_str).read_text(encoding="utf-8")

    try:
        swagger = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaGenerationError(f"{source_str}: invalid document: {e}") from e
    if not isinstance(swagger, dict):
        raise SchemaGenerationError(f"{source_str} does not contain an OpenAPI document")
    return swagger


def _resolve_ref(swagger: Dict[str, Any], ref: Optional[str]) -> Dict[str, Any]:
    """Resolve a local JSON pointer such as `#/definitions/Todo`."""
    if not ref or not ref.startswith("#/"):
        raise SchemaGenerationError("expected a pointer in the schema")

    value: Any = swagger
    for token in ref[2:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if not isinstance(value, dict) or token not in value:
            raise SchemaGenerationError(f"get pointer: {ref} not found")
        value = value[token]
    if not isinstance(value, dict):
        raise SchemaGenerationError(f"{ref} does not point to a schema object")
    return value


def _gen_properties(schema: Dict[str, Any], is_output: bool) -> _PropertyBag:
    result = _PropertyBag(required=set(schema.get("required") or []))

    properties = schema.get("properties") or {}
    if not isinstance(properties, dict):
        raise SchemaGenerationError("properties must be a mapping")

    for name, prop in properties.items():
        if not isinstance(prop, dict):
            raise SchemaGenerationError(f"property '{name}' is not a schema object")
        if not is_output and prop.get("readOnly"):
            continue
        if is_output and name == "id":
            continue

        prop_type = prop.get("type")
        if isinstance(prop_type, list):
            prop_type = prop_type[0] if prop_type else None

        result.props[name] = PropertySpec(description=prop.get("description"), type=prop_type)
        if is_output:
            result.required.add(name)

    return result


def _body_properties(swagger: Dict[str, Any], parameters: List[Dict[str, Any]]) -> _PropertyBag:
    for param in parameters:
        if param.get("in") != "body":
            raise SchemaGenerationError("non-body parameters aren't supported for Create methods")
        schema = _resolve_ref(swagger, (param.get("schema") or {}).get("$ref"))
        return _gen_properties(schema, is_output=False)

    return _PropertyBag()


def _response_properties(swagger: Dict[str, Any], responses: Dict[Any, Any]) -> _PropertyBag:
    codes = []
    for code in responses:
        try:
            status = int(code)
        except (TypeError, ValueError):
            continue  # "default"
        if 200 <= status < 300:
            codes.append((status, code))
    codes.sort()

    if not codes:
        raise SchemaGenerationError("no 2xx response found")

    response = responses[codes[0][1]] or {}
    schema = _resolve_ref(swagger, (response.get("schema") or {}).get("$ref"))
    return _gen_properties(schema, is_output=True)


def _gen_resource(
    swagger: Dict[str, Any], tok: str, create: Dict[str, Any], get: Dict[str, Any]
) -> ResourceSpec:
    try:
        request = _body_properties(swagger, create.get("parameters") or [])
    except SchemaGenerationError as e:
        raise SchemaGenerationError(f"failed to generate '{tok}': request type: {e}") from e

    try:
        response = _response_properties(swagger, get.get("responses") or {})
    except SchemaGenerationError as e:
        raise SchemaGenerationError(f"failed to generate '{tok}': response type: {e}") from e

    return ResourceSpec(
        properties=response.props,
        required=sorted(response.required),
        input_properties=request.props,
        required_inputs=sorted(request.required),
    )


def generate_schema(
    swagger: Dict[str, Any], package_name: str = "xyz"
) -> Tuple[PackageSpec, APIMetadata]:
    """
    Build the Pulumi package schema and the provider's API metadata.

    Raises:
        SchemaGenerationError: If the document lacks what generation needs.
    """
    try:
        scheme = swagger["schemes"][0]
        host = swagger["host"]
    except (KeyError, IndexError, TypeError):
        raise SchemaGenerationError("OpenAPI document must declare schemes and host") from None

    pkg = PackageSpec(name=package_name, language=copy.deepcopy(DEFAULT_LANGUAGE))
    metadata = APIMetadata(base_url=f"{scheme}://{host}{swagger.get('basePath', '')}")

    resource_map: Dict[str, Dict[str, Dict[str, Any]]] = {}
    for path, path_item in (swagger.get("paths") or {}).items():
        for method in RESOURCE_METHODS:
            op = (path_item or {}).get(method)
            if op is None:
                continue

            parts = str(op.get("operationId", "")).split("_")
            if len(parts) != 2:
                continue

            tok = f"{package_name}:index:{parts[0]}"
            resource_map.setdefault(tok, {})[parts[1]] = op

            if method == "post":
                metadata.resource_urls[tok] = path

    for tok in sorted(resource_map):
        ops = resource_map[tok]
        if not all(action in ops for action in REQUIRED_ACTIONS):
            log.debug("Skipping %s: missing one of %s", tok, ", ".join(REQUIRED_ACTIONS))
            continue
        pkg.resources[tok] = _gen_resource(swagger, tok, ops["Create"], ops["Get"])
        log.info("Generated resource %s", tok)

    return pkg, metadata


def emit_schema(pkg: PackageSpec, version: str, out_dir: Path) -> Path:
    """Write `schema.json` stamped with the given version."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stamped = pkg.model_copy(update={"version": version})
    path = out_dir / SCHEMA_FILE
    path.write_text(json.dumps(stamped.to_json_dict(), indent=4) + "\n", encoding="utf-8")
    return path


def emit_metadata(metadata: APIMetadata, out_dir: Path) -> Path:
    """Write `metadata.json`."""
    path = Path(out_dir) / METADATA_FILE
    save_api_metadata(metadata, path)
    return path
