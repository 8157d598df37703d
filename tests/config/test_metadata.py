import json

import pytest
from pydantic import ValidationError

from pulumi_xyz.config.metadata import (
    APIMetadata,
    load_api_metadata,
    load_package_schema,
    save_api_metadata,
)
from pulumi_xyz.todo import TODO_TYPE


def test_bundled_metadata():
    metadata = load_api_metadata()

    assert metadata.base_url == "https://todo-backend.example.com/api"
    assert metadata.resource_url(TODO_TYPE) == "https://todo-backend.example.com/api/todos"


def test_bundled_schema_declares_todo():
    schema = load_package_schema()

    todo = schema["resources"][TODO_TYPE]
    assert todo["requiredInputs"] == ["title"]
    assert sorted(todo["inputProperties"]) == ["completed", "order", "title", "url"]


def test_save_uses_wire_names(tmp_path, api_metadata):
    path = tmp_path / "nested" / "metadata.json"

    save_api_metadata(api_metadata, path)

    assert json.loads(path.read_text()) == {
        "baseUrl": "https://api.test/api",
        "resourceUrls": {TODO_TYPE: "/todos"},
    }
    assert load_api_metadata(path) == api_metadata


def test_accepts_python_names():
    metadata = APIMetadata(base_url="https://x", resource_urls={"a:b:C": "/c"})

    assert metadata.resource_url("a:b:C") == "https://x/c"


def test_unknown_resource_url(api_metadata):
    with pytest.raises(KeyError, match="unknown resource type"):
        api_metadata.resource_url("xyz:index:Other")


def test_invalid_metadata(tmp_path):
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps({"resourceUrls": {}}))

    with pytest.raises(ValidationError):
        load_api_metadata(path)
