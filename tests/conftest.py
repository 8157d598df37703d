import json
import logging
from pathlib import Path

import pytest

from pulumi_xyz import _utilities
from pulumi_xyz.config.metadata import APIMetadata
from pulumi_xyz.todo import TODO_TYPE

SWAGGER_PATH = Path(__file__).resolve().parents[1] / "open-api-spec" / "todo-backend.json"


@pytest.fixture(autouse=True)
def _reset_version():
    """Keep an explicitly configured version from leaking between tests."""
    _utilities.set_version(None)
    yield
    _utilities.set_version(None)


@pytest.fixture
def swagger_path() -> Path:
    return SWAGGER_PATH


@pytest.fixture
def swagger() -> dict:
    return json.loads(SWAGGER_PATH.read_text())


@pytest.fixture
def api_metadata() -> APIMetadata:
    return APIMetadata(
        base_url="https://api.test/api",
        resource_urls={TODO_TYPE: "/todos"},
    )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI configures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
