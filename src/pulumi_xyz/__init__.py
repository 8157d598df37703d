"""
Pulumi SDK for the xyz Todo backend.
"""

from pulumi_xyz._utilities import get_version, set_version
from pulumi_xyz.dynamic import DynamicTodo
from pulumi_xyz.errors import (
    ApiRequestError,
    MissingRequiredPropertyError,
    SchemaGenerationError,
)
from pulumi_xyz.todo import TODO_TYPE, Todo, TodoArgs

__all__ = [
    "ApiRequestError",
    "DynamicTodo",
    "MissingRequiredPropertyError",
    "SchemaGenerationError",
    "TODO_TYPE",
    "Todo",
    "TodoArgs",
    "get_version",
    "set_version",
]
