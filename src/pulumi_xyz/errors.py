"""
Exceptions raised by the xyz SDK.

Errors coming from the Pulumi engine are never caught or rewrapped here;
they reach the caller unchanged.
"""

from typing import Optional


class MissingRequiredPropertyError(TypeError):
    """A resource was constructed without one of its required inputs."""

    def __init__(self, property_name: str):
        self.property_name = property_name
        super().__init__(f"Missing required property '{property_name}'")


class ApiRequestError(Exception):
    """An HTTP call against the backend API failed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SchemaGenerationError(ValueError):
    """The OpenAPI document cannot be turned into a package schema."""
