"""
Resource provider for the xyz backend.

Maps Pulumi resource operations onto the backend's REST API:

- create: POST to the resource's creation path
- read: GET the resource URL
- update: PATCH the resource URL
- delete: DELETE the resource URL

Resource IDs have the shape `{creation path}/{backend id}` (e.g. `/todos/42`),
so every operation after create addresses `{base url}{id}`.
"""

from typing import Any, Dict, List, Optional, Sequence

import httpx
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    ResourceProvider,
    UpdateResult,
)

from pulumi_xyz.config.environment import Environment
from pulumi_xyz.config.logging_config import get_logger
from pulumi_xyz.config.metadata import APIMetadata, load_api_metadata, load_package_schema
from pulumi_xyz.errors import ApiRequestError
from pulumi_xyz.provider.api import send_request

log = get_logger(__name__)


def _request_body(props: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset values and engine bookkeeping keys such as `__provider`."""
    return {k: v for k, v in props.items() if v is not None and not k.startswith("__")}


def _outputs(response: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    # Every resource already has an `id` output
    return {k: v for k, v in (response or {}).items() if k != "id"}


class XyzResourceProvider(ResourceProvider):
    """CRUD provider for one resource type of the xyz backend."""

    def __init__(
        self,
        resource_type: str,
        metadata: APIMetadata,
        input_properties: Sequence[str] = (),
        required_inputs: Sequence[str] = (),
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            resource_type: Type token of the resource, e.g. `xyz:index:Todo`
            metadata: Base URL and creation paths of the API
            input_properties: Names of the resource's input properties
            required_inputs: Input properties that must be set
            token: Bearer token; defaults to `XYZ_API_TOKEN` at request time
            timeout: Request timeout; defaults to `XYZ_REQUEST_TIMEOUT` at request time
            transport: Custom httpx transport
        """
        super().__init__()
        self.resource_type = resource_type
        self.metadata = metadata
        self.input_properties = list(input_properties)
        self.required_inputs = list(required_inputs)
        self.token = token
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def for_resource(cls, resource_type: str, **kwargs: Any) -> "XyzResourceProvider":
        """Build a provider from the schema and metadata bundled with the package."""
        metadata = load_api_metadata()
        api_url = Environment.get_api_url()
        if api_url:
            metadata = metadata.model_copy(update={"base_url": api_url})

        resource_spec = load_package_schema().get("resources", {}).get(resource_type, {})
        return cls(
            resource_type,
            metadata,
            input_properties=sorted(resource_spec.get("inputProperties", {})),
            required_inputs=resource_spec.get("requiredInputs", []),
            **kwargs,
        )

    def _send(self, method: str, url: str, body: Optional[Dict[str, Any]] = None):
        return send_request(
            method,
            url,
            body,
            token=self.token or Environment.get_api_token(),
            timeout=self.timeout if self.timeout is not None else Environment.get_request_timeout(),
            transport=self.transport,
        )

    def _path(self) -> str:
        try:
            return self.metadata.resource_urls[self.resource_type]
        except KeyError:
            raise ValueError(f"unknown resource type {self.resource_type!r}") from None

    def check(self, _olds: Dict[str, Any], news: Dict[str, Any]) -> CheckResult:
        self._path()
        failures = [
            CheckFailure(name, f"Missing required property '{name}'")
            for name in self.required_inputs
            if news.get(name) is None
        ]
        return CheckResult(news, failures)

    def diff(self, _id: str, olds: Dict[str, Any], news: Dict[str, Any]) -> DiffResult:
        keys = self.input_properties or [k for k in news if not k.startswith("__")]
        changed: List[str] = [k for k in keys if k in news and olds.get(k) != news[k]]
        if changed:
            log.debug("%s %s changed: %s", self.resource_type, _id, ", ".join(changed))
        return DiffResult(changes=bool(changed))

    def create(self, props: Dict[str, Any]) -> CreateResult:
        path = self._path()
        response = self._send("POST", f"{self.metadata.base_url}{path}", _request_body(props))
        if not response or "id" not in response:
            raise ApiRequestError(f"create response for {self.resource_type} has no id: {response!r}")

        resource_id = f"{path}/{response['id']}"
        log.info("Created %s %s", self.resource_type, resource_id)
        return CreateResult(resource_id, _outputs(response))

    def read(self, id_: str, props: Dict[str, Any]) -> ReadResult:
        response = self._send("GET", f"{self.metadata.base_url}{id_}")
        return ReadResult(id_, _outputs(response))

    def update(self, _id: str, _olds: Dict[str, Any], news: Dict[str, Any]) -> UpdateResult:
        response = self._send("PATCH", f"{self.metadata.base_url}{_id}", _request_body(news))
        log.info("Updated %s %s", self.resource_type, _id)
        return UpdateResult(_outputs(response))

    def delete(self, _id: str, _props: Dict[str, Any]) -> None:
        self._send("DELETE", f"{self.metadata.base_url}{_id}")
        log.info("Deleted %s %s", self.resource_type, _id)
