import json
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from .._utils import RequestSpec, validate_json
from ..models.exceptions import UnsupportedApiVersionError
from ..models.version import ApiVersion

HeaderPairs = Iterable[tuple[str, str]]


@runtime_checkable
class Route(Protocol):
    """Anything that can describe a single Datadog API call.

    A route knows its HTTP method, path, query parameters, header pairs and
    serialized body, and hands them to the transport as a RequestSpec.
    """

    version: ApiVersion

    def request_spec(self) -> RequestSpec: ...


def header_pairs(pairs: HeaderPairs) -> list[tuple[str, str]]:
    return [(str(name), str(value)) for name, value in pairs]


def ensure_supported(
    route: str, version: Optional[ApiVersion], supported: frozenset[ApiVersion]
) -> ApiVersion:
    if version is None or version not in supported:
        raise UnsupportedApiVersionError(route, version, supported)
    return version


def serialize_body(body: Any) -> Optional[str]:
    """Serializes a request body to the JSON text sent on the wire.

    Raises:
        ValueError: If a string body is not valid JSON.
    """
    if body is None:
        return None
    if isinstance(body, str):
        error = validate_json(body)
        if error is not None:
            raise ValueError(f"Request body is not valid JSON: {error}") from error
        return body
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True)
    return json.dumps(body)
