from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional
from urllib.parse import quote

from .._utils import Endpoint, RequestSpec
from ..models.version import ApiVersion
from ._route import (
    HeaderPairs,
    ensure_supported,
    header_pairs,
    serialize_body,
)


@dataclass
class Tags:
    """Creates the tag configuration of a metric.

    The metric name is percent-encoded into a single path segment.

    ``POST /api/v2/metrics/{metric_name}/tags``
    """

    SUPPORTED_VERSIONS: ClassVar[frozenset[ApiVersion]] = frozenset({ApiVersion.V2})
    METHOD: ClassVar[str] = "POST"
    ENDPOINT: ClassVar[Endpoint] = Endpoint("/api/{version}/metrics/{metric_name}/tags")

    version: ApiVersion
    metric_name: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None

    @classmethod
    def for_version(cls, version: Optional[ApiVersion], metric_name: str) -> "Tags":
        version = ensure_supported(cls.__name__, version, cls.SUPPORTED_VERSIONS)
        if not metric_name:
            raise ValueError("Keyword argument `metric_name` is empty.")
        return cls(version=version, metric_name=metric_name)

    def with_headers(self, pairs: HeaderPairs) -> "Tags":
        self.headers.extend(header_pairs(pairs))
        return self

    def with_body(self, body: Any) -> "Tags":
        self.body = serialize_body(body)
        return self

    @property
    def path(self) -> Endpoint:
        return self.ENDPOINT.format(
            version=self.version.value, metric_name=quote(self.metric_name, safe="")
        )

    def request_spec(self) -> RequestSpec:
        return RequestSpec(
            method=self.METHOD,
            endpoint=self.path,
            headers=list(self.headers),
            content=self.body,
        )
