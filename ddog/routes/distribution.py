from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from .._utils import Endpoint, RequestSpec
from ..models.version import ApiVersion
from ._route import (
    HeaderPairs,
    ensure_supported,
    header_pairs,
    serialize_body,
)


@dataclass
class Distribution:
    """Submits distribution points to ``POST /api/v1/distribution_points``.

    The intake only exists on the v1 API.
    """

    SUPPORTED_VERSIONS: ClassVar[frozenset[ApiVersion]] = frozenset({ApiVersion.V1})
    METHOD: ClassVar[str] = "POST"
    ENDPOINT: ClassVar[Endpoint] = Endpoint("/api/{version}/distribution_points")

    version: ApiVersion
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None

    @classmethod
    def for_version(cls, version: Optional[ApiVersion]) -> "Distribution":
        return cls(
            version=ensure_supported(cls.__name__, version, cls.SUPPORTED_VERSIONS)
        )

    def with_headers(self, pairs: HeaderPairs) -> "Distribution":
        self.headers.extend(header_pairs(pairs))
        return self

    def with_body(self, body: Any) -> "Distribution":
        self.body = serialize_body(body)
        return self

    @property
    def path(self) -> Endpoint:
        return self.ENDPOINT.format(version=self.version.value)

    def request_spec(self) -> RequestSpec:
        return RequestSpec(
            method=self.METHOD,
            endpoint=self.path,
            headers=list(self.headers),
            content=self.body,
        )
