from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from .._utils import Endpoint, RequestSpec
from ..models.version import ApiVersion
from ._route import HeaderPairs, ensure_supported, header_pairs


@dataclass
class GetMetrics:
    """Lists the metrics actively reporting since a given time.

    ``GET /api/{version}/metrics?from=...&host=...&tag_filter=...``

    ``host`` and ``tag_filter`` default to empty strings and are left out of
    the query while empty.
    """

    SUPPORTED_VERSIONS: ClassVar[frozenset[ApiVersion]] = frozenset(
        {ApiVersion.V1, ApiVersion.V2}
    )
    METHOD: ClassVar[str] = "GET"
    ENDPOINT: ClassVar[Endpoint] = Endpoint("/api/{version}/metrics")

    version: ApiVersion
    from_: int = 0
    host: str = ""
    tag_filter: str = ""
    headers: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def for_version(cls, version: Optional[ApiVersion]) -> "GetMetrics":
        return cls(
            version=ensure_supported(cls.__name__, version, cls.SUPPORTED_VERSIONS)
        )

    def set_from(self, from_: int) -> "GetMetrics":
        if from_ < 0:
            raise ValueError(f"`from` must not be negative, got {from_}.")
        self.from_ = from_
        return self

    def set_host(self, host: str) -> "GetMetrics":
        self.host = host
        return self

    def set_tag_filter(self, tag_filter: str) -> "GetMetrics":
        self.tag_filter = tag_filter
        return self

    def with_headers(self, pairs: HeaderPairs) -> "GetMetrics":
        self.headers.extend(header_pairs(pairs))
        return self

    @property
    def path(self) -> Endpoint:
        return self.ENDPOINT.format(version=self.version.value)

    @property
    def params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"from": self.from_}
        if self.host:
            params["host"] = self.host
        if self.tag_filter:
            params["tag_filter"] = self.tag_filter
        return params

    def request_spec(self) -> RequestSpec:
        return RequestSpec(
            method=self.METHOD,
            endpoint=self.path,
            params=self.params,
            headers=list(self.headers),
        )
