import json
from dataclasses import dataclass, field
from logging import getLogger
from typing import Callable, Iterable, Optional, TypeVar

from ._utils import setup_logging, validate_json
from .models.exceptions import UnsupportedApiVersionError
from .models.version import ApiVersion
from .routes import Distribution, GetMetrics, Series, Tags
from .routes._route import header_pairs

logger = getLogger("ddog")

R = TypeVar("R", Tags, Series, Distribution, GetMetrics)


@dataclass
class Builder:
    """Builder for Datadog API routes.

    The builder selects an API version, collects request headers and hands out
    route values for the operations that version serves. Routes are then sent
    with an ApiClient.

    Examples:
        ```python
        from ddog import Builder, Datadog

        route = (
            Builder()
            .select_v2()
            .with_headers([("Accept", "application/json")])
            .create_tag_config("my.metric.name")
        )
        status, body = Datadog().api_client.execute(route)
        ```

    Attributes:
        version (Optional[ApiVersion]): The selected API version, unset by default.
        headers (list[tuple[str, str]]): Header pairs in insertion order. Duplicate
            names are kept.
    """

    version: Optional[ApiVersion] = None
    headers: list[tuple[str, str]] = field(default_factory=list)

    @staticmethod
    def validate_json(body: str) -> Optional[json.JSONDecodeError]:
        """Validate a JSON request body.

        Returns:
            Optional[json.JSONDecodeError]: None if the body is valid JSON,
                otherwise the parse error.
        """
        return validate_json(body)

    def with_logging(self, debug: bool = True) -> "Builder":
        """Configure the ``ddog`` logger, at DEBUG level unless told otherwise."""
        setup_logging(debug)
        return self

    def select_v1(self) -> "Builder":
        """Sets the api version to v1."""
        self.version = ApiVersion.V1
        return self

    def select_v2(self) -> "Builder":
        """Sets the api version to v2."""
        self.version = ApiVersion.V2
        return self

    def with_headers(self, pairs: Iterable[tuple[str, str]]) -> "Builder":
        """Appends header pairs, keeping their order and any duplicates."""
        self.headers.extend(header_pairs(pairs))
        return self

    def copy(self) -> "Builder":
        """Returns an independent clone with its own header list."""
        return Builder(version=self.version, headers=list(self.headers))

    def create_tag_config(self, metric_name: str) -> Tags:
        """Create a new tag configuration for a metric (v2 only).

        Raises:
            UnsupportedApiVersionError: If the selected version is not v2.
        """
        return self._build(
            "tag configuration",
            lambda: Tags.for_version(self.version, metric_name),
        )

    def post_series(self) -> Series:
        """Posts series data to the metrics endpoint (v2 only).

        Raises:
            UnsupportedApiVersionError: If the selected version is not v2.
        """
        return self._build("series", lambda: Series.for_version(self.version))

    def post_distribution(self) -> Distribution:
        """Posts distribution points to the metrics endpoint (v1 only).

        Raises:
            UnsupportedApiVersionError: If the selected version is not v1.
        """
        return self._build(
            "distribution", lambda: Distribution.for_version(self.version)
        )

    def get_metrics(
        self,
        from_: int,
        host: Optional[str] = None,
        tag_filter: Optional[str] = None,
    ) -> GetMetrics:
        """Gets a list of active metrics.

        Args:
            from_ (int): Seconds since the unix epoch to list metrics from.
            host (Optional[str]): Hostname to filter the list by.
            tag_filter (Optional[str]): Tag expression to filter the list by,
                e.g. ``env:prod``.

        Raises:
            UnsupportedApiVersionError: If no API version has been selected.
        """
        metrics = self._build("metrics", lambda: GetMetrics.for_version(self.version))
        return (
            metrics.set_from(from_)
            .set_host(host or "")
            .set_tag_filter(tag_filter or "")
        )

    def _build(self, name: str, factory: Callable[[], R]) -> R:
        try:
            route = factory()
        except UnsupportedApiVersionError as e:
            logger.error(
                f"Failed to create {name} for api version: {self.version} "
                f"with error: {e}",
                extra={"route": e.route, "api_version": e.version},
            )
            raise

        return route.with_headers(self.headers)
