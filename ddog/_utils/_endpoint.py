from typing import Any


class Endpoint(str):
    """A string subclass representing a normalized Datadog API endpoint path.

    This class ensures consistent endpoint formatting by:
    - Adding a leading slash if missing
    - Removing trailing slashes (except for root '/')
    - Stripping query parameters

    The class supports string formatting for dynamic path parameters.

    Examples:
        >>> endpoint = Endpoint("/api/v2/metrics/{metric_name}/tags")
        >>> endpoint.format(metric_name="system.cpu.user")
        '/api/v2/metrics/system.cpu.user/tags'

        >>> endpoint = Endpoint("api/v1/distribution_points/")
        >>> str(endpoint)
        '/api/v1/distribution_points'

    Args:
        endpoint (str): The endpoint path to normalize. May include format placeholders
            for dynamic values (e.g. "/metrics/{metric_name}").

    Raises:
        ValueError: If format() is called with None or empty string arguments.
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"

        if endpoint != "/" and endpoint.endswith("/"):
            endpoint = endpoint[:-1]

        endpoint = endpoint.split("?")[0]

        return super().__new__(cls, endpoint)

    def format(self, *args: Any, **kwargs: Any) -> "Endpoint":
        """Formats the endpoint with the given arguments."""
        for index, arg in enumerate(args):
            if not self._is_valid_value(arg):
                raise ValueError(f"Positional argument `{index}` is `{arg}`.")

        for key, value in kwargs.items():
            if not self._is_valid_value(value):
                raise ValueError(f"Keyword argument `{key}` is `{value}`.")

        return Endpoint(super().format(*args, **kwargs))

    def __repr__(self) -> str:
        return f"Endpoint({super().__str__()!r})"

    def _is_valid_value(self, value: Any) -> bool:
        return value is not None and value != ""
