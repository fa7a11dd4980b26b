from typing import Iterable, Optional

from httpx import HTTPStatusError

from .version import ApiVersion


class UnsupportedApiVersionError(Exception):
    """Raised when a route is requested for an API version that does not serve it."""

    def __init__(
        self,
        route: str,
        version: Optional[ApiVersion],
        supported: Iterable[ApiVersion] = (),
    ) -> None:
        self.route = route
        self.version = version
        self.supported = tuple(sorted(supported, key=lambda v: v.value))

        attempted = "unset" if version is None else str(version)
        supported_names = ", ".join(str(v) for v in self.supported) or "none"
        self.message = (
            f"{route} is not available for API version '{attempted}' "
            f"(supported: {supported_names})"
        )
        super().__init__(self.message)


class EnrichedException(Exception):
    def __init__(self, error: HTTPStatusError) -> None:
        # Extract the relevant details from the HTTPStatusError
        self.status_code = (
            error.response.status_code if error.response is not None else None
        )
        url = str(error.request.url) if error.request is not None else "Unknown"
        response_content = (
            error.response.content.decode("utf-8")
            if error.response is not None and error.response.content
            else "No content"
        )

        enriched_message = (
            f"\nRequest URL: {url}"
            f"\nStatus Code: {self.status_code or 'Unknown'}"
            f"\nResponse Content: {response_content}"
        )

        super().__init__(enriched_message)
