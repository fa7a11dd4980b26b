from typing import Optional
from urllib.parse import urljoin, urlparse

from .constants import DEFAULT_SITE


class SiteUrl:
    """A class that represents the base URL of a Datadog site.

    This class is used to parse Datadog API URLs and resolve endpoint paths
    against them.

    >>> url = SiteUrl("https://api.datadoghq.eu/")
    >>> url.base_url
    'https://api.datadoghq.eu'
    >>> url.resolve("/api/v2/series")
    'https://api.datadoghq.eu/api/v2/series'

    Args:
        url (str): The URL to parse.
    """

    def __init__(self, url: str):
        self._url = url

    @classmethod
    def from_site(cls, site: Optional[str] = None) -> "SiteUrl":
        """Builds the API URL for a site name such as ``datadoghq.eu``."""
        site = (site or DEFAULT_SITE).strip()
        if "://" in site:
            site = urlparse(site).netloc
        site = site.strip("/")
        if site.startswith("api."):
            site = site[len("api.") :]
        return cls(f"https://api.{site}")

    def __str__(self):
        return self._url

    def __repr__(self):
        return f"SiteUrl({self._url})"

    @property
    def base_url(self):
        parsed = urlparse(self._url)

        return f"{parsed.scheme}://{parsed.hostname}{f':{parsed.port}' if parsed.port else ''}"

    def resolve(self, url: str) -> str:
        if not self._is_relative_url(url):
            return url

        return urljoin(f"{self.base_url}/", url.lstrip("/"))

    def _is_relative_url(self, url: str) -> bool:
        # Empty URLs are considered relative
        if not url:
            return True

        parsed = urlparse(url)

        # Protocol-relative URLs (starting with //) are not relative
        if url.startswith("//"):
            return False

        # URLs with schemes are not relative (http:, https:, mailto:, etc.)
        if parsed.scheme:
            return False

        # URLs with network locations are not relative
        if parsed.netloc:
            return False

        # If we've passed all the checks, it's a relative URL
        return True
