from logging import getLogger
from typing import Any, Optional, Union

from httpx import (
    URL,
    AsyncBaseTransport,
    AsyncClient,
    BaseTransport,
    Client,
    Headers,
    HTTPStatusError,
    Response,
)

from .._config import Config
from .._utils import SiteUrl, header_user_agent
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    HEADER_ACCEPT,
    HEADER_API_KEY,
    HEADER_APPLICATION_KEY,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)
from ..models.exceptions import EnrichedException

Transport = Union[BaseTransport, AsyncBaseTransport]


class BaseService:
    def __init__(self, config: Config, transport: Optional[Transport] = None) -> None:
        self._logger = getLogger("ddog")
        self._config = config

        self._url = SiteUrl(self._config.base_url)

        default_client_kwargs = get_httpx_client_kwargs()

        client_kwargs = {
            **default_client_kwargs,  # SSL, proxy, timeout, redirects
            "base_url": self._url.base_url,
            "headers": Headers(self.default_headers),
        }

        if transport is not None:
            self._client = Client(transport=transport, **client_kwargs)  # type: ignore[arg-type]
            self._client_async = AsyncClient(transport=transport, **client_kwargs)  # type: ignore[arg-type]
        else:
            self._client = Client(**client_kwargs)
            self._client_async = AsyncClient(**client_kwargs)

        self._logger.debug(f"HEADERS: {self._redacted(self.default_headers)}")

        super().__init__()

    def request(
        self,
        method: str,
        url: Union[URL, str],
        *,
        component: str = "",
        raise_for_status: bool = True,
        **kwargs: Any,
    ) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        headers = self._with_user_agent(kwargs.pop("headers", None), component)

        response = self._client.request(
            method, self._url.resolve(str(url)), headers=headers, **kwargs
        )
        self._logger.debug(f"Response: {response.status_code} {method} {url}")

        if raise_for_status:
            try:
                response.raise_for_status()
            except HTTPStatusError as e:
                # include the http response in the error message
                raise EnrichedException(e) from e

        return response

    async def request_async(
        self,
        method: str,
        url: Union[URL, str],
        *,
        component: str = "",
        raise_for_status: bool = True,
        **kwargs: Any,
    ) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        headers = self._with_user_agent(kwargs.pop("headers", None), component)

        response = await self._client_async.request(
            method, self._url.resolve(str(url)), headers=headers, **kwargs
        )
        self._logger.debug(f"Response: {response.status_code} {method} {url}")

        if raise_for_status:
            try:
                response.raise_for_status()
            except HTTPStatusError as e:
                # include the http response in the error message
                raise EnrichedException(e) from e

        return response

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: "application/json",
            HEADER_CONTENT_TYPE: "application/json",
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        headers = {HEADER_API_KEY: self._config.api_key}
        if self._config.application_key:
            headers[HEADER_APPLICATION_KEY] = self._config.application_key
        return headers

    @staticmethod
    def _with_user_agent(
        headers: Optional[list[tuple[str, str]]], component: str
    ) -> list[tuple[str, str]]:
        headers = list(headers or [])
        if not any(name.lower() == HEADER_USER_AGENT.lower() for name, _ in headers):
            headers.extend(header_user_agent(component).items())
        return headers

    @staticmethod
    def _redacted(headers: dict[str, str]) -> dict[str, str]:
        secret = {HEADER_API_KEY.lower(), HEADER_APPLICATION_KEY.lower()}
        return {
            name: "***" if name.lower() in secret else value
            for name, value in headers.items()
        }
