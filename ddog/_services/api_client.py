from typing import Any, Optional

from httpx import Response

from .._config import Config
from .._utils import RequestSpec
from ..routes import Route
from ._base_service import BaseService, Transport


class ApiClient(BaseService):
    """Client that sends routes to the Datadog API.

    Routes produced by a Builder describe a single call. The client materializes
    them and sends them with the configured credentials. Header pairs carried by
    a route are sent verbatim and take precedence over the client defaults of
    the same name.
    """

    def __init__(self, config: Config, transport: Optional[Transport] = None) -> None:
        super().__init__(config=config, transport=transport)

    def execute(self, route: Route) -> tuple[int, str]:
        """Send a route and return the status code and response body.

        HTTP error statuses are returned, not raised.

        Examples:
            ```python
            from ddog import Datadog

            dd = Datadog()
            route = dd.builder().select_v1().get_metrics(1700000000)
            status, body = dd.api_client.execute(route)
            ```
        """
        response = self._send(route, raise_for_status=False)
        return response.status_code, response.text

    async def execute_async(self, route: Route) -> tuple[int, str]:
        """Asynchronously send a route and return the status code and response body."""
        response = await self._send_async(route, raise_for_status=False)
        return response.status_code, response.text

    def send(self, route: Route) -> Response:
        """Send a route and return the response.

        Raises:
            EnrichedException: If the API answers with an error status.
        """
        return self._send(route, raise_for_status=True)

    async def send_async(self, route: Route) -> Response:
        """Asynchronously send a route and return the response.

        Raises:
            EnrichedException: If the API answers with an error status.
        """
        return await self._send_async(route, raise_for_status=True)

    def _send(self, route: Route, raise_for_status: bool) -> Response:
        spec = route.request_spec()
        return self.request(
            spec.method,
            url=spec.endpoint,
            component=type(route).__name__,
            raise_for_status=raise_for_status,
            **self._request_kwargs(spec),
        )

    async def _send_async(self, route: Route, raise_for_status: bool) -> Response:
        spec = route.request_spec()
        return await self.request_async(
            spec.method,
            url=spec.endpoint,
            component=type(route).__name__,
            raise_for_status=raise_for_status,
            **self._request_kwargs(spec),
        )

    @staticmethod
    def _request_kwargs(spec: RequestSpec) -> dict[str, Any]:
        return {
            "params": spec.params,
            "content": spec.content,
            "headers": spec.headers,
        }
