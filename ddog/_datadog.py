from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ._config import Config
from ._services import ApiClient
from ._services._base_service import Transport
from ._utils import SiteUrl, setup_logging
from ._utils.constants import (
    ENV_API_KEY,
    ENV_APP_KEY,
    ENV_APPLICATION_KEY,
    ENV_SITE,
)
from .builder import Builder
from .models.errors import ApiKeyMissingError

load_dotenv(override=True)


class Datadog:
    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        application_key: Optional[str] = None,
        site: Optional[str] = None,
        base_url: Optional[str] = None,
        debug: bool = False,
        transport: Optional[Transport] = None,
    ) -> None:
        api_key_value = api_key or env.get(ENV_API_KEY)
        application_key_value = (
            application_key or env.get(ENV_APPLICATION_KEY) or env.get(ENV_APP_KEY)
        )
        base_url_value = base_url or str(SiteUrl.from_site(site or env.get(ENV_SITE)))

        try:
            self._config = Config(
                base_url=base_url_value,
                api_key=api_key_value,  # type: ignore
                application_key=application_key_value,
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"][0] == "api_key":
                    raise ApiKeyMissingError() from e
            raise

        self._transport = transport
        self._api_client: Optional[ApiClient] = None

        setup_logging(debug)

    @property
    def config(self) -> Config:
        return self._config

    def builder(self) -> Builder:
        return Builder()

    @property
    def api_client(self) -> ApiClient:
        if not self._api_client:
            self._api_client = ApiClient(self._config, transport=self._transport)
        return self._api_client
