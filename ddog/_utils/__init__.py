from ._endpoint import Endpoint
from ._json import validate_json
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._url import SiteUrl
from ._user_agent import header_user_agent, user_agent_value

__all__ = [
    "Endpoint",
    "setup_logging",
    "RequestSpec",
    "validate_json",
    "header_user_agent",
    "user_agent_value",
    "SiteUrl",
]
