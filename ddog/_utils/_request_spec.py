from dataclasses import dataclass, field
from typing import Any, Optional

from ._endpoint import Endpoint


@dataclass
class RequestSpec:
    """Encapsulates the configuration for making an HTTP request.

    This class contains all necessary parameters to hand a route over to the
    transport: the HTTP method, endpoint, query parameters, header pairs and the
    already serialized request body.

    Headers are kept as an ordered list of ``(name, value)`` pairs so duplicate
    names survive all the way to the wire.
    """

    method: str
    endpoint: Endpoint
    params: dict[str, Any] = field(default_factory=dict)
    headers: list[tuple[str, str]] = field(default_factory=list)
    content: Optional[str] = None
