"""Datadog API client builder for Python.

This package builds typed routes for the Datadog metrics API (series
submission, tag configuration, distribution points and metric listing) and
sends them with an httpx based client.

Example:
```python
    # First set these environment variables:
    # export DD_API_KEY="your_api_key"
    # export DD_APPLICATION_KEY="your_application_key"
    # export DD_SITE="datadoghq.eu"

    from ddog import Datadog
    dd = Datadog()
    route = dd.builder().select_v2().post_series().with_body(payload)
    status, body = dd.api_client.execute(route)
```
"""

from ._datadog import Datadog
from .builder import Builder
from .models import ApiVersion, UnsupportedApiVersionError
from .routes import Distribution, GetMetrics, Route, Series, Tags

__all__ = [
    "Datadog",
    "Builder",
    "ApiVersion",
    "UnsupportedApiVersionError",
    "Route",
    "Tags",
    "Series",
    "Distribution",
    "GetMetrics",
]
