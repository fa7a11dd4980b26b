from ._route import Route, serialize_body
from .distribution import Distribution
from .get_metrics import GetMetrics
from .series import Series
from .tags import Tags

__all__ = [
    "Route",
    "serialize_body",
    "Distribution",
    "GetMetrics",
    "Series",
    "Tags",
]
