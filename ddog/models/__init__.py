from .errors import ApiKeyMissingError
from .exceptions import EnrichedException, UnsupportedApiVersionError
from .metrics import (
    DistributionPointsPayload,
    DistributionPointsSeries,
    MetricCustomAggregation,
    MetricIntakeType,
    MetricPayload,
    MetricPoint,
    MetricResource,
    MetricSeries,
    MetricTagConfigurationAttributes,
    MetricTagConfigurationCreateRequest,
    MetricTagConfigurationData,
    MetricTagConfigurationMetricType,
)
from .version import ApiVersion

__all__ = [
    "ApiVersion",
    "ApiKeyMissingError",
    "EnrichedException",
    "UnsupportedApiVersionError",
    "DistributionPointsPayload",
    "DistributionPointsSeries",
    "MetricCustomAggregation",
    "MetricIntakeType",
    "MetricPayload",
    "MetricPoint",
    "MetricResource",
    "MetricSeries",
    "MetricTagConfigurationAttributes",
    "MetricTagConfigurationCreateRequest",
    "MetricTagConfigurationData",
    "MetricTagConfigurationMetricType",
]
