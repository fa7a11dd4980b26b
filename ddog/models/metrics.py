from enum import Enum, IntEnum
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MetricIntakeType(IntEnum):
    UNSPECIFIED = 0
    COUNT = 1
    RATE = 2
    GAUGE = 3


class MetricTagConfigurationMetricType(str, Enum):
    GAUGE = "gauge"
    COUNT = "count"
    RATE = "rate"
    DISTRIBUTION = "distribution"


class MetricPoint(BaseModel):
    model_config = ConfigDict(extra="allow")

    timestamp: int
    value: float


class MetricResource(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    type: str


class MetricSeries(BaseModel):
    """A single timeseries submitted to ``POST /api/v2/series``."""

    model_config = ConfigDict(use_enum_values=True, extra="allow")

    metric: str
    points: List[MetricPoint]
    type: Optional[MetricIntakeType] = None
    resources: Optional[List[MetricResource]] = None
    tags: Optional[List[str]] = None
    unit: Optional[str] = None
    interval: Optional[int] = None
    source_type_name: Optional[str] = None


class MetricPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    series: List[MetricSeries]


class DistributionPointsSeries(BaseModel):
    """A distribution series for ``POST /api/v1/distribution_points``.

    Each point is a ``(timestamp, values)`` pair; it serializes to the
    ``[timestamp, [values...]]`` arrays the intake expects.
    """

    model_config = ConfigDict(extra="allow")

    metric: str
    points: List[Tuple[int, List[float]]]
    host: Optional[str] = None
    tags: Optional[List[str]] = None
    type: Literal["distribution"] = "distribution"


class DistributionPointsPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    series: List[DistributionPointsSeries]


class MetricCustomAggregation(BaseModel):
    space: Literal["avg", "max", "min", "sum"]
    time: Literal["avg", "count", "max", "min", "sum"]


class MetricTagConfigurationAttributes(BaseModel):
    model_config = ConfigDict(use_enum_values=True, extra="allow")

    tags: List[str] = Field(default_factory=list)
    metric_type: MetricTagConfigurationMetricType = (
        MetricTagConfigurationMetricType.GAUGE
    )
    include_percentiles: Optional[bool] = None
    aggregations: Optional[List[MetricCustomAggregation]] = None


class MetricTagConfigurationData(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    type: Literal["manage_tags"] = "manage_tags"
    attributes: MetricTagConfigurationAttributes = Field(
        default_factory=MetricTagConfigurationAttributes
    )


class MetricTagConfigurationCreateRequest(BaseModel):
    """Body of ``POST /api/v2/metrics/{metric_name}/tags``."""

    model_config = ConfigDict(extra="allow")

    data: MetricTagConfigurationData
