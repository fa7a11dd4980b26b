from enum import Enum
from typing import Union


class ApiVersion(str, Enum):
    """Datadog API versions a route can be built for."""

    V1 = "v1"
    V2 = "v2"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "ApiVersion"]) -> "ApiVersion":
        """Parses ``"v1"``, ``"V2"`` or ``"2"`` into an ApiVersion.

        Raises:
            ValueError: If the value does not name a known version.
        """
        if isinstance(value, ApiVersion):
            return value

        normalized = str(value).strip().lower()
        if not normalized.startswith("v"):
            normalized = f"v{normalized}"

        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown API version: {value!r}") from None
