"""Tests for ApiVersion and the error types."""

import httpx
import pytest

from ddog.models import (
    ApiKeyMissingError,
    ApiVersion,
    EnrichedException,
    UnsupportedApiVersionError,
)


class TestApiVersion:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("v1", ApiVersion.V1),
            ("V2", ApiVersion.V2),
            ("2", ApiVersion.V2),
            (" v1 ", ApiVersion.V1),
            (ApiVersion.V2, ApiVersion.V2),
        ],
    )
    def test_parse(self, value, expected):
        assert ApiVersion.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown API version"):
            ApiVersion.parse("v3")

    def test_str(self):
        assert str(ApiVersion.V1) == "v1"


class TestUnsupportedApiVersionError:
    def test_attributes(self):
        error = UnsupportedApiVersionError(
            "GetMetrics", None, {ApiVersion.V2, ApiVersion.V1}
        )

        assert error.route == "GetMetrics"
        assert error.version is None
        assert error.supported == (ApiVersion.V1, ApiVersion.V2)
        assert str(error) == (
            "GetMetrics is not available for API version 'unset' (supported: v1, v2)"
        )


class TestEnrichedException:
    def test_message_includes_response(self):
        request = httpx.Request("POST", "https://api.datadoghq.com/api/v2/series")
        response = httpx.Response(403, content=b'{"errors": ["Forbidden"]}', request=request)
        error = EnrichedException(
            httpx.HTTPStatusError("forbidden", request=request, response=response)
        )

        assert error.status_code == 403
        assert "Request URL: https://api.datadoghq.com/api/v2/series" in str(error)
        assert "Status Code: 403" in str(error)
        assert "Forbidden" in str(error)


def test_api_key_missing_error_message():
    assert "DD_API_KEY" in str(ApiKeyMissingError())
