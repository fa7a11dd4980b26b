"""Tests for the route Builder: version selection, headers and version gating."""

import logging

import pytest

from ddog import (
    ApiVersion,
    Builder,
    Distribution,
    GetMetrics,
    Series,
    Tags,
    UnsupportedApiVersionError,
)


class TestBuilderDefaults:
    def test_version_is_unset(self):
        assert Builder().version is None

    def test_headers_are_empty(self):
        assert Builder().headers == []

    def test_default_builders_are_equal(self):
        assert Builder() == Builder()


class TestVersionSelection:
    def test_select_v1(self):
        assert Builder().select_v1().version is ApiVersion.V1

    def test_select_v2(self):
        assert Builder().select_v2().version is ApiVersion.V2

    def test_last_selection_wins(self):
        builder = Builder().select_v2().select_v1()
        assert builder.version is ApiVersion.V1

    def test_selection_returns_same_builder(self):
        builder = Builder()
        assert builder.select_v2() is builder


class TestHeaders:
    def test_headers_keep_order_and_duplicates(self):
        builder = Builder().with_headers([("A", "1"), ("B", "2")])
        builder.with_headers([("A", "3")])

        assert builder.headers == [("A", "1"), ("B", "2"), ("A", "3")]

    def test_headers_accept_generators(self):
        builder = Builder().with_headers((name, "x") for name in ("A", "B"))
        assert builder.headers == [("A", "x"), ("B", "x")]

    def test_builder_and_route_headers_agree(self):
        builder = Builder().select_v2().with_headers([("X-Retries", 3)])
        route = builder.post_series().with_headers([("X-Retries", 4)])

        assert builder.headers == [("X-Retries", "3")]
        assert route.headers == [("X-Retries", "3"), ("X-Retries", "4")]

    def test_routes_receive_builder_headers(self):
        builder = Builder().select_v2().with_headers([("DD-API-KEY", "key")])
        route = builder.post_series()

        assert route.headers == [("DD-API-KEY", "key")]

    def test_route_headers_are_independent_of_builder(self):
        builder = Builder().select_v2().with_headers([("A", "1")])
        route = builder.post_series()
        builder.with_headers([("B", "2")])

        assert route.headers == [("A", "1")]


class TestCopy:
    def test_copy_is_equal(self):
        builder = Builder().select_v2().with_headers([("A", "1")])
        assert builder.copy() == builder

    def test_copy_is_independent(self):
        builder = Builder().select_v2().with_headers([("A", "1")])
        clone = builder.copy()
        clone.select_v1().with_headers([("B", "2")])

        assert builder.version is ApiVersion.V2
        assert builder.headers == [("A", "1")]


class TestValidateJson:
    def test_valid_object(self):
        assert Builder.validate_json("{}") is None

    def test_invalid_object(self):
        error = Builder.validate_json("{invalid")
        assert error is not None
        assert error.pos == 1

    def test_empty_body_is_invalid(self):
        assert Builder.validate_json("") is not None

    def test_does_not_depend_on_builder_state(self):
        assert Builder().select_v1().validate_json("[1, 2]") is None


class TestSupportedOperations:
    def test_create_tag_config_under_v2(self):
        route = Builder().select_v2().create_tag_config("my.metric.name")

        assert isinstance(route, Tags)
        assert route.metric_name == "my.metric.name"
        assert route.version is ApiVersion.V2

    def test_create_tag_config_encodes_metric_name(self):
        route = Builder().select_v2().create_tag_config("a/b")
        assert route.request_spec().endpoint == "/api/v2/metrics/a%2Fb/tags"

    def test_post_series_under_v2(self):
        assert isinstance(Builder().select_v2().post_series(), Series)

    def test_post_distribution_under_v1(self):
        assert isinstance(Builder().select_v1().post_distribution(), Distribution)

    @pytest.mark.parametrize("select", ["select_v1", "select_v2"])
    def test_get_metrics_under_both_versions(self, select):
        builder = getattr(Builder(), select)()
        assert isinstance(builder.get_metrics(0), GetMetrics)

    def test_get_metrics_configures_route(self):
        route = Builder().select_v2().get_metrics(10, None, "env:prod")

        assert route.from_ == 10
        assert route.host == ""
        assert route.tag_filter == "env:prod"

    def test_get_metrics_with_host(self):
        route = Builder().select_v1().get_metrics(5, host="web-1")

        assert route.host == "web-1"
        assert route.tag_filter == ""


class TestUnsupportedOperations:
    @pytest.mark.parametrize(
        "select, call",
        [
            (None, lambda b: b.create_tag_config("m")),
            ("select_v1", lambda b: b.create_tag_config("m")),
            (None, lambda b: b.post_series()),
            ("select_v1", lambda b: b.post_series()),
            (None, lambda b: b.post_distribution()),
            ("select_v2", lambda b: b.post_distribution()),
            (None, lambda b: b.get_metrics(0)),
        ],
    )
    def test_raises_unsupported_version(self, select, call):
        builder = Builder()
        if select:
            getattr(builder, select)()

        with pytest.raises(UnsupportedApiVersionError) as exc_info:
            call(builder)

        assert exc_info.value.version == builder.version

    def test_error_names_route_and_supported_versions(self):
        with pytest.raises(UnsupportedApiVersionError) as exc_info:
            Builder().select_v2().post_distribution()

        assert exc_info.value.route == "Distribution"
        assert exc_info.value.supported == (ApiVersion.V1,)
        assert "v2" in str(exc_info.value)

    def test_failure_is_logged_with_context(self, caplog):
        with caplog.at_level(logging.ERROR, logger="ddog"):
            with pytest.raises(UnsupportedApiVersionError):
                Builder().select_v2().post_distribution()

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert "Failed to create distribution for api version: v2" in record.message
        assert record.route == "Distribution"
        assert record.api_version is ApiVersion.V2

    def test_unset_version_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="ddog"):
            with pytest.raises(UnsupportedApiVersionError):
                Builder().get_metrics(10)

        assert "api version: None" in caplog.records[-1].message
        assert caplog.records[-1].api_version is None

    def test_builder_is_usable_after_failure(self):
        builder = Builder().select_v2()
        with pytest.raises(UnsupportedApiVersionError):
            builder.post_distribution()

        assert isinstance(builder.select_v1().post_distribution(), Distribution)


def test_with_logging_returns_builder():
    builder = Builder()
    assert builder.with_logging(debug=False) is builder
    assert logging.getLogger("ddog").level == logging.INFO
