"""Tests for the metrics, query, and layer models."""

import math

import pytest

from mediastyle.errors import InvalidMetricsError, InvalidQueryError, LayerError
from mediastyle.model import (
    Builder,
    Many,
    MediaQuery,
    MetricsSnapshot,
    Orientation,
    Platform,
    Single,
    StyleLayer,
    as_layer_source,
)


# ---------------------------------------------------------------------------
# MetricsSnapshot
# ---------------------------------------------------------------------------


class TestMetricsSnapshot:
    def test_landscape_when_wider(self):
        assert MetricsSnapshot(width=800, height=400).orientation is Orientation.LANDSCAPE

    def test_portrait_when_taller(self):
        assert MetricsSnapshot(width=400, height=800).orientation is Orientation.PORTRAIT

    def test_square_is_portrait(self):
        assert MetricsSnapshot(width=500, height=500).orientation is Orientation.PORTRAIT

    def test_short_side(self):
        assert MetricsSnapshot(width=800, height=400).short_side == 400
        assert MetricsSnapshot(width=390, height=844).short_side == 390

    def test_aspect_ratio(self):
        assert MetricsSnapshot(width=800, height=400).aspect_ratio == 2.0

    def test_defaults(self):
        snap = MetricsSnapshot(width=1, height=1)
        assert snap.pixel_density == 1.0
        assert snap.platform is None

    @pytest.mark.parametrize("width", [0, -10, math.inf, math.nan, "100", True])
    def test_rejects_bad_width(self, width):
        with pytest.raises(InvalidMetricsError):
            MetricsSnapshot(width=width, height=100)

    def test_rejects_bad_density(self):
        with pytest.raises(InvalidMetricsError):
            MetricsSnapshot(width=100, height=100, pixel_density=0)

    def test_rejects_string_platform(self):
        with pytest.raises(InvalidMetricsError):
            MetricsSnapshot(width=100, height=100, platform="ios")

    def test_is_frozen(self):
        snap = MetricsSnapshot(width=100, height=100)
        with pytest.raises(AttributeError):
            snap.width = 200  # type: ignore[misc]

    def test_structural_equality(self):
        a = MetricsSnapshot(width=100, height=200, pixel_density=2, platform=Platform.IOS)
        b = MetricsSnapshot(width=100, height=200, pixel_density=2, platform=Platform.IOS)
        assert a == b


# ---------------------------------------------------------------------------
# MediaQuery
# ---------------------------------------------------------------------------


class TestMediaQuery:
    def test_empty_query(self):
        q = MediaQuery()
        assert q.is_empty
        assert q.bounds() == {}

    def test_bounds_only_set_fields(self):
        q = MediaQuery(max_short_side=600, orientation=Orientation.PORTRAIT)
        assert q.bounds() == {"max_short_side": 600, "orientation": Orientation.PORTRAIT}
        assert not q.is_empty

    def test_equal_bounds_allowed(self):
        q = MediaQuery(min_width=500, max_width=500)
        assert q.min_width == q.max_width

    def test_min_greater_than_max_rejected(self):
        with pytest.raises(InvalidQueryError, match="min_width"):
            MediaQuery(min_width=800, max_width=400)

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidQueryError):
            MediaQuery(max_height=math.inf)

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidQueryError):
            MediaQuery(min_short_side="600")  # type: ignore[arg-type]

    def test_bool_bound_rejected(self):
        with pytest.raises(InvalidQueryError):
            MediaQuery(min_width=True)  # type: ignore[arg-type]

    def test_string_orientation_rejected(self):
        with pytest.raises(InvalidQueryError):
            MediaQuery(orientation="landscape")  # type: ignore[arg-type]

    def test_string_platform_rejected(self):
        with pytest.raises(InvalidQueryError):
            MediaQuery(platform="web")  # type: ignore[arg-type]

    def test_non_bool_guard_rejected(self):
        with pytest.raises(InvalidQueryError):
            MediaQuery(guard=1)  # type: ignore[arg-type]

    def test_invalid_query_error_is_value_error(self):
        with pytest.raises(ValueError):
            MediaQuery(min_width=2, max_width=1)

    def test_structural_equality_and_hash(self):
        assert MediaQuery(max_short_side=600) == MediaQuery(max_short_side=600)
        assert hash(MediaQuery(max_short_side=600)) == hash(MediaQuery(max_short_side=600))


# ---------------------------------------------------------------------------
# StyleLayer
# ---------------------------------------------------------------------------


class TestStyleLayer:
    def test_query_defaults_to_empty(self):
        layer = StyleLayer(style={"a": {"x": 1}})
        assert layer.query == MediaQuery()

    def test_non_mapping_style_rejected(self):
        with pytest.raises(LayerError):
            StyleLayer(style=[("a", {})])  # type: ignore[arg-type]

    def test_non_mapping_block_rejected(self):
        with pytest.raises(LayerError, match="'a'"):
            StyleLayer(style={"a": 1})  # type: ignore[dict-item]

    def test_non_query_rejected(self):
        with pytest.raises(LayerError):
            StyleLayer(style={}, query={"max_width": 3})  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# as_layer_source
# ---------------------------------------------------------------------------


class TestAsLayerSource:
    def test_single_layer(self):
        layer = StyleLayer(style={"a": {}})
        assert as_layer_source(layer) == Single(layer)

    def test_list_of_layers(self):
        layers = [StyleLayer(style={"a": {}}), StyleLayer(style={"b": {}})]
        source = as_layer_source(layers)
        assert isinstance(source, Many)
        assert source.layers == tuple(layers)

    def test_empty_list(self):
        assert as_layer_source([]) == Many(())

    def test_callable_is_builder(self):
        def build(units):
            return []

        source = as_layer_source(build)
        assert isinstance(source, Builder)
        assert source.fn is build

    def test_tagged_source_passes_through(self):
        source = Many(())
        assert as_layer_source(source) is source

    def test_list_with_non_layer_rejected(self):
        with pytest.raises(LayerError, match="layer 1"):
            as_layer_source([StyleLayer(style={}), {"style": {}}])

    def test_dict_rejected(self):
        with pytest.raises(LayerError):
            as_layer_source({"style": {}})

    def test_string_rejected(self):
        with pytest.raises(LayerError):
            as_layer_source("layers")
