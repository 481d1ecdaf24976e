"""Tests for style document validation rules and the validator."""

import pytest

from mediastyle.model.diagnostic import Diagnostic, Severity
from mediastyle.validation import ValidationError, severity_counts, validate, validate_or_raise
from mediastyle.validation.rules import (
    build_query,
    check_bound_order,
    check_bound_types,
    check_empty_style,
    check_enum_values,
    check_guard_type,
    check_layer_shape,
    check_never_matches,
    check_query_syntax,
)


def _layer(query=None, style=None) -> dict:
    layer = {"style": {"a": {"x": 1}} if style is None else style}
    if query is not None:
        layer["query"] = query
    return layer


# ---------------------------------------------------------------------------
# check_layer_shape
# ---------------------------------------------------------------------------


class TestCheckLayerShape:
    def test_valid(self):
        assert check_layer_shape([_layer()]) == []

    def test_not_an_object(self):
        diags = check_layer_shape(["oops"])
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].layer == 0

    def test_missing_style(self):
        diags = check_layer_shape([{"query": {}}])
        assert [d.message for d in diags] == ["Layer has no 'style'."]

    def test_style_not_object(self):
        diags = check_layer_shape([{"style": [1]}])
        assert diags[0].field == "style"

    def test_block_not_object(self):
        diags = check_layer_shape([{"style": {"a": 1, "b": {}}}])
        assert len(diags) == 1
        assert diags[0].field == "a"

    def test_unknown_key_warns(self):
        diags = check_layer_shape([{"style": {}, "media": {}}])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].field == "media"


# ---------------------------------------------------------------------------
# check_query_syntax
# ---------------------------------------------------------------------------


class TestCheckQuerySyntax:
    def test_valid_mapping_and_expression(self):
        layers = [_layer({"max_short_side": 600}), _layer("orientation=portrait")]
        assert check_query_syntax(layers) == []

    def test_unknown_key(self):
        diags = check_query_syntax([_layer({"maxDepth": 3})])
        assert len(diags) == 1
        assert diags[0].field == "maxDepth"

    def test_duplicate_spellings(self):
        diags = check_query_syntax([_layer({"maxShortSide": 600, "max_short_side": 500})])
        assert len(diags) == 1
        assert "max_short_side" in diags[0].message

    def test_bad_expression(self):
        diags = check_query_syntax([_layer("width>>3")])
        assert len(diags) == 1
        assert "Invalid query expression" in diags[0].message

    def test_wrong_type(self):
        diags = check_query_syntax([_layer([1, 2])])
        assert diags[0].severity is Severity.ERROR


# ---------------------------------------------------------------------------
# bound checks
# ---------------------------------------------------------------------------


class TestCheckBoundTypes:
    def test_string_bound(self):
        diags = check_bound_types([_layer({"minWidth": "600"})])
        assert len(diags) == 1
        assert diags[0].field == "minWidth"

    def test_bool_bound(self):
        assert len(check_bound_types([_layer({"max_width": True})])) == 1

    def test_numbers_ok(self):
        assert check_bound_types([_layer({"min_width": 1, "max_aspect_ratio": 1.5})]) == []


class TestCheckBoundOrder:
    def test_inverted(self):
        diags = check_bound_order([_layer({"min_width": 800, "max_width": 400})])
        assert len(diags) == 1
        assert diags[0].field == "width"
        assert "greater than" in diags[0].message

    def test_mixed_spellings(self):
        diags = check_bound_order([_layer({"minShortSide": 700, "max_short_side": 600})])
        assert len(diags) == 1

    def test_equal_ok(self):
        assert check_bound_order([_layer({"min_width": 400, "max_width": 400})]) == []


class TestCheckEnumValues:
    def test_bad_orientation(self):
        diags = check_enum_values([_layer({"orientation": "sideways"})])
        assert len(diags) == 1
        assert "landscape" in diags[0].fix

    def test_bad_platform(self):
        assert len(check_enum_values([_layer({"platform": "symbian"})])) == 1

    def test_good_values(self):
        assert check_enum_values([_layer({"orientation": "portrait", "platform": "web"})]) == []


class TestCheckGuardType:
    def test_non_bool(self):
        diags = check_guard_type([_layer({"condition": "yes"})])
        assert len(diags) == 1
        assert diags[0].field == "condition"

    def test_bool_ok(self):
        assert check_guard_type([_layer({"guard": False})]) == []


# ---------------------------------------------------------------------------
# semantic checks
# ---------------------------------------------------------------------------


class TestCheckNeverMatches:
    def test_false_guard(self):
        diags = check_never_matches([_layer({"guard": False})])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING

    def test_landscape_with_low_aspect(self):
        diags = check_never_matches([_layer({"orientation": "landscape", "max_aspect_ratio": 1})])
        assert len(diags) == 1

    def test_portrait_with_high_aspect(self):
        diags = check_never_matches([_layer("orientation=portrait && aspect_ratio>=1.2")])
        assert len(diags) == 1

    def test_satisfiable(self):
        assert check_never_matches([_layer({"orientation": "landscape", "min_aspect_ratio": 1.2})]) == []

    def test_skips_invalid(self):
        assert check_never_matches([_layer({"orientation": "sideways"}), "x"]) == []


class TestCheckEmptyStyle:
    def test_empty(self):
        diags = check_empty_style([_layer(style={})])
        assert diags[0].severity is Severity.INFO


# ---------------------------------------------------------------------------
# build_query
# ---------------------------------------------------------------------------


class TestBuildQuery:
    def test_none(self):
        assert build_query(None).is_empty

    def test_ignores_null_values(self):
        assert build_query({"max_width": None}).is_empty


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidator:
    def test_valid_document(self):
        assert validate([_layer(), _layer({"max_short_side": 600})]) == []

    def test_collects_from_all_rules(self):
        diags = validate(
            [
                _layer({"min_width": 800, "max_width": 400}),
                _layer({"orientation": "sideways"}),
                {"query": {}},
            ]
        )
        rules = {d.rule for d in diags}
        assert {"check_bound_order", "check_enum_values", "check_layer_shape"} <= rules

    def test_extra_rules(self):
        def no_red(layers):
            return [
                Diagnostic(rule="no_red", severity=Severity.WARNING, message="red", layer=i)
                for i, layer in enumerate(layers)
                if "red" in str(layer)
            ]

        diags = validate([_layer(style={"a": {"color": "red"}})], extra_rules=[no_red])
        assert [d.rule for d in diags] == ["no_red"]

    def test_validate_or_raise_raises(self):
        with pytest.raises(ValidationError) as info:
            validate_or_raise([{"query": {}}])
        assert info.value.diagnostics
        assert all(d.is_error for d in info.value.diagnostics)

    def test_validate_or_raise_returns_warnings(self):
        diags = validate_or_raise([_layer({"guard": False})])
        assert len(diags) == 1
        assert diags[0].is_warning


class TestDiagnosticStr:
    def test_layer_and_field(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="bad", layer=2, field="width")
        assert str(d) == "ERROR [layer=2 field=width]: bad"

    def test_layer_only(self):
        d = Diagnostic(rule="r", severity=Severity.WARNING, message="hmm", layer=0)
        assert str(d) == "WARNING [layer=0]: hmm"

    def test_no_location(self):
        d = Diagnostic(rule="r", severity=Severity.INFO, message="fyi")
        assert str(d) == "INFO: fyi"


class TestSeverityCounts:
    def test_counts_every_severity(self):
        diags = validate([{"query": {}}, _layer({"guard": False}), _layer(style={})])
        assert severity_counts(diags) == {
            Severity.ERROR: 1,
            Severity.WARNING: 1,
            Severity.INFO: 1,
        }

    def test_empty(self):
        assert severity_counts([]) == {Severity.ERROR: 0, Severity.WARNING: 0, Severity.INFO: 0}
