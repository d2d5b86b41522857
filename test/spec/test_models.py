"""Tests for the specification models -- serialization, immutability, enums."""

import json

import pytest
from pydantic import ValidationError

from vlplot.spec import (
    Color,
    DataFormat,
    DataFormatType,
    Encoding,
    FilterTransform,
    InlineData,
    LookupData,
    LookupTransform,
    Mark,
    MarkDef,
    Projection,
    ProjectionType,
    Scale,
    StandardType,
    TimeUnit,
    UrlData,
    Vegalite,
    X,
    Y,
)
from vlplot.spec.transform import CalculateTransform


class TestVegaliteSerialization:
    """to_dict / to_string output."""

    def test_schema_is_first_and_v4(self):
        spec = Vegalite(title="T", mark=Mark.POINT)
        out = spec.to_dict()
        assert list(out.keys())[0] == "$schema"
        assert out["$schema"] == "https://vega.github.io/schema/vega-lite/v4.json"

    def test_unset_members_omitted(self):
        out = Vegalite(mark=Mark.BAR).to_dict()
        assert set(out.keys()) == {"$schema", "mark"}

    def test_mark_serialized_as_string(self):
        assert Vegalite(mark=Mark.GEOSHAPE).to_dict()["mark"] == "geoshape"

    def test_mark_accepts_plain_string(self):
        assert Vegalite(mark="line").mark == Mark.LINE

    def test_mark_def(self):
        spec = Vegalite(mark=MarkDef(type=Mark.LINE, point=True, stroke_width=2))
        assert spec.to_dict()["mark"] == {"type": "line", "point": True, "strokeWidth": 2.0}

    def test_to_string_is_json(self):
        spec = Vegalite(title="Random points", mark=Mark.POINT)
        assert json.loads(spec.to_string()) == spec.to_dict()

    def test_to_string_indent(self):
        text = Vegalite(mark=Mark.POINT).to_string(indent=2)
        assert "\n  " in text

    def test_camel_case_aliases(self):
        x = X(field="date", time_unit=TimeUnit.MONTH, type=StandardType.ORDINAL)
        assert x.to_dict() == {"field": "date", "type": "ordinal", "timeUnit": "month"}

    def test_populate_by_alias(self):
        x = X.model_validate({"field": "date", "timeUnit": "month"})
        assert x.time_unit == TimeUnit.MONTH

    def test_mimebundle(self):
        spec = Vegalite(mark=Mark.POINT)
        bundle = spec._repr_mimebundle_()
        assert bundle == {"application/vnd.vegalite.v4+json": spec.to_dict()}


class TestDataModels:
    """Data references and formats."""

    def test_url_data_with_topojson_format(self):
        data = UrlData(
            url="https://example.com/us-10m.json",
            format=DataFormat(type=DataFormatType.TOPOJSON, feature="counties"),
        )
        assert data.to_dict() == {
            "url": "https://example.com/us-10m.json",
            "format": {"type": "topojson", "feature": "counties"},
        }

    def test_data_dict_resolves_to_url_data(self):
        spec = Vegalite.model_validate({"data": {"url": "a.csv"}, "mark": "bar"})
        assert isinstance(spec.data, UrlData)

    def test_data_dict_resolves_to_inline_data(self):
        spec = Vegalite.model_validate({"data": {"values": [{"a": 1}]}, "mark": "bar"})
        assert isinstance(spec.data, InlineData)

    def test_inline_field_names(self):
        data = InlineData(values=[{"a": 1}, {"b": 2}])
        assert data.field_names() == {"a", "b"}
        assert data.row_count() == 2

    def test_inline_string_values(self):
        data = InlineData(values="a,b\n1,2", format=DataFormat(type=DataFormatType.CSV))
        assert data.field_names() == set()
        assert data.row_count() == 0


class TestTransforms:
    """Transform aliases ("from", "as")."""

    def test_lookup_serializes_from(self):
        t = LookupTransform(
            lookup="id",
            from_=LookupData(data=UrlData(url="u.tsv"), key="id", fields=["rate"]),
        )
        assert t.to_dict() == {
            "lookup": "id",
            "from": {"data": {"url": "u.tsv"}, "key": "id", "fields": ["rate"]},
        }

    def test_lookup_output_fields(self):
        t = LookupTransform(
            lookup="id",
            from_=LookupData(data=UrlData(url="u.tsv"), key="id", fields=["rate"]),
        )
        assert t.output_fields() == ["rate"]

    def test_lookup_output_fields_with_as(self):
        t = LookupTransform.model_validate(
            {"lookup": "id", "from": {"data": {"url": "u"}, "key": "id"}, "as": "geo"}
        )
        assert t.output_fields() == ["geo"]

    def test_calculate_serializes_as(self):
        t = CalculateTransform(calculate="datum.a * 2", as_="b")
        assert t.to_dict() == {"calculate": "datum.a * 2", "as": "b"}

    def test_filter(self):
        assert FilterTransform(filter="datum.symbol==='GOOG'").to_dict() == {
            "filter": "datum.symbol==='GOOG'"
        }


class TestEncoding:
    """Encoding channels."""

    def test_scale_domain_and_range(self):
        color = Color(field="weather", scale=Scale(domain=["sun", "fog"], range=["#e7ba52", "#c7c7c7"]))
        assert color.to_dict() == {
            "field": "weather",
            "scale": {"domain": ["sun", "fog"], "range": ["#e7ba52", "#c7c7c7"]},
        }

    def test_channels_lists_set_channels(self):
        enc = Encoding(
            x=X(field="a"),
            tooltip=[Y(field="a"), Y(field="b")],
        )
        assert set(enc.channels().keys()) == {"x", "tooltip[0]", "tooltip[1]"}

    def test_x_and_y_are_position_defs(self):
        assert X is Y


class TestValidationAtConstruction:
    """Field presence and enum validity."""

    def test_frozen(self):
        spec = Vegalite(title="T")
        with pytest.raises(ValidationError):
            spec.title = "changed"

    def test_unknown_member_rejected(self):
        with pytest.raises(ValidationError):
            X(field="a", colour="red")

    def test_invalid_enum_rejected(self):
        with pytest.raises(ValidationError):
            X(field="a", type="continuous")

    def test_invalid_mark_rejected(self):
        with pytest.raises(ValidationError):
            Vegalite(mark="pie")

    def test_projection_type_enum(self):
        assert Projection(type="albersUsa").type == ProjectionType.ALBERS_USA

    def test_url_required(self):
        with pytest.raises(ValidationError):
            UrlData()

    def test_mark_def_opacity_range(self):
        with pytest.raises(ValidationError):
            MarkDef(type=Mark.POINT, opacity=1.5)


class TestWithTheme:
    """Theme config merging."""

    def test_with_theme_sets_config(self):
        spec = Vegalite(mark=Mark.POINT).with_theme("dark")
        assert spec.config["background"] == "#1E1E1E"

    def test_explicit_config_wins(self):
        spec = Vegalite(mark=Mark.POINT, config={"background": "#000000"}).with_theme("dark")
        assert spec.config["background"] == "#000000"
        assert "axis" in spec.config

    def test_original_unchanged(self):
        spec = Vegalite(mark=Mark.POINT)
        spec.with_theme("light")
        assert spec.config is None
