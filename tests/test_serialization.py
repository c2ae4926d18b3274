"""Tests for number parsing and JSON serialization."""

from __future__ import annotations

import json

import pytest

from mealtemplates.template.models import FoodItem
from mealtemplates.template.numbers import as_number, parse_float, parse_int, round_half_up
from mealtemplates.template.serialization import (
    deserialize_template,
    item_to_dict,
    serialize_template,
)


class TestNumbers:
    """Tests for lenient number parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [("60", 60), ("60g", 60), (" -3", -3), (40.7, 40), ("abc", None), (True, None), (None, None)],
    )
    def test_parse_int(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [("12.5", 12.5), (".5", 0.5), ("80 grams", 80.0), ("", None), ("inf", None), ([1], None)],
    )
    def test_parse_float(self, value, expected):
        assert parse_float(value) == expected

    def test_as_number(self):
        assert as_number(40.0) == 40 and isinstance(as_number(40.0), int)
        assert as_number(12.5) == 12.5

    def test_round_half_up(self):
        assert [round_half_up(v) for v in (0.5, 1.5, 2.5, 2.49)] == [1, 2, 3, 2]


class TestSerialization:
    """Tests for template <-> dict conversion."""

    def test_grams_only_when_set(self):
        assert item_to_dict(FoodItem("Egg", 60)) == {"name": "Egg", "baseGrams": 60}
        assert item_to_dict(FoodItem("Egg", 60, 75)) == {"name": "Egg", "baseGrams": 60, "grams": 75}

    def test_json_serializable(self, template):
        data = serialize_template(template)
        assert set(data) == {"breakfasts", "lunches", "dinners", "snacks"}
        json.dumps(data)

    def test_round_trip(self, template):
        assert deserialize_template(serialize_template(template)) == template

    def test_deserialize_legacy(self, legacy_raw):
        assert deserialize_template(legacy_raw).breakfasts[0].title == "BF"
