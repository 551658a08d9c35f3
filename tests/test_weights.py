"""Tests for weight token conversion and formatting."""

from decimal import Decimal

import pytest

from apnacart.domain import catalog
from apnacart.domain.catalog import WeightToken
from apnacart.domain.errors import InvalidWeightToken
from apnacart.services.weights import (
    format_total,
    format_weight,
    format_weight_token,
    grams_to_kg,
    parse_token,
    to_grams,
    to_kg,
)


class TestToGrams:
    def test_gram_tokens(self):
        assert to_grams("250g") == 250
        assert to_grams("500g") == 500

    def test_kilogram_tokens(self):
        assert to_grams("1kg") == 1000
        assert to_grams("1.5kg") == 1500

    def test_rounds_to_nearest_gram(self):
        assert to_grams("250.4g") == 250
        assert to_grams("250.5g") == 251
        assert to_grams("0.0015kg") == 2

    def test_accepts_enum_members(self):
        assert to_grams(WeightToken.KILOGRAM_1) == 1000

    @pytest.mark.parametrize("token", ["", "250", "g", "250 g", "1KG", "-1kg", "250g\n", "1lb"])
    def test_rejects_unparseable_tokens(self, token):
        with pytest.raises(InvalidWeightToken):
            to_grams(token)

    def test_invalid_token_is_a_value_error(self):
        with pytest.raises(ValueError):
            to_grams("heavy")


class TestKilograms:
    def test_grams_to_kg_is_exact(self):
        assert grams_to_kg(250) == Decimal("0.25")
        assert grams_to_kg(1000) == Decimal("1")

    def test_to_kg(self):
        assert to_kg("500g") == Decimal("0.5")

    def test_catalog_tokens_use_enum_table(self, monkeypatch):
        monkeypatch.setitem(catalog._TOKEN_GRAMS, WeightToken.GRAMS_250, 251)
        assert to_grams("250g") == 251
        assert to_grams(WeightToken.GRAMS_250) == 251

    def test_equivalent_spelling_parsed(self):
        assert to_grams("1000g") == WeightToken.KILOGRAM_1.grams
        assert to_grams("0.5kg") == WeightToken.GRAMS_500.grams


class TestFormatWeight:
    def test_below_one_kilogram_in_grams(self):
        assert format_weight(0.25) == "250g"
        assert format_weight(Decimal("0.5")) == "500g"

    def test_kilograms_trim_trailing_zeros(self):
        assert format_weight(1.0) == "1kg"
        assert format_weight(2) == "2kg"
        assert format_weight(1.75) == "1.75kg"
        assert format_weight(1.5) == "1.5kg"

    def test_boundary_rounds_up_into_kilograms(self):
        assert format_weight(0.9996) == "1kg"

    def test_format_weight_token(self):
        assert format_weight_token("1000g") == "1kg"
        assert format_weight_token("0.25kg") == "250g"
        assert format_weight_token("a bunch") == "a bunch"

    @pytest.mark.parametrize("token", ["250g", "500g", "1kg"])
    def test_round_trip(self, token):
        grams = to_grams(token)
        assert to_grams(format_weight(grams_to_kg(grams))) == grams


class TestFormatTotal:
    def test_always_kilograms(self):
        assert format_total(0.5) == "0.5kg"
        assert format_total(Decimal("0.25")) == "0.25kg"
        assert format_total(4.5) == "4.5kg"
        assert format_total(7) == "7kg"

    def test_max_decimals(self):
        assert format_total(1.234, max_decimals=1) == "1.2kg"
        assert format_total(1.255) == "1.26kg"

    def test_untrimmed(self):
        assert format_total(Decimal("4.0"), trim=False) == "4.00kg"
        assert format_total(0, trim=False) == "0.00kg"


class TestParseToken:
    def test_known_tokens(self):
        assert parse_token("250g") is WeightToken.GRAMS_250
        assert parse_token(WeightToken.KILOGRAM_1) is WeightToken.KILOGRAM_1

    def test_parseable_but_not_sold(self):
        with pytest.raises(InvalidWeightToken):
            parse_token("750g")
