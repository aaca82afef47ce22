"""
Tests for DataValidator value normalization.
"""
import pytest
from datetime import date, datetime

from quire.core.validators import DataValidator


class TestNormalizeDate:
    """Tests for strict ISO date parsing."""

    def test_iso_string(self):
        assert DataValidator.normalize_date("2024-01-15") == date(2024, 1, 15)

    def test_surrounding_whitespace(self):
        assert DataValidator.normalize_date(" 2024-01-15 ") == date(2024, 1, 15)

    def test_date_object_passthrough(self):
        assert DataValidator.normalize_date(date(2024, 1, 15)) == date(2024, 1, 15)

    @pytest.mark.parametrize("value", ["June 19 2024", "2024/01/15", "15-01-2024", "2024-1-5"])
    def test_other_notations_rejected(self, value):
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            DataValidator.normalize_date(value)

    def test_impossible_date_rejected(self):
        with pytest.raises(ValueError, match="calendar"):
            DataValidator.normalize_date("2024-02-30")

    def test_datetime_rejected(self):
        with pytest.raises(ValueError, match="without time"):
            DataValidator.normalize_date(datetime(2024, 1, 15, 10, 0))

    def test_list_rejected(self):
        with pytest.raises(ValueError):
            DataValidator.normalize_date(["2024-01-15"])


class TestNormalizeString:
    """Tests for scalar strings."""

    def test_strips(self):
        assert DataValidator.normalize_string("  Hello ") == "Hello"

    def test_blank_is_none(self):
        assert DataValidator.normalize_string("   ") is None
        assert DataValidator.normalize_string(None) is None

    def test_list_rejected(self):
        with pytest.raises(ValueError, match="single value"):
            DataValidator.normalize_string(["a", "b"])


class TestNormalizeBool:
    """Tests for boolean words."""

    @pytest.mark.parametrize("value", ["true", "True", "yes", "on", "1", True, 1])
    def test_true(self, value):
        assert DataValidator.normalize_bool(value) is True

    @pytest.mark.parametrize("value", ["false", "no", "off", "0", False, 0])
    def test_false(self, value):
        assert DataValidator.normalize_bool(value) is False

    def test_none(self):
        assert DataValidator.normalize_bool(None) is None

    def test_unknown_word(self):
        with pytest.raises(ValueError, match="boolean"):
            DataValidator.normalize_bool("maybe")

    def test_list_rejected(self):
        with pytest.raises(ValueError, match="true or false"):
            DataValidator.normalize_bool(["true"])


class TestNormalizeStrList:
    """Tests for tag lists."""

    def test_comma_string(self):
        assert DataValidator.normalize_str_list("python, web") == ("python", "web")

    def test_list_deduplicated(self):
        assert DataValidator.normalize_str_list(["a", " b ", "a", ""]) == ("a", "b")

    def test_none(self):
        assert DataValidator.normalize_str_list(None) == ()

    def test_nested_rejected(self):
        with pytest.raises(ValueError, match="strings"):
            DataValidator.normalize_str_list([["a"]])

    def test_mapping_rejected(self):
        with pytest.raises(ValueError):
            DataValidator.normalize_str_list({"a": "b"})


class TestIsBlank:
    """Tests for blank detection."""

    def test_blank_values(self):
        assert DataValidator.is_blank(None)
        assert DataValidator.is_blank("")
        assert DataValidator.is_blank("  ")

    def test_non_blank_values(self):
        assert not DataValidator.is_blank("x")
        assert not DataValidator.is_blank([])
