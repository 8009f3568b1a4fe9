"""Tests for value encoding rules."""

import pytest

from chat_forms.errors import FieldValueError
from chat_forms.models.form_schema import FormField
from chat_forms.renderer import encoding


class TestNumbers:
    """Tests for number formatting."""

    def test_format_number(self):
        """Test that whole floats lose their fraction."""
        assert encoding.format_number(1) == "1"
        assert encoding.format_number(1.0) == "1"
        assert encoding.format_number(2.5) == "2.5"

    def test_parse_number(self):
        """Test parsing keeps integers as int."""
        assert encoding.parse_number("4") == 4
        assert isinstance(encoding.parse_number("4.0"), int)
        assert encoding.parse_number("0.5") == 0.5

    def test_clean_number_text(self):
        """Test that non-numeric characters are dropped."""
        assert encoding.clean_number_text("12abc") == "12"
        assert encoding.clean_number_text("-3.5") == "-3.5"
        assert encoding.clean_number_text("x") == ""


class TestBooleans:
    """Tests for boolean encoding."""

    def test_round_trip(self):
        """Test the two literal values."""
        assert encoding.encode_bool(True) == "true"
        assert encoding.encode_bool(False) == "false"
        assert encoding.decode_bool("true") is True
        assert encoding.decode_bool("false") is False

    def test_unset_is_false(self):
        """Test that an unset value reads as unchecked."""
        assert encoding.decode_bool("") is False


class TestCheckboxGroup:
    """Tests for multi-select encoding."""

    def test_toggle_sequence(self):
        """Test that selection order is kept and deselection removes."""
        value = ""
        for option in ("A", "B", "A", "C"):
            value = encoding.toggle_option(value, option)
        assert value == "B,C"

    def test_selection_order_not_declaration_order(self):
        """Test that later selections go to the end."""
        value = encoding.toggle_option("", "C")
        value = encoding.toggle_option(value, "A")
        assert value == "C,A"

    def test_deselect_all(self):
        """Test that removing the last option yields an empty value."""
        assert encoding.toggle_option("A", "A") == ""

    def test_decode_list(self):
        """Test splitting drops empty parts."""
        assert encoding.decode_list("") == []
        assert encoding.decode_list("A,,B") == ["A", "B"]


class TestRating:
    """Tests for rating encoding."""

    def test_encode(self):
        """Test valid star counts."""
        assert encoding.encode_rating("rating", 1) == "1"
        assert encoding.encode_rating("rating", 5) == "5"

    @pytest.mark.parametrize("stars", [0, 6, -1, True, 2.5])
    def test_encode_out_of_range(self, stars):
        """Test that invalid star counts are rejected."""
        with pytest.raises(FieldValueError) as exc_info:
            encoding.encode_rating("rating", stars)
        assert exc_info.value.field_id == "rating"

    def test_star_states(self):
        """Test that stars at or below the rating are filled."""
        assert encoding.star_states("") == [False] * 5
        assert encoding.star_states("3") == [True, True, True, False, False]


class TestSlider:
    """Tests for slider encoding."""

    def test_bounds_defaults(self):
        """Test default min, max and step."""
        field = FormField(id="s", type="slider")
        assert encoding.slider_bounds(field) == (0, 100, 1)

    def test_unset_shows_minimum(self):
        """Test that an unset slider displays its minimum."""
        field = FormField(id="s", type="slider", min=1, max=10)
        assert encoding.slider_value(field, "") == 1
        assert encoding.slider_value(field, "7") == 7

    def test_snap(self):
        """Test clamping and snapping to the step grid."""
        field = FormField(id="s", type="slider", min=0, max=24, step=0.5)
        assert encoding.snap_slider(field, 7.3) == "7.5"
        assert encoding.snap_slider(field, 30) == "24"
        assert encoding.snap_slider(field, -2) == "0"


class TestRank:
    """Tests for rank encoding."""

    def test_untouched_keeps_declaration_order(self):
        """Test the default ranking."""
        field = FormField(id="r", type="rank", options=["A", "B", "C"])
        assert encoding.rank_order(field, "") == ["A", "B", "C"]
        assert encoding.rank_order(field, "C,A,B") == ["C", "A", "B"]

    def test_move_item(self):
        """Test moving an entry."""
        assert encoding.move_item(["A", "B", "C"], 2, 0) == ["C", "A", "B"]
        assert encoding.move_item(["A", "B", "C"], 0, 1) == ["B", "A", "C"]

    def test_move_out_of_range(self):
        """Test that out-of-range indices raise."""
        with pytest.raises(IndexError):
            encoding.move_item(["A", "B"], 0, 2)


class TestSubmission:
    """Tests for submission values and serialization."""

    def test_resolve_untouched_values(self):
        """Test that untouched controls submit what they show."""
        slider = FormField(id="s", type="slider", min=1, max=10)
        rank = FormField(id="r", type="rank", options=["A", "B"])
        checkbox = FormField(id="c", type="checkbox")
        toggle = FormField(id="t", type="toggle")
        text = FormField(id="x", type="text")
        assert encoding.resolve_submitted_value(slider, "") == "1"
        assert encoding.resolve_submitted_value(rank, "") == "A,B"
        assert encoding.resolve_submitted_value(checkbox, "") == "false"
        assert encoding.resolve_submitted_value(toggle, "") == "false"
        assert encoding.resolve_submitted_value(text, "") == ""

    def test_resolve_keeps_set_values(self):
        """Test that values the user set pass through."""
        slider = FormField(id="s", type="slider", min=1, max=10)
        assert encoding.resolve_submitted_value(slider, "6") == "6"

    def test_serialize_declaration_order(self):
        """Test that pairs follow declaration order, not value order."""
        fields = [FormField(id="a", type="text"), FormField(id="b", type="text")]
        assert encoding.serialize_values(fields, {"b": "2", "a": "1"}) == "a: 1, b: 2"

    def test_serialize_empty_values(self):
        """Test that empty values keep their pair."""
        fields = [FormField(id="a", type="text"), FormField(id="b", type="text")]
        assert encoding.serialize_values(fields, {"a": "", "b": ""}) == "a: , b: "

    def test_compact_choice(self):
        """Test the compact pill threshold."""
        assert encoding.is_compact_choice(["😍", "😊"])
        assert encoding.is_compact_choice(["Low", "High"])
        assert not encoding.is_compact_choice(["Low", "Medium"])
