"""
Unit tests for slot identifiers.
"""

import pytest

from ramp_placement.geometry.slot import Side, SlotIdentifier, clamp_row


class TestSlotIdentifier:
    """Tests for SlotIdentifier construction and formatting."""

    def test_as_code(self):
        assert SlotIdentifier(2, Side.RIGHT).as_code() == "2R"
        assert str(SlotIdentifier(12, Side.LEFT)) == "12L"

    def test_invalid_row(self):
        with pytest.raises(ValueError):
            SlotIdentifier(0, Side.LEFT)

    def test_invalid_side(self):
        with pytest.raises(TypeError):
            SlotIdentifier(1, "L")

    def test_equality_and_hash(self):
        assert SlotIdentifier(3, Side.LEFT) == SlotIdentifier(3, Side.LEFT)
        assert len({SlotIdentifier(3, Side.LEFT), SlotIdentifier(3, Side.LEFT)}) == 1

    def test_all_slots_order(self):
        codes = [slot.as_code() for slot in SlotIdentifier.all_slots(2)]
        assert codes == ["1L", "1R", "2L", "2R"]

    def test_all_slots_round_trip(self):
        for slot in SlotIdentifier.all_slots(20):
            assert SlotIdentifier.parse(slot.as_code()) == slot


class TestParse:
    """Tests for SlotIdentifier.parse."""

    def test_parse_valid(self):
        assert SlotIdentifier.parse("2R") == SlotIdentifier(2, Side.RIGHT)
        assert SlotIdentifier.parse("12L") == SlotIdentifier(12, Side.LEFT)

    def test_parse_is_case_insensitive_and_trims(self):
        assert SlotIdentifier.parse(" 3l ") == SlotIdentifier(3, Side.LEFT)

    @pytest.mark.parametrize(
        "code",
        [None, "", "R", "2X", "R2", "aL", "0L", "-1R", "1.5L", "+2R", "2 R", "2_0R", "\u0662L"],
    )
    def test_parse_invalid_returns_none(self, code):
        assert SlotIdentifier.parse(code) is None


class TestFromNormalized:
    """Tests for the normalized-coordinate mapping."""

    def test_clamps_beyond_back_of_ramp(self):
        slot = SlotIdentifier.from_normalized(0.9, 1.5, 4)
        assert slot == SlotIdentifier(4, Side.RIGHT)

    def test_front_left(self):
        assert SlotIdentifier.from_normalized(0.1, 0.0, 4) == SlotIdentifier(1, Side.LEFT)

    def test_boundaries(self):
        # nx == 0.5 is the right side; nz * rows == 1.0 starts row 2
        assert SlotIdentifier.from_normalized(0.5, 0.25, 4) == SlotIdentifier(2, Side.RIGHT)

    def test_clamps_in_front_of_ramp(self):
        assert SlotIdentifier.from_normalized(-0.2, -3.0, 4) == SlotIdentifier(1, Side.LEFT)

    def test_infinite_depth(self):
        assert SlotIdentifier.from_normalized(0.7, float("inf"), 4).row == 4
        assert SlotIdentifier.from_normalized(0.7, float("-inf"), 4).row == 1

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            SlotIdentifier.from_normalized(float("nan"), 0.5, 4)
        with pytest.raises(ValueError):
            SlotIdentifier.from_normalized(0.5, float("nan"), 4)

    def test_invalid_row_count(self):
        with pytest.raises(ValueError):
            SlotIdentifier.from_normalized(0.5, 0.5, 0)


class TestClampRow:
    """Tests for clamp_row."""

    @pytest.mark.parametrize(
        "depth, expected",
        [(0.0, 1), (0.99, 1), (1.0, 2), (3.999, 4), (4.0, 4), (-0.5, 1), (1e12, 4)],
    )
    def test_clamp_row(self, depth, expected):
        assert clamp_row(depth, 4) == expected
