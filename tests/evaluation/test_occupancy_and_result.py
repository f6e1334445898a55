"""
Unit tests for OccupancyTable and EvaluationResult.
"""

from ramp_placement.common.constants import UNLIMITED_WEIGHT_KG
from ramp_placement.evaluation.occupancy import OccupancyTable
from ramp_placement.evaluation.types import DecisionStatus, EvaluationResult, RejectionReason
from ramp_placement.geometry.slot import SlotIdentifier


class TestOccupancyTable:
    """Tests for the bidirectional slot/container mapping."""

    def test_place_and_query(self):
        table = OccupancyTable()
        assert table.place("A", "1L") is None

        assert table.slot_of("A") == "1L"
        assert table.occupant_of("1L") == "A"
        assert table.is_occupied("1L")
        assert len(table) == 1

    def test_place_returns_evicted(self):
        table = OccupancyTable()
        table.place("A", "1L")

        assert table.place("B", "1L") == "A"
        assert table.slot_of("A") is None
        assert table.occupant_of("1L") == "B"

    def test_same_container_same_slot(self):
        table = OccupancyTable()
        table.place("A", "1L")
        assert table.place("A", "1L") is None
        assert table.snapshot() == {"1L": "A"}

    def test_remove(self):
        table = OccupancyTable()
        table.place("A", "1L")

        assert table.remove("A") == "1L"
        assert table.remove("A") is None
        assert not table.is_occupied("1L")

    def test_snapshot_is_a_copy(self):
        table = OccupancyTable()
        table.place("A", "1L")
        snapshot = table.snapshot()
        snapshot["2L"] = "B"
        assert table.occupant_of("2L") is None

    def test_clear(self):
        table = OccupancyTable()
        table.place("A", "1L")
        table.place("B", "2R")
        table.clear()
        assert len(table) == 0
        assert table.slot_of("B") is None


class TestEvaluationResult:
    """Tests for result properties and operator messages."""

    def _result(self, **overrides):
        fields = dict(
            container_id="AKE123",
            weight_kg=4800.0,
            position_matches=True,
            weight_ok=True,
            actual_slot=SlotIdentifier.parse("2R"),
            expected_slot=SlotIdentifier.parse("2R"),
        )
        fields.update(overrides)
        return EvaluationResult(**fields)

    def test_pass_message(self):
        result = self._result()

        assert result.is_pass()
        assert result.decision == DecisionStatus.PASS
        assert result.rejection_reasons == []
        assert result.allowed_max_kg == UNLIMITED_WEIGHT_KG
        assert result.get_message() == "ULD AKE123\n✓ Correct at 2R\nTarget: 2R"

    def test_wrong_slot_message(self):
        result = self._result(
            position_matches=False,
            actual_slot=SlotIdentifier.parse("1L"),
            suggested_slot=SlotIdentifier.parse("2R"),
        )

        assert not result.is_pass()
        assert result.get_message() == "ULD AKE123\n✗ Wrong: 1L\nExpected: 2R\n→ Try: 2R"

    def test_overweight_message(self):
        result = self._result(weight_ok=False)
        message = result.get_message()

        assert result.decision == DecisionStatus.REJECT
        assert "⚠ Overweight" in message
        assert "→ Try" not in message

    def test_not_in_plan_message(self):
        result = self._result(position_matches=False, expected_slot=None)

        assert result.rejection_reasons == [RejectionReason.NOT_IN_PLAN]
        assert "Expected: <none in plan>" in result.get_message()

    def test_multiple_reasons(self):
        result = self._result(position_matches=False, weight_ok=False)
        assert result.rejection_reasons == [
            RejectionReason.POSITION_MISMATCH,
            RejectionReason.OVERWEIGHT,
        ]
