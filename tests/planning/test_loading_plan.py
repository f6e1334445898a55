"""
Unit tests for LoadingPlan.
"""

from ramp_placement.common.constants import UNLIMITED_WEIGHT_KG
from ramp_placement.planning.loading_plan import LoadingPlan
from ramp_placement.planning.types import PlanEntry


class TestLoadingPlan:
    """Tests for entries and weight limits."""

    def test_put_and_get(self):
        plan = LoadingPlan()
        plan.put_entry(PlanEntry("AKE123", 4800.0, "2R"))

        assert "AKE123" in plan
        assert plan.get_entry("AKE123").expected_slot_code == "2R"
        assert plan.get_entry("MISSING") is None

    def test_put_replaces(self):
        plan = LoadingPlan()
        plan.put_entry(PlanEntry("AKE123", 4800.0, "2R"))
        plan.put_entry(PlanEntry("AKE123", 4000.0, "3L"))

        assert len(plan) == 1
        assert plan.entries() == [PlanEntry("AKE123", 4000.0, "3L")]

    def test_unconfigured_slot_is_unlimited(self):
        plan = LoadingPlan()
        assert plan.get_max_weight_for_slot("1L") == UNLIMITED_WEIGHT_KG
        assert 1e30 <= plan.get_max_weight_for_slot("1L")

    def test_set_max_weight(self):
        plan = LoadingPlan()
        plan.set_max_weight_for_slot("1L", 2500)
        assert plan.get_max_weight_for_slot("1L") == 2500.0
        assert plan.weight_limits() == {"1L": 2500.0}

    def test_apply_limits_overwrites(self, aircraft_a_profile):
        plan = LoadingPlan()
        plan.put_entry(PlanEntry("AKE123", 4800.0, "2R"))
        plan.set_max_weight_for_slot("2R", 100.0)
        plan.set_max_weight_for_slot("9L", 42.0)

        plan.apply_limits(aircraft_a_profile)

        assert plan.get_max_weight_for_slot("2R") == 5000.0
        assert plan.get_max_weight_for_slot("9L") == 42.0
        assert len(plan) == 1

    def test_demo_plan(self, demo_plan):
        assert demo_plan.container_ids() == ["AKE123", "AKE456"]
        assert demo_plan.get_entry("AKE456").expected_slot_code == "1L"
        assert len(demo_plan.weight_limits()) == 8
        assert all(v == 5000.0 for v in demo_plan.weight_limits().values())
