"""
Tests for spoils disposition and offhaul.
"""

import pytest

from trenchcalc.core.estimator.spoils import (
    offhaul_time_hrs,
    plan_spoils,
    truck_loads,
)
from trenchcalc.models.excavation import SpoilsAction
from trenchcalc.models.reference import TruckProperties, TruckSize


@pytest.fixture
def truck():
    return TruckProperties.get(TruckSize.CY_14)


class TestTruckLoads:
    """Test load counting."""

    def test_rounds_up(self):
        assert truck_loads(9.26, 14) == 1
        assert truck_loads(14, 14) == 1
        assert truck_loads(14.01, 14) == 2

    def test_nothing_to_haul(self):
        assert truck_loads(0, 14) == 0
        assert truck_loads(-3, 14) == 0

    def test_zero_capacity(self):
        assert truck_loads(10, 0) == 0

    def test_offhaul_time(self):
        # 2 loads x (10 min load + 60 min trip)
        assert offhaul_time_hrs(2, 10, 60) == pytest.approx(140 / 60)


class TestPlanSpoils:
    """Test spoils plans for each policy."""

    def test_offhaul_all(self, truck):
        plan = plan_spoils(SpoilsAction.OFFHAUL, 9.26, 4.69, 1.25, truck, 60)

        assert plan.reuse_cy == 0
        assert plan.offhaul_cy == pytest.approx(9.26)
        assert plan.truck_loads == 1
        assert plan.offhaul_time_hrs == pytest.approx(70 / 60)

    def test_reuse_converts_to_loose(self, truck):
        """Reused bank CY are swelled before leaving the loose pile."""
        plan = plan_spoils(SpoilsAction.REUSE, 9.26, 4.0, 1.25, truck, 60)

        assert plan.reuse_cy == 4.0
        assert plan.offhaul_cy == pytest.approx(4.26)

    def test_partial_reuses_half(self, truck):
        plan = plan_spoils(SpoilsAction.PARTIAL, 9.26, 4.0, 1.25, truck, 60)

        assert plan.reuse_cy == pytest.approx(2.0)
        assert plan.offhaul_cy == pytest.approx(6.76)

    @pytest.mark.parametrize("action", list(SpoilsAction))
    def test_offhaul_never_negative(self, truck, action):
        plan = plan_spoils(action, 1.0, 50.0, 1.25, truck, 60)

        assert plan.offhaul_cy >= 0

    def test_no_offhaul_needs_no_trucks(self, truck):
        plan = plan_spoils(SpoilsAction.REUSE, 5.0, 10.0, 1.25, truck, 60)

        assert plan.truck_loads == 0
        assert plan.offhaul_time_hrs == 0
