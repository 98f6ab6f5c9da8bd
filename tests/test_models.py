"""
Tests for input, reference and result models.
"""

import pytest

from trenchcalc.core.errors import ConfigurationError, ValidationError
from trenchcalc.core.estimator import compute
from trenchcalc.models.excavation import (
    CalculatorInput,
    DepthMode,
    EstimatingSettings,
    ExcType,
    SpoilsAction,
)
from trenchcalc.models.reference import (
    EXCAVATOR_SIZES,
    LOCATION_TYPES,
    SHORING_TYPES,
    SOIL_TYPES,
    SURFACE_TYPES,
    TRUCK_SIZES,
    ExcavatorProperties,
    ExcavatorSize,
    LocationProperties,
    LocationType,
    ShoringProperties,
    ShoringType,
    SoilProperties,
    SoilType,
    SurfaceProperties,
    SurfaceType,
    TruckProperties,
    TruckSize,
)
from trenchcalc.models.results import CalculationResults


@pytest.fixture
def form_payload():
    """Payload as posted by the estimating form."""
    return {
        "projectDesc": "Lateral replacement",
        "excType": "bellhole",
        "soilType": "type_c",
        "shoringType": "shored",
        "pipeOD": 12,
        "lengthFt": 8,
        "widthFt": 6,
        "depthFt": 4,
        "depthMode": "topOfPipe",
        "spoilsAction": "partial",
        "truckSize": "20cy",
        "multiDepth": True,
        "depthSegments": [{"lengthFt": 8, "depthFt": 4, "widthFt": 6}],
        "congestionItems": [{"type": "Gas", "lengthFt": 6, "depthFt": 3}],
        "settings": {"jobEfficiency": 90, "handDigRateCYPerHr": 1},
    }


class TestCalculatorInput:
    """Tests for the calculator input record."""

    def test_defaults(self):
        """Test the default single-depth trench."""
        calc_input = CalculatorInput()

        assert calc_input.exc_type == ExcType.TRENCH
        assert calc_input.soil_type == SoilType.TYPE_B
        assert calc_input.pipe_od == 6
        assert calc_input.length_ft == 20
        assert calc_input.depth_ft == 5
        assert calc_input.use_auto_width is True
        assert calc_input.spoils_action == SpoilsAction.REUSE
        assert [side.length_ft for side in calc_input.ns_sides] == [10, 8, 10, 8, 6]
        assert calc_input.settings == EstimatingSettings()

    def test_from_camel_case_payload(self, form_payload):
        calc_input = CalculatorInput.from_payload(form_payload)

        assert calc_input.project_desc == "Lateral replacement"
        assert calc_input.exc_type == ExcType.BELLHOLE
        assert calc_input.pipe_od == 12
        assert calc_input.depth_mode == DepthMode.TOP_OF_PIPE
        assert calc_input.truck_size == TruckSize.CY_20
        assert calc_input.depth_segments[0].width_ft == 6
        assert calc_input.congestion_items[0].type == "Gas"
        assert calc_input.settings.job_efficiency == 90
        assert calc_input.settings.hand_dig_rate_cy_per_hr == 1

    def test_from_snake_case_payload(self):
        calc_input = CalculatorInput.from_payload({"exc_type": "bellhole", "pipe_od": 8})

        assert calc_input.exc_type == ExcType.BELLHOLE
        assert calc_input.pipe_od == 8

    def test_payload_estimates(self, form_payload):
        results = compute(CalculatorInput.from_payload(form_payload))

        assert results.bank_vol_cy > 0
        assert results.shoring_panels > 0

    def test_unknown_catalog_key(self):
        """Test that unknown enum keys are rejected with the field name."""
        with pytest.raises(ValidationError) as exc_info:
            CalculatorInput.from_payload({"soilType": "granite"})

        error = exc_info.value
        assert error.error_code == "VALIDATION_ERROR"
        assert "soil" in error.details["field"].lower()
        assert error.details["errors"]

    def test_wrong_type(self):
        with pytest.raises(ValidationError):
            CalculatorInput.from_payload({"lengthFt": "long"})

    def test_negative_dimensions_accepted(self):
        calc_input = CalculatorInput.from_payload({"lengthFt": -5})

        assert calc_input.length_ft == -5

    def test_immutable(self):
        calc_input = CalculatorInput()

        with pytest.raises(Exception):
            calc_input.length_ft = 30


class TestEstimatingSettings:
    """Tests for estimating settings."""

    def test_defaults(self):
        settings = EstimatingSettings()

        assert settings.job_efficiency == 83
        assert settings.hand_dig_rate_cy_per_hr == 0.5
        assert settings.compaction_time_sf_per_hr == 400
        assert settings.clearance_under_pipe_in == 24
        assert settings.pipe_clearance_in == 6
        assert settings.truck_round_trip_min == 60
        assert settings.crew_laborers == 2
        assert settings.crew_truck_driver == 0
        assert settings.bucket_fill_factor == 0.85
        assert settings.backfill_placement_cy_per_hr == 15

    def test_from_payload(self):
        settings = EstimatingSettings.from_payload(
            {"compactionTimeSFPerHr": 500, "backfillPlacementCYPerHr": 20, "crewLaborers": 3}
        )

        assert settings.compaction_time_sf_per_hr == 500
        assert settings.backfill_placement_cy_per_hr == 20
        assert settings.crew_laborers == 3
        assert settings.job_efficiency == 83

    def test_invalid_payload(self):
        with pytest.raises(ConfigurationError) as exc_info:
            EstimatingSettings.from_payload({"jobEfficiency": "fast"})

        assert exc_info.value.error_code == "CONFIGURATION_ERROR"
        assert "config_key" in exc_info.value.details


class TestReferenceCatalogs:
    """Tests for the reference catalogs."""

    @pytest.mark.parametrize(
        "record_cls, enum_cls",
        [
            (SoilProperties, SoilType),
            (SurfaceProperties, SurfaceType),
            (ExcavatorProperties, ExcavatorSize),
            (TruckProperties, TruckSize),
            (ShoringProperties, ShoringType),
            (LocationProperties, LocationType),
        ],
    )
    def test_every_key_has_a_record(self, record_cls, enum_cls):
        """Test that every enum member resolves, by member and by key string."""
        for member in enum_cls:
            assert record_cls.get(member) is record_cls.get(member.value)

    @pytest.mark.parametrize(
        "catalog, enum_cls",
        [
            (SOIL_TYPES, SoilType),
            (SURFACE_TYPES, SurfaceType),
            (EXCAVATOR_SIZES, ExcavatorSize),
            (TRUCK_SIZES, TruckSize),
            (SHORING_TYPES, ShoringType),
            (LOCATION_TYPES, LocationType),
        ],
    )
    def test_catalogs_are_complete(self, catalog, enum_cls):
        assert set(catalog) == set(enum_cls)

    def test_soil_values(self):
        assert SoilProperties.get(SoilType.TYPE_A).slope_ratio == "0.75:1"
        assert SoilProperties.get(SoilType.TYPE_C).swell_factor == pytest.approx(1.3)
        assert SoilProperties.get(SoilType.ROCK).slope_ratio == "vertical"

    def test_equipment_values(self):
        assert ExcavatorProperties.get("medium").bucket_cy == 1.15
        assert TruckProperties.get("16cy").capacity_cy == 16
        assert ShoringProperties.get("shored").install_time_per_panel_min == 20
        assert LocationProperties.get("highway").traffic_control is True

    def test_unknown_key(self):
        with pytest.raises(ValidationError) as exc_info:
            TruckProperties.get("40cy")

        assert exc_info.value.details["field"] == "truck_size"


class TestCalculationResults:
    """Tests for the result record."""

    def test_to_dict(self):
        results = compute(CalculatorInput())
        data = results.to_dict()

        assert data["bank_vol_cy"] == results.bank_vol_cy
        assert data["congestion_notes"] == []
        assert set(data) == set(CalculationResults.__dataclass_fields__)

    def test_frozen(self):
        results = compute(CalculatorInput())

        with pytest.raises(Exception):
            results.bank_vol_cy = 0
