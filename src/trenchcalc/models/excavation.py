"""
Pydantic models for calculator input.

Attribute names are snake_case. Every model also accepts the camelCase keys
posted by the estimating form (``excType``, ``pipeOD``, ``lengthFt`` ...)
so a form payload can be passed straight to :meth:`CalculatorInput.from_payload`.

Only types are checked here. Negative or zero dimensions are accepted and
handled by the estimator's clamping rules.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from trenchcalc.core.errors import ConfigurationError, ValidationError
from trenchcalc.models.reference import (
    ExcavatorSize,
    LocationType,
    ShoringType,
    SoilType,
    SurfaceType,
    TruckSize,
)


class ExcType(str, Enum):
    """Excavation topology."""

    TRENCH = "trench"
    BELLHOLE = "bellhole"


class ExcShape(str, Enum):
    """Bell-hole footprint shape."""

    SQUARE = "square"
    RECTANGLE = "rectangle"
    NONSTANDARD = "nonstandard"


class DepthMode(str, Enum):
    """Reference point the entered depth is measured to."""

    TOTAL = "total"
    TOP_OF_PIPE = "topOfPipe"
    CENTERLINE = "centerline"


class SpoilsAction(str, Enum):
    """Disposition of native spoils."""

    REUSE = "reuse"
    OFFHAUL = "offhaul"
    PARTIAL = "partial"


class _InputModel(BaseModel):
    """Immutable record accepting both snake_case and camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


def _describe_errors(exc: PydanticValidationError) -> Tuple[Optional[str], list]:
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    first_field = errors[0]["field"] if errors else None
    return first_field, errors


class EstimatingSettings(_InputModel):
    """
    Rate, clearance and crew constants consumed by every estimating stage.

    Defaults are the standard production rates for a small pipeline crew.
    """

    job_efficiency: float = Field(83, description="Job efficiency in percent")
    hand_dig_rate_cy_per_hr: float = Field(
        0.5,
        alias="handDigRateCYPerHr",
        description="Hand-dig production per person, CY/hr",
    )
    compaction_time_sf_per_hr: float = Field(
        400,
        alias="compactionTimeSFPerHr",
        description="Compaction production, SF/hr per lift",
    )
    compaction_test_time_min: float = Field(15, description="Density test time per lift, minutes")
    bedding_depth_multiplier: float = Field(0.333, description="Bedding depth as a fraction of pipe OD")
    bedding_min_in: float = Field(4, description="Minimum bedding depth, inches")
    shading_above_pipe_in: float = Field(12, description="Shading cover above pipe, inches")
    warning_tape_above_pipe_in: float = Field(18, description="Warning tape height above pipe, inches")
    clearance_under_pipe_in: float = Field(24, description="Excavation below pipe invert, inches")
    pipe_clearance_in: float = Field(6, description="Hand-dig buffer around pipe, inches")
    zero_sack_cure_hrs: float = Field(24, description="0-sack slurry cure time, hours")
    lift_height_in: float = Field(8, description="Backfill lift height, inches")
    truck_round_trip_min: float = Field(60, description="Haul truck round trip, minutes")

    # Crew roster
    crew_foreman: int = Field(1, description="Foremen on site")
    crew_operators: int = Field(1, description="Equipment operators on site")
    crew_pipelayers: int = Field(1, description="Pipelayers on site")
    crew_laborers: int = Field(2, description="Laborers on site")
    crew_truck_driver: int = Field(0, description="Truck drivers on site")

    bucket_fill_factor: float = Field(0.85, description="Average bucket fill fraction")
    shoring_panel_width_ft: float = Field(4, description="Shoring panel width, feet")
    shoring_panel_height_ft: float = Field(8, description="Shoring panel height, feet")
    compaction_lift_in: float = Field(8, description="Compaction lift thickness, inches")
    backfill_placement_cy_per_hr: float = Field(
        15,
        alias="backfillPlacementCYPerHr",
        description="Backfill placement production, CY/hr",
    )
    pave_saw_cut_buffer: float = Field(12, description="Pavement saw-cut buffer, inches")

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "EstimatingSettings":
        """
        Build a settings record from a saved or posted settings payload.

        Missing keys take their defaults.

        Args:
            payload: Settings mapping with snake_case or camelCase keys

        Returns:
            EstimatingSettings record

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            field, errors = _describe_errors(e)
            raise ConfigurationError(
                f"Invalid estimating settings: {field}",
                config_key=field,
                details={"errors": errors},
            ) from e


class DepthSegment(_InputModel):
    """
    One run of a variable-depth excavation.

    A zero depth falls back to the excavation's input depth. A missing or
    zero width falls back to the auto width.
    """

    length_ft: float = 0
    depth_ft: float = 0
    width_ft: Optional[float] = None
    depth_mode: DepthMode = DepthMode.TOTAL
    use_auto_width: bool = False


class NsSide(_InputModel):
    """One side of a non-standard bell-hole footprint."""

    label: str = ""
    length_ft: float = 0


class CongestionItem(_InputModel):
    """A utility crossing or conflict inside the excavation."""

    type: str = ""
    length_ft: float = 0
    depth_ft: float = 0


def _default_ns_sides() -> Tuple[NsSide, ...]:
    return tuple(
        NsSide(label=label, length_ft=length)
        for label, length in (("A", 10), ("B", 8), ("C", 10), ("D", 8), ("E", 6))
    )


class CalculatorInput(_InputModel):
    """
    Complete input for one excavation estimate.

    Defaults describe a 20 ft single-depth trench for a 6 in pipe in
    type B soil with an auto-sized width.
    """

    # Project metadata
    project_desc: str = ""
    project_line: str = ""
    project_location: str = ""

    # Excavation parameters
    exc_type: ExcType = ExcType.TRENCH
    surface_type: SurfaceType = SurfaceType.DIRT
    location_type: LocationType = LocationType.CITY
    soil_type: SoilType = SoilType.TYPE_B
    shoring_type: ShoringType = ShoringType.NONE
    exc_shape: ExcShape = ExcShape.RECTANGLE
    pipe_od: float = Field(6, alias="pipeOD", description="Pipe outside diameter, inches")

    # Dimensions
    length_ft: float = 20
    width_ft: float = 0
    depth_ft: float = 5
    depth_mode: DepthMode = DepthMode.TOTAL
    use_auto_width: bool = True
    multi_depth: bool = False
    depth_segments: Tuple[DepthSegment, ...] = ()

    ns_sides: Tuple[NsSide, ...] = Field(default_factory=_default_ns_sides)

    # Congestion
    has_congestion: bool = False
    congestion_items: Tuple[CongestionItem, ...] = ()

    # Equipment
    excavator_size: ExcavatorSize = ExcavatorSize.SMALL
    truck_size: TruckSize = TruckSize.CY_14

    spoils_action: SpoilsAction = SpoilsAction.REUSE

    # Hand dig override
    hand_dig_override: bool = False
    hand_dig_pct_manual: float = 30

    settings: EstimatingSettings = Field(default_factory=EstimatingSettings)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CalculatorInput":
        """
        Build an input record from a form payload.

        Args:
            payload: Input mapping with snake_case or camelCase keys

        Returns:
            CalculatorInput record

        Raises:
            ValidationError: If a catalog key is unknown or a value has the
                wrong type
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            field, errors = _describe_errors(e)
            raise ValidationError(
                f"Invalid calculator input: {field}",
                field=field,
                details={"errors": errors},
            ) from e
