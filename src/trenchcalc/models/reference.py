"""
Static reference catalogs for excavation estimating.

Each catalog is a closed string enum with one frozen property record per
member. Records are read-only module constants and are shared by every
estimate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Tuple, Type, TypeVar, Union

from trenchcalc.core.errors import ConfigurationError, ValidationError

E = TypeVar("E", bound=Enum)
R = TypeVar("R")


class SoilType(str, Enum):
    """OSHA soil classifications."""

    TYPE_A = "type_a"
    TYPE_B = "type_b"
    TYPE_C = "type_c"
    ROCK = "rock"


class SurfaceType(str, Enum):
    """Surface material that must be cut and removed before digging."""

    ASPHALT = "asphalt"
    CONCRETE = "concrete"
    DIRT = "dirt"


class ExcavatorSize(str, Enum):
    """Excavator size classes."""

    MINI = "mini"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class TruckSize(str, Enum):
    """Haul truck capacities."""

    CY_10 = "10cy"
    CY_14 = "14cy"
    CY_16 = "16cy"
    CY_20 = "20cy"


class ShoringType(str, Enum):
    """Wall protection systems; sloped and benched change the cross-section."""

    NONE = "none"
    SHORED = "shored"
    SLOPED = "sloped"
    BENCHED = "benched"


class LocationType(str, Enum):
    """Job site setting."""

    CITY = "city"
    HIGHWAY = "highway"
    RURAL = "rural"
    REMOTE = "remote"


def _lookup(
    catalog: Mapping[E, R],
    enum_cls: Type[E],
    key: Union[E, str],
    field: str,
) -> R:
    """Resolve a catalog record by enum member or raw key string."""
    try:
        member = enum_cls(key)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(
            f"Unknown {field} '{key}'. Allowed values: {allowed}",
            field=field,
        )

    try:
        return catalog[member]
    except KeyError:
        raise ConfigurationError(
            f"No reference record for {field} '{member.value}'",
            config_key=field,
        )


@dataclass(frozen=True)
class SoilProperties:
    """
    Properties of a soil classification.

    Attributes:
        soil_type: Soil classification
        label: Display label
        swell_pct: Volume increase when excavated, in percent
        weight_bank_lb_cy: Unit weight in place (lb per bank CY)
        weight_loose_lb_cy: Unit weight after excavation (lb per loose CY)
        slope_ratio: Maximum allowable slope as "H:V" text, or "vertical"
        slope_deg: Maximum allowable slope angle in degrees
    """

    soil_type: SoilType
    label: str
    swell_pct: float
    weight_bank_lb_cy: float
    weight_loose_lb_cy: float
    slope_ratio: str
    slope_deg: float

    @property
    def swell_factor(self) -> float:
        """Bank to loose volume multiplier."""
        return 1 + self.swell_pct / 100

    @classmethod
    def get(cls, soil_type: Union[SoilType, str]) -> "SoilProperties":
        """
        Get the reference record for a soil type.

        Args:
            soil_type: Soil type member or its key string

        Returns:
            SoilProperties record

        Raises:
            ValidationError: If the key is not a known soil type
        """
        return _lookup(SOIL_TYPES, SoilType, soil_type, "soil_type")


@dataclass(frozen=True)
class SurfaceProperties:
    """
    Surface cutting and removal rates.

    Attributes:
        surface_type: Surface material
        label: Display label
        saw_cut_ft_per_min: Saw cutting speed, 0 when no cutting is needed
        removal_sf_per_hr: Removal production, 0 when nothing is removed
        patch_cost_per_sf: Patch cost (not used in hour estimates)
        thickness_in: Surface course thickness
    """

    surface_type: SurfaceType
    label: str
    saw_cut_ft_per_min: float
    removal_sf_per_hr: float
    patch_cost_per_sf: float
    thickness_in: float

    @classmethod
    def get(cls, surface_type: Union[SurfaceType, str]) -> "SurfaceProperties":
        """Get the reference record for a surface type."""
        return _lookup(SURFACE_TYPES, SurfaceType, surface_type, "surface_type")


@dataclass(frozen=True)
class ExcavatorProperties:
    """
    Excavator production characteristics.

    Attributes:
        size: Size class
        label: Display label with representative models
        bucket_cy: Heaped bucket capacity
        cycles_per_hr: Dig cycles per hour
        reach_ft: Maximum dig reach
    """

    size: ExcavatorSize
    label: str
    bucket_cy: float
    cycles_per_hr: float
    reach_ft: float

    @classmethod
    def get(cls, size: Union[ExcavatorSize, str]) -> "ExcavatorProperties":
        """Get the reference record for an excavator size."""
        return _lookup(EXCAVATOR_SIZES, ExcavatorSize, size, "excavator_size")


@dataclass(frozen=True)
class TruckProperties:
    """
    Haul truck characteristics.

    Attributes:
        size: Truck size key
        label: Display label
        capacity_cy: Loose capacity per load
        load_time_min: Minutes to load one truck
    """

    size: TruckSize
    label: str
    capacity_cy: float
    load_time_min: float

    @classmethod
    def get(cls, size: Union[TruckSize, str]) -> "TruckProperties":
        """Get the reference record for a truck size."""
        return _lookup(TRUCK_SIZES, TruckSize, size, "truck_size")


@dataclass(frozen=True)
class ShoringProperties:
    """
    Shoring installation characteristics.

    Attributes:
        shoring_type: Shoring system
        label: Display label
        install_time_per_panel_min: Minutes to set one panel
        panel_height_ft: Catalog panel height
    """

    shoring_type: ShoringType
    label: str
    install_time_per_panel_min: float
    panel_height_ft: float

    @classmethod
    def get(cls, shoring_type: Union[ShoringType, str]) -> "ShoringProperties":
        """Get the reference record for a shoring type."""
        return _lookup(SHORING_TYPES, ShoringType, shoring_type, "shoring_type")


@dataclass(frozen=True)
class LocationProperties:
    """
    Site setting hints. Informational only, not used by the estimator.

    Attributes:
        location_type: Site setting
        label: Display label
        hand_dig_pct: Typical hand-dig share for the setting
        traffic_control: Whether traffic control is normally required
    """

    location_type: LocationType
    label: str
    hand_dig_pct: float
    traffic_control: bool

    @classmethod
    def get(cls, location_type: Union[LocationType, str]) -> "LocationProperties":
        """Get the reference record for a location type."""
        return _lookup(LOCATION_TYPES, LocationType, location_type, "location_type")


SOIL_TYPES: Dict[SoilType, SoilProperties] = {
    SoilType.TYPE_A: SoilProperties(
        soil_type=SoilType.TYPE_A,
        label="Type A (Clay, Silty Clay)",
        swell_pct=25,
        weight_bank_lb_cy=3100,
        weight_loose_lb_cy=2500,
        slope_ratio="0.75:1",
        slope_deg=53,
    ),
    SoilType.TYPE_B: SoilProperties(
        soil_type=SoilType.TYPE_B,
        label="Type B (Silt, Sandy Loam, Medium Clay)",
        swell_pct=25,
        weight_bank_lb_cy=3200,
        weight_loose_lb_cy=2550,
        slope_ratio="1:1",
        slope_deg=45,
    ),
    SoilType.TYPE_C: SoilProperties(
        soil_type=SoilType.TYPE_C,
        label="Type C (Sand, Gravel, Loose Fill)",
        swell_pct=30,
        weight_bank_lb_cy=2900,
        weight_loose_lb_cy=2400,
        slope_ratio="1.5:1",
        slope_deg=34,
    ),
    SoilType.ROCK: SoilProperties(
        soil_type=SoilType.ROCK,
        label="Rock / Hard Material",
        swell_pct=50,
        weight_bank_lb_cy=4000,
        weight_loose_lb_cy=2700,
        slope_ratio="vertical",
        slope_deg=90,
    ),
}

SURFACE_TYPES: Dict[SurfaceType, SurfaceProperties] = {
    SurfaceType.ASPHALT: SurfaceProperties(
        surface_type=SurfaceType.ASPHALT,
        label="Asphalt",
        saw_cut_ft_per_min=3,
        removal_sf_per_hr=200,
        patch_cost_per_sf=0,
        thickness_in=4,
    ),
    SurfaceType.CONCRETE: SurfaceProperties(
        surface_type=SurfaceType.CONCRETE,
        label="Concrete",
        saw_cut_ft_per_min=1.5,
        removal_sf_per_hr=100,
        patch_cost_per_sf=0,
        thickness_in=6,
    ),
    SurfaceType.DIRT: SurfaceProperties(
        surface_type=SurfaceType.DIRT,
        label="Dirt/Unpaved",
        saw_cut_ft_per_min=0,
        removal_sf_per_hr=0,
        patch_cost_per_sf=0,
        thickness_in=0,
    ),
}

EXCAVATOR_SIZES: Dict[ExcavatorSize, ExcavatorProperties] = {
    ExcavatorSize.MINI: ExcavatorProperties(
        size=ExcavatorSize.MINI,
        label="Mini Excavator (Cat 304-308)",
        bucket_cy=0.28,
        cycles_per_hr=120,
        reach_ft=16,
    ),
    ExcavatorSize.SMALL: ExcavatorProperties(
        size=ExcavatorSize.SMALL,
        label="Small Excavator (Cat 311-316)",
        bucket_cy=0.55,
        cycles_per_hr=100,
        reach_ft=22,
    ),
    ExcavatorSize.MEDIUM: ExcavatorProperties(
        size=ExcavatorSize.MEDIUM,
        label="Medium Excavator (Cat 320-330)",
        bucket_cy=1.15,
        cycles_per_hr=90,
        reach_ft=32,
    ),
    ExcavatorSize.LARGE: ExcavatorProperties(
        size=ExcavatorSize.LARGE,
        label="Large Excavator (Cat 336-352)",
        bucket_cy=1.9,
        cycles_per_hr=80,
        reach_ft=40,
    ),
}

TRUCK_SIZES: Dict[TruckSize, TruckProperties] = {
    TruckSize.CY_10: TruckProperties(TruckSize.CY_10, "10 CY End Dump", 10, 8),
    TruckSize.CY_14: TruckProperties(TruckSize.CY_14, "14 CY End Dump", 14, 10),
    TruckSize.CY_16: TruckProperties(TruckSize.CY_16, "16 CY Super 10", 16, 12),
    TruckSize.CY_20: TruckProperties(TruckSize.CY_20, "20 CY Transfer", 20, 15),
}

SHORING_TYPES: Dict[ShoringType, ShoringProperties] = {
    ShoringType.NONE: ShoringProperties(ShoringType.NONE, "No Shoring", 0, 0),
    ShoringType.SHORED: ShoringProperties(
        ShoringType.SHORED, "Shored (Trench Box/Shields)", 20, 8
    ),
    ShoringType.SLOPED: ShoringProperties(ShoringType.SLOPED, "Sloped", 0, 0),
    ShoringType.BENCHED: ShoringProperties(ShoringType.BENCHED, "Benched", 0, 0),
}

LOCATION_TYPES: Dict[LocationType, LocationProperties] = {
    LocationType.CITY: LocationProperties(LocationType.CITY, "City / Urban", 30, True),
    LocationType.HIGHWAY: LocationProperties(
        LocationType.HIGHWAY, "Highway / Major Road", 15, True
    ),
    LocationType.RURAL: LocationProperties(LocationType.RURAL, "Rural", 10, False),
    LocationType.REMOTE: LocationProperties(LocationType.REMOTE, "Remote", 5, False),
}

# Nominal pipe sizes offered for pipe OD selection, in inches
STANDARD_PIPE_SIZES: Tuple[float, ...] = (
    1, 1.25, 1.5, 2, 3, 4, 6, 8, 10, 12, 14, 16, 18, 20, 22, 24, 26, 28, 30,
    32, 34, 36, 42, 48, 54, 60,
)
