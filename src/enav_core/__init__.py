"""
ENAV Core - Geodetic Computation and Vessel Safety Zones

Distances and bearings on a rhumb-line (spherical) or WGS-84 ellipsoidal
earth model, and oriented-ellipse safety zones for vessels built on them.
"""

from .exceptions import EnavError, InvalidArgumentError, NotSupportedError
from .geometry import (
    CoordinateConverter,
    CoordinateSystem,
    Ellipse,
    Point,
    Position,
    VincentyCalculationType,
    VincentyResult,
    cartesian_to_compass,
    compass_to_cartesian,
    vincenty_formula,
    vincenty_inverse,
)
from .safety import SafetyZoneParams, ZoneMultipliers, safety_zone, vessel_extent


__version__ = "0.1.0"
__author__ = "Maritime Robotics Lab"

__all__ = [
    # Value types
    "Position",
    "Point",
    "Ellipse",

    # Earth models
    "CoordinateSystem",
    "CoordinateConverter",
    "compass_to_cartesian",
    "cartesian_to_compass",
    "VincentyCalculationType",
    "VincentyResult",
    "vincenty_formula",
    "vincenty_inverse",

    # Safety zones
    "SafetyZoneParams",
    "ZoneMultipliers",
    "vessel_extent",
    "safety_zone",

    # Errors
    "EnavError",
    "InvalidArgumentError",
    "NotSupportedError",
]
