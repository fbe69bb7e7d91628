"""
Geodetic value types: Position, Ellipse
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from .coordinate_transform import CoordinateConverter
from .point import Point
from ..exceptions import InvalidArgumentError
from ..utils import is_finite_coordinate

if TYPE_CHECKING:
    from .coordinate_system import CoordinateSystem


class Position(NamedTuple):
    """
    WGS-84 geodetic position (degrees)

    The plain constructor does no range checking; use Position.create()
    for validated input.
    """
    latitude: float
    longitude: float

    @classmethod
    def create(cls, latitude: float, longitude: float) -> "Position":
        """
        Validated factory

        Raises:
            InvalidArgumentError: latitude outside [-90, 90], longitude
                outside [-180, 180], or a non-finite value
        """
        if not is_finite_coordinate(latitude, longitude):
            raise InvalidArgumentError(
                f"coordinates must be finite, got ({latitude}, {longitude})"
            )
        if not -90.0 <= latitude <= 90.0:
            raise InvalidArgumentError(f"latitude must be in [-90, 90], got {latitude}")
        if not -180.0 <= longitude <= 180.0:
            raise InvalidArgumentError(f"longitude must be in [-180, 180], got {longitude}")
        return cls(float(latitude), float(longitude))

    def __str__(self) -> str:
        return f"Position(lat={self.latitude:.6f}, lon={self.longitude:.6f})"


@dataclass(frozen=True)
class Ellipse:
    """
    Oriented ellipse in the local cartesian frame of a geodetic reference

    Two ellipses can only be compared (e.g. for intersection) when they
    share the same geodetic_reference. This is not checked.

    Attributes:
        geodetic_reference: Origin (0, 0) of the local frame
        x: Centre offset East of the reference (meters)
        y: Centre offset North of the reference (meters)
        alpha: Semi-major axis, along theta (meters)
        beta: Semi-minor axis (meters)
        theta_deg: Orientation of alpha (degrees, math convention)
        coordinate_system: Model that produced the ellipse
    """
    geodetic_reference: Position
    x: float
    y: float
    alpha: float
    beta: float
    theta_deg: float
    coordinate_system: "CoordinateSystem"

    def __post_init__(self):
        if self.alpha < 0 or self.beta < 0:
            raise InvalidArgumentError(
                f"ellipse axes must be non-negative, got alpha={self.alpha}, beta={self.beta}"
            )

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    def center_position(self) -> Position:
        """Centre mapped back to latitude/longitude."""
        converter = CoordinateConverter(
            self.geodetic_reference.longitude,
            self.geodetic_reference.latitude
        )
        lon, lat = converter.to_geodetic(self.x, self.y)
        return Position(lat, lon)

    def contains_point(self, point: Point) -> bool:
        """
        True if point (same local frame) lies inside or on the ellipse.

        Degenerate ellipses (a zero axis) contain no points.
        """
        if self.alpha == 0 or self.beta == 0:
            return False
        # Undo the orientation so alpha lies along +x
        local = point.rotate(self.center, -self.theta_deg)
        u = (local.x - self.x) / self.alpha
        v = (local.y - self.y) / self.beta
        return bool(u * u + v * v <= 1.0 + 1e-12)

    @property
    def area(self) -> float:
        return float(np.pi * self.alpha * self.beta)
