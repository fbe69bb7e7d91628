"""
Earth models for distance and bearing computations

CARTESIAN: rhumb line on a sphere of mean radius (Mercator stretch)
GEODETIC: WGS-84 ellipsoid, Vincenty inverse solution

Operations a model does not implement raise NotSupportedError.
"""
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from .coordinate_transform import EARTH_MEAN_RADIUS_KM
from .types import Position
from .vincenty import VincentyCalculationType, vincenty_formula
from ..exceptions import InvalidArgumentError, NotSupportedError
from ..utils import is_finite_coordinate


def _require_finite(*values):
    if not is_finite_coordinate(*values):
        raise InvalidArgumentError(f"arguments must be finite, got {values}")


class _EarthModel(ABC):
    """Per-variant primitives behind CoordinateSystem"""

    name = ""

    @abstractmethod
    def distance_between(self, latitude1, longitude1, latitude2, longitude2) -> float:
        ...

    def point_on_bearing(self, latitude, longitude, distance, bearing) -> Position:
        raise NotSupportedError(f"{self.name}: point_on_bearing is not supported")

    def area_circle(self, latitude, longitude, radius) -> float:
        raise NotSupportedError(f"{self.name}: area_circle is not supported")

    def bearing_between(self, latitude1, longitude1, latitude2, longitude2, calc_type) -> float:
        raise NotSupportedError(f"{self.name}: bearing calculation is not supported")


class _RhumbLineModel(_EarthModel):
    name = "CARTESIAN"

    def distance_between(self, latitude1, longitude1, latitude2, longitude2) -> float:
        lat1 = np.radians(latitude1)
        lat2 = np.radians(latitude2)
        d_lat = np.radians(latitude2 - latitude1)
        d_lon = np.radians(abs(longitude2 - longitude1))
        d_phi = np.log(np.tan(lat2 / 2 + np.pi / 4) / np.tan(lat1 / 2 + np.pi / 4))
        q = np.cos(lat1) if d_phi == 0 else d_lat / d_phi
        # dLon over 180°: take the shorter rhumb across the antimeridian
        if d_lon > np.pi:
            d_lon = 2 * np.pi - d_lon
        return float(np.sqrt(d_lat * d_lat + q * q * d_lon * d_lon) * EARTH_MEAN_RADIUS_KM * 1000)

    def point_on_bearing(self, latitude, longitude, distance, bearing) -> Position:
        # NOTE: distance (meters) is added to degrees without scaling by
        # the earth radius. Kept as-is, see DESIGN.md "Known limitations".
        bearing_rad = np.radians(bearing)
        return Position(
            float(latitude + np.sin(bearing_rad) * distance),
            float(longitude + np.cos(bearing_rad) * distance)
        )


class _EllipsoidModel(_EarthModel):
    name = "GEODETIC"

    def distance_between(self, latitude1, longitude1, latitude2, longitude2) -> float:
        return vincenty_formula(
            latitude1, longitude1, latitude2, longitude2,
            VincentyCalculationType.DISTANCE
        )

    def bearing_between(self, latitude1, longitude1, latitude2, longitude2, calc_type) -> float:
        return vincenty_formula(latitude1, longitude1, latitude2, longitude2, calc_type)


class CoordinateSystem(Enum):
    """
    좌표계 (지구 모델) 선택

    Stateless; every member is safe to share between threads.
    """
    CARTESIAN = "cartesian"
    GEODETIC = "geodetic"

    @property
    def _model(self) -> _EarthModel:
        return _MODELS[self]

    def distance_between_coords(
        self,
        latitude1: float,
        longitude1: float,
        latitude2: float,
        longitude2: float
    ) -> float:
        """
        Distance in meters. GEODETIC returns NaN if Vincenty does not converge.

        Raises:
            InvalidArgumentError: a non-finite coordinate
        """
        _require_finite(latitude1, longitude1, latitude2, longitude2)
        return self._model.distance_between(latitude1, longitude1, latitude2, longitude2)

    def distance_between(self, p1: Position, p2: Position) -> float:
        return self.distance_between_coords(p1.latitude, p1.longitude, p2.latitude, p2.longitude)

    def point_on_bearing(self, position: Position, distance: float, bearing: float) -> Position:
        """
        Project position along a bearing.

        Args:
            position: Start position
            distance: Distance to travel, must be >= 0
            bearing: Bearing (degrees)

        Returns:
            New position; position itself when distance == 0

        Raises:
            InvalidArgumentError: distance < 0, or a non-finite argument
            NotSupportedError: GEODETIC (no direct solution)
        """
        _require_finite(position.latitude, position.longitude, distance, bearing)
        if distance < 0:
            raise InvalidArgumentError(f"distance must be positive, was {distance}")
        if distance == 0:
            return position
        return self._model.point_on_bearing(position.latitude, position.longitude, distance, bearing)

    def area_circle(self, latitude: float, longitude: float, radius: float) -> float:
        """Reserved. Raises NotSupportedError for every model."""
        return self._model.area_circle(latitude, longitude, radius)

    def initial_bearing_between(self, p1: Position, p2: Position) -> float:
        """Forward azimuth at p1 towards p2 (degrees, (-180, 180]), NaN on non-convergence."""
        _require_finite(p1.latitude, p1.longitude, p2.latitude, p2.longitude)
        return self._model.bearing_between(
            p1.latitude, p1.longitude, p2.latitude, p2.longitude,
            VincentyCalculationType.INITIAL_BEARING
        )

    def final_bearing_between(self, p1: Position, p2: Position) -> float:
        """Azimuth on arrival at p2 (degrees, (-180, 180]), NaN on non-convergence."""
        _require_finite(p1.latitude, p1.longitude, p2.latitude, p2.longitude)
        return self._model.bearing_between(
            p1.latitude, p1.longitude, p2.latitude, p2.longitude,
            VincentyCalculationType.FINAL_BEARING
        )


_MODELS = {
    CoordinateSystem.CARTESIAN: _RhumbLineModel(),
    CoordinateSystem.GEODETIC: _EllipsoidModel(),
}
