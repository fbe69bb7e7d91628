"""
Coordinate System Transformation

좌표계 정의:
-------------
1. math (local cartesian 좌표계):
   - 0° = East (+x 방향)
   - 90° = North (+y 방향)
   - 회전: 반시계방향 (CCW)

2. compass (항해 좌표계, COG/heading):
   - 0° = North
   - 90° = East
   - 회전: 시계방향 (CW)

3. geodetic (WGS-84 latitude/longitude, degrees)
   - CoordinateConverter projects onto a local tangent plane centred on a
     reference point (equirectangular, mean earth radius). Accuracy
     degrades with distance from the reference.

Author: Maritime Robotics Lab
"""

import numpy as np
from ..utils import WrapTo180, WrapTo360

EARTH_MEAN_RADIUS_KM = 6371.0087714
EARTH_MEAN_RADIUS_M = EARTH_MEAN_RADIUS_KM * 1000.0

# ========================================
# Heading Conversion Functions
# ========================================

def compass_to_cartesian(compass_deg: float) -> float:
    """
    Convert a compass bearing to a math angle.

    Args:
        compass_deg: Bearing in compass degrees (0=North, CW)

    Returns:
        Angle in math coordinates (degrees, [0, 360), 0=East, CCW)
    """
    return WrapTo360(90.0 - compass_deg)


def cartesian_to_compass(math_deg: float) -> float:
    """
    Convert a math angle to a compass bearing.

    Args:
        math_deg: Angle in math coordinates (degrees, 0=East, CCW)

    Returns:
        Bearing in compass degrees ([0, 360), 0=North, CW)
    """
    return WrapTo360(90.0 - math_deg)

# ========================================
# Geodetic <-> Local Cartesian
# ========================================

class CoordinateConverter:
    """
    Geodetic (lat/lon) ↔ local cartesian (x=East, y=North) 변환

    Equirectangular projection about (lon0, lat0):
        x = R * cos(lat0) * Δlon
        y = R * Δlat

    The reference maps to (0, 0). Longitude differences are wrapped to
    (-180, 180] so frames straddling the antimeridian stay continuous.

    Attributes:
        lon0: Reference longitude (degrees)
        lat0: Reference latitude (degrees)
        radius: Earth radius used for scaling (meters)
    """

    def __init__(self, lon0: float, lat0: float, radius: float = EARTH_MEAN_RADIUS_M):
        self.lon0 = lon0
        self.lat0 = lat0
        self.radius = radius
        self._cos_lat0 = float(np.cos(np.radians(lat0)))

    def lon2x(self, lon: float, lat: float) -> float:
        """
        Longitude → x (meters East of the reference).

        lat is unused by the equirectangular scale law; it is accepted so
        callers pass the full position.
        """
        d_lon = WrapTo180(lon - self.lon0)
        return float(np.radians(d_lon) * self.radius * self._cos_lat0)

    def lat2y(self, lon: float, lat: float) -> float:
        """Latitude → y (meters North of the reference)."""
        return float(np.radians(lat - self.lat0) * self.radius)

    def x2lon(self, x: float, y: float) -> float:
        """x (meters) → longitude (degrees, (-180, 180])."""
        if abs(self._cos_lat0) < 1e-12:
            # At the poles every x collapses onto the reference meridian
            return WrapTo180(self.lon0)
        return WrapTo180(self.lon0 + np.degrees(x / (self.radius * self._cos_lat0)))

    def y2lat(self, x: float, y: float) -> float:
        """y (meters) → latitude (degrees)."""
        return float(self.lat0 + np.degrees(y / self.radius))

    def to_local(self, lon: float, lat: float):
        """(lon, lat) → (x, y) in meters."""
        return self.lon2x(lon, lat), self.lat2y(lon, lat)

    def to_geodetic(self, x: float, y: float):
        """(x, y) in meters → (lon, lat) in degrees."""
        return self.x2lon(x, y), self.y2lat(x, y)

    def __repr__(self):
        return f"CoordinateConverter(lon0={self.lon0}, lat0={self.lat0})"
