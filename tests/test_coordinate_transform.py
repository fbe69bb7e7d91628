"""
Compass ↔ math angle and geodetic ↔ local cartesian conversion tests
"""
import numpy as np
import pytest

from enav_core import (
    CoordinateConverter,
    CoordinateSystem,
    Position,
    cartesian_to_compass,
    compass_to_cartesian,
)
from enav_core.geometry import EARTH_MEAN_RADIUS_M


class TestCompassToCartesian:

    @pytest.mark.parametrize("compass, expected", [
        (0.0, 90.0),      # North
        (90.0, 0.0),      # East
        (180.0, 270.0),   # South
        (270.0, 180.0),   # West
        (45.0, 45.0),     # Northeast
        (135.0, 315.0),   # Southeast
        (360.0, 90.0),
        (-90.0, 180.0),
    ])
    def test_known_directions(self, compass, expected) -> None:
        assert compass_to_cartesian(compass) == pytest.approx(expected)

    @pytest.mark.parametrize("compass", [0.0, 12.5, 90.0, 200.0, 359.0])
    def test_inverse(self, compass) -> None:
        assert cartesian_to_compass(compass_to_cartesian(compass)) == pytest.approx(compass)


class TestCoordinateConverter:

    def test_reference_maps_to_origin(self, copenhagen) -> None:
        converter = CoordinateConverter(copenhagen.longitude, copenhagen.latitude)
        assert converter.lon2x(copenhagen.longitude, copenhagen.latitude) == 0.0
        assert converter.lat2y(copenhagen.longitude, copenhagen.latitude) == 0.0

    def test_north_offset_is_metric(self, copenhagen) -> None:
        converter = CoordinateConverter(copenhagen.longitude, copenhagen.latitude)
        lat = copenhagen.latitude + np.degrees(1000.0 / EARTH_MEAN_RADIUS_M)
        assert converter.lat2y(copenhagen.longitude, lat) == pytest.approx(1000.0)
        assert converter.lon2x(copenhagen.longitude, lat) == pytest.approx(0.0)

    def test_east_offset_scaled_by_latitude(self) -> None:
        converter = CoordinateConverter(0.0, 60.0)
        x = converter.lon2x(1.0, 60.0)
        assert x == pytest.approx(np.radians(1.0) * EARTH_MEAN_RADIUS_M * 0.5)

    def test_west_and_south_are_negative(self, copenhagen) -> None:
        converter = CoordinateConverter(copenhagen.longitude, copenhagen.latitude)
        x, y = converter.to_local(copenhagen.longitude - 0.01, copenhagen.latitude - 0.01)
        assert x < 0
        assert y < 0

    def test_antimeridian_is_continuous(self) -> None:
        converter = CoordinateConverter(179.9, 0.0)
        x = converter.lon2x(-179.9, 0.0)
        assert x == pytest.approx(np.radians(0.2) * EARTH_MEAN_RADIUS_M)

    def test_round_trip(self, copenhagen) -> None:
        converter = CoordinateConverter(copenhagen.longitude, copenhagen.latitude)
        lon, lat = converter.to_geodetic(*converter.to_local(12.6, 55.7))
        assert lon == pytest.approx(12.6)
        assert lat == pytest.approx(55.7)

    def test_locally_matches_geodesic_distance(self, copenhagen) -> None:
        converter = CoordinateConverter(copenhagen.longitude, copenhagen.latitude)
        target = Position(copenhagen.latitude + 0.01, copenhagen.longitude + 0.02)
        x, y = converter.to_local(target.longitude, target.latitude)
        geodesic = CoordinateSystem.GEODETIC.distance_between(copenhagen, target)
        assert np.hypot(x, y) == pytest.approx(geodesic, rel=1e-2)
