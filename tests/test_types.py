"""
Value type tests: Point, Position, Ellipse
"""
import dataclasses

import numpy as np
import pytest
from numpy.testing import assert_allclose

from enav_core import CoordinateSystem, Ellipse, InvalidArgumentError, Point, Position


class TestPoint:

    @pytest.mark.parametrize("pivot", [Point(0.0, 0.0), Point(3.5, -2.0), Point(-100.0, 42.0)])
    def test_rotate_zero_is_identity(self, pivot) -> None:
        p = Point(12.3, -4.5)
        rotated = p.rotate(pivot, 0.0)
        assert_allclose([rotated.x, rotated.y], [p.x, p.y], atol=1e-12)

    @pytest.mark.parametrize("pivot", [Point(0.0, 0.0), Point(3.5, -2.0)])
    def test_rotate_full_turn(self, pivot) -> None:
        p = Point(12.3, -4.5)
        rotated = p.rotate(pivot, 360.0)
        assert_allclose([rotated.x, rotated.y], [p.x, p.y], atol=1e-9)

    def test_rotate_counter_clockwise(self) -> None:
        rotated = Point(1.0, 0.0).rotate(Point(0.0, 0.0), 90.0)
        assert_allclose([rotated.x, rotated.y], [0.0, 1.0], atol=1e-12)

    def test_rotate_about_pivot(self) -> None:
        rotated = Point(2.0, 1.0).rotate(Point(1.0, 1.0), 180.0)
        assert_allclose([rotated.x, rotated.y], [0.0, 1.0], atol=1e-12)

    def test_rotate_does_not_mutate(self) -> None:
        p = Point(1.0, 2.0)
        p.rotate(Point(0.0, 0.0), 45.0)
        assert p == Point(1.0, 2.0)

    def test_frozen(self) -> None:
        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5.0  # type: ignore[misc]

    def test_translate(self) -> None:
        p = Point(1.0, 1.0).translate(3.0, -4.0)
        assert p == Point(4.0, -3.0)


class TestPosition:

    def test_create_valid(self) -> None:
        p = Position.create(55.5, -12.25)
        assert p.latitude == 55.5
        assert p.longitude == -12.25

    @pytest.mark.parametrize("lat, lon", [
        (90.5, 0.0),
        (-91.0, 0.0),
        (0.0, 180.5),
        (float("nan"), 0.0),
        (0.0, float("inf")),
    ])
    def test_create_rejects(self, lat, lon) -> None:
        with pytest.raises(InvalidArgumentError):
            Position.create(lat, lon)

    def test_value_equality(self) -> None:
        assert Position(1.0, 2.0) == Position(1.0, 2.0)
        assert hash(Position(1.0, 2.0)) == hash(Position(1.0, 2.0))


class TestEllipse:

    def _ellipse(self, **overrides) -> Ellipse:
        fields = dict(
            geodetic_reference=Position(55.0, 11.0),
            x=0.0, y=0.0, alpha=10.0, beta=2.0, theta_deg=90.0,
            coordinate_system=CoordinateSystem.CARTESIAN,
        )
        fields.update(overrides)
        return Ellipse(**fields)

    @pytest.mark.parametrize("alpha, beta", [(-1.0, 1.0), (1.0, -0.1)])
    def test_negative_axes_rejected(self, alpha, beta) -> None:
        with pytest.raises(InvalidArgumentError):
            self._ellipse(alpha=alpha, beta=beta)

    def test_contains_point_respects_orientation(self) -> None:
        ellipse = self._ellipse()
        assert ellipse.contains_point(Point(0.0, 9.0))
        assert not ellipse.contains_point(Point(9.0, 0.0))
        assert ellipse.contains_point(Point(1.5, 0.0))

    def test_contains_point_offset_centre(self) -> None:
        ellipse = self._ellipse(x=100.0, y=-50.0, theta_deg=0.0)
        assert ellipse.contains_point(Point(109.0, -50.0))
        assert not ellipse.contains_point(Point(0.0, 0.0))

    def test_degenerate_contains_nothing(self) -> None:
        assert not self._ellipse(beta=0.0).contains_point(Point(0.0, 0.0))

    def test_center_position_of_origin_is_reference(self) -> None:
        ellipse = self._ellipse()
        centre = ellipse.center_position()
        assert centre.latitude == pytest.approx(55.0)
        assert centre.longitude == pytest.approx(11.0)

    def test_area(self) -> None:
        assert self._ellipse().area == pytest.approx(np.pi * 20.0)
