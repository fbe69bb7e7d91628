"""
Vessel extent 및 Safety Zone (타원) 계산

Both zones are ellipses in the local cartesian frame of a geodetic
reference, aligned with the vessel's course over ground:

- vessel_extent: ellipse roughly covering the hull
- safety_zone: larger ellipse a navigator keeps clear to avoid imminent
  collisions

Ellipses computed against the same geodetic reference share one frame and
can be compared / intersected directly.

Vessel geometry (AIS conventions):
    loa: length overall (meters)
    beam: breadth (meters)
    dim_stern: GPS antenna → stern (meters)
    dim_starboard: GPS antenna → starboard side (meters)
"""
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from ..exceptions import InvalidArgumentError
from ..utils import is_finite_coordinate
from ..geometry import (
    CoordinateConverter,
    CoordinateSystem,
    Ellipse,
    Point,
    Position,
    compass_to_cartesian,
)

logger = logging.getLogger(__name__)


class ZoneMultipliers(NamedTuple):
    """
    Ellipse scaling relative to the hull

    l1: alpha = loa * l1 / 2
    b1: beta = beam * b1 / 2
    xc: centre position along the hull, in units of loa from the stern
    """
    l1: float
    b1: float
    xc: float


VESSEL_EXTENT_MULTIPLIERS = ZoneMultipliers(l1=1.0, b1=1.0, xc=0.5)


@dataclass(frozen=True)
class SafetyZoneParams:
    """
    Safety zone 파라미터

    Attributes:
        length: Zone length in units of loa
        breadth: Zone breadth in units of beam
        behind: Margin kept astern, in units of loa
    """
    length: float = 4.0
    breadth: float = 5.0
    behind: float = 0.5

    def __post_init__(self):
        if self.length <= 0 or self.breadth <= 0:
            raise InvalidArgumentError(
                f"length and breadth must be positive, got {self.length}, {self.breadth}"
            )
        if self.behind < 0:
            raise InvalidArgumentError(f"behind must be non-negative, got {self.behind}")

    def multipliers(self, v: float = 1.0) -> ZoneMultipliers:
        """
        Derive the ellipse multipliers for speed scale v.

        l1 = max(length*v, 1 + behind*v*2)
        b1 = max(breadth*v, 1.5)
        xc = -behind*v + l1/2
        """
        l1 = max(self.length * v, 1.0 + self.behind * v * 2.0)
        b1 = max(self.breadth * v, 1.5)
        xc = -self.behind * v + 0.5 * l1
        return ZoneMultipliers(l1, b1, xc)


DEFAULT_SAFETY_ZONE = SafetyZoneParams()


def vessel_extent(
    position: Position,
    cog: float,
    loa: float,
    beam: float,
    dim_stern: float,
    dim_starboard: float,
    geodetic_reference: Optional[Position] = None
) -> Ellipse:
    """
    Ellipse roughly covering the vessel's physical extent.

    Args:
        position: Reported (GPS antenna) position
        cog: Course over ground (compass degrees)
        loa: Length overall (meters)
        beam: Beam (meters)
        dim_stern: Antenna → stern (meters)
        dim_starboard: Antenna → starboard side (meters)
        geodetic_reference: Origin of the local frame. Defaults to
            position itself; pass a shared reference to compare several
            vessels' ellipses.

    Returns:
        Ellipse with alpha = loa/2, beta = beam/2
    """
    if geodetic_reference is None:
        geodetic_reference = position
    return _compute_zone(
        geodetic_reference, position, cog, loa, beam, dim_stern, dim_starboard,
        VESSEL_EXTENT_MULTIPLIERS
    )


def safety_zone(
    geodetic_reference: Position,
    position: Position,
    cog: float,
    sog: float,
    loa: float,
    beam: float,
    dim_stern: float,
    dim_starboard: float,
    params: SafetyZoneParams = DEFAULT_SAFETY_ZONE
) -> Ellipse:
    """
    Safety zone around a vessel.

    Args:
        geodetic_reference: Origin of the local frame
        position: Reported (GPS antenna) position
        cog: Course over ground (compass degrees)
        sog: Speed over ground (knots). Accepted but not yet used: the
            speed scale is fixed at v = 1.0.
        loa, beam, dim_stern, dim_starboard: Vessel geometry (meters)
        params: Zone shape parameters

    Returns:
        Ellipse anchored at geodetic_reference
    """
    v = 1.0  # TODO: scale v with sog once a speed law is agreed
    return _compute_zone(
        geodetic_reference, position, cog, loa, beam, dim_stern, dim_starboard,
        params.multipliers(v)
    )


def _compute_zone(
    geodetic_reference: Position,
    position: Position,
    cog: float,
    loa: float,
    beam: float,
    dim_stern: float,
    dim_starboard: float,
    multipliers: ZoneMultipliers
) -> Ellipse:
    if not is_finite_coordinate(
        geodetic_reference.latitude, geodetic_reference.longitude,
        position.latitude, position.longitude,
        cog, loa, beam, dim_stern, dim_starboard
    ):
        raise InvalidArgumentError(
            f"zone inputs must be finite: reference={geodetic_reference}, position={position}, "
            f"cog={cog}, loa={loa}, beam={beam}, dim_stern={dim_stern}, dim_starboard={dim_starboard}"
        )

    l1, b1, xc = multipliers

    # Direction of half axis alpha
    theta_deg = compass_to_cartesian(cog)

    # Track position in the reference's local frame
    converter = CoordinateConverter(geodetic_reference.longitude, geodetic_reference.latitude)
    x = converter.lon2x(position.longitude, position.latitude)
    y = converter.lat2y(position.longitude, position.latitude)

    # Zone centre relative to the antenna, then aligned with the course
    pt0 = Point(x, y)
    pt1 = pt0.translate(-dim_stern + loa * xc, dim_starboard - beam / 2.0)
    pt1 = pt1.rotate(pt0, theta_deg)

    alpha = loa * l1 / 2.0
    beta = beam * b1 / 2.0

    logger.debug(
        "Zone l1=%.3f b1=%.3f xc=%.3f -> centre (%.2f, %.2f) alpha=%.2f beta=%.2f theta=%.1f",
        l1, b1, xc, pt1.x, pt1.y, alpha, beta, theta_deg
    )

    return Ellipse(
        geodetic_reference, pt1.x, pt1.y, alpha, beta, theta_deg,
        CoordinateSystem.CARTESIAN
    )
