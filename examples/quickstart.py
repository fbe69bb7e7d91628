"""
ENAV Core - Quick Start Example

거리 계산과 safety zone 생성 기본 사용법
"""
import math

from enav_core import (
    CoordinateSystem,
    Position,
    safety_zone,
    vessel_extent,
)


def main():
    print("=" * 60)
    print("ENAV Core - Quick Start")
    print("=" * 60)

    # 1. Distance on both earth models
    print("\n[Distance]")
    lands_end = Position(50.06632, -5.71475)
    john_o_groats = Position(58.64402, -3.07000)

    geodesic = CoordinateSystem.GEODETIC.distance_between(lands_end, john_o_groats)
    rhumb = CoordinateSystem.CARTESIAN.distance_between(lands_end, john_o_groats)
    if math.isnan(geodesic):
        print("Vincenty formula failed to converge")
    else:
        print(f"Geodesic (WGS-84): {geodesic:,.3f} m")
    print(f"Rhumb line:        {rhumb:,.3f} m")

    bearing = CoordinateSystem.GEODETIC.initial_bearing_between(lands_end, john_o_groats)
    print(f"Initial bearing:   {bearing:.2f}°")

    # 2. Two vessels in one local frame
    print("\n[Safety Zones]")
    reference = Position(55.676, 12.568)

    own_position = reference
    own_cog, own_sog = 0.0, 12.0      # North, knots
    target_position = Position(55.686, 12.570)
    target_cog, target_sog = 190.0, 10.0

    own_zone = safety_zone(reference, own_position, own_cog, own_sog,
                           loa=120.0, beam=20.0, dim_stern=30.0, dim_starboard=10.0)
    target_hull = vessel_extent(target_position, target_cog,
                                loa=80.0, beam=14.0, dim_stern=20.0, dim_starboard=7.0,
                                geodetic_reference=reference)

    print(f"Own zone:    centre=({own_zone.x:.1f}, {own_zone.y:.1f}) m, "
          f"alpha={own_zone.alpha:.0f} m, beta={own_zone.beta:.0f} m, theta={own_zone.theta_deg:.0f}°")
    print(f"Target hull: centre=({target_hull.x:.1f}, {target_hull.y:.1f}) m, "
          f"alpha={target_hull.alpha:.0f} m, beta={target_hull.beta:.0f} m")

    inside = own_zone.contains_point(target_hull.center)
    print(f"Target inside own safety zone: {'YES' if inside else 'NO'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
