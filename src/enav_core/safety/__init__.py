"""
Safety Zone Module

선박 주위 타원형 영역 계산:
- Vessel extent (hull 근사)
- Safety zone (충돌 회피 여유 영역)
"""

from .safety_zones import (
    DEFAULT_SAFETY_ZONE,
    VESSEL_EXTENT_MULTIPLIERS,
    SafetyZoneParams,
    ZoneMultipliers,
    safety_zone,
    vessel_extent,
)

__all__ = [
    'DEFAULT_SAFETY_ZONE',
    'VESSEL_EXTENT_MULTIPLIERS',
    'SafetyZoneParams',
    'ZoneMultipliers',
    'safety_zone',
    'vessel_extent',
]
