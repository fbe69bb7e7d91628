"""
Geometry utilities: earth models, local projection, value types
"""

from .coordinate_transform import (
    EARTH_MEAN_RADIUS_KM,
    EARTH_MEAN_RADIUS_M,
    CoordinateConverter,
    compass_to_cartesian,
    cartesian_to_compass,
)

from .point import Point

from .types import (
    Position,
    Ellipse,
)

from .vincenty import (
    VincentyCalculationType,
    VincentyResult,
    vincenty_formula,
    vincenty_inverse,
)

from .coordinate_system import (
    CoordinateSystem,
)

__all__ = [
    # coordinate_transform
    'EARTH_MEAN_RADIUS_KM',
    'EARTH_MEAN_RADIUS_M',
    'CoordinateConverter',
    'compass_to_cartesian',
    'cartesian_to_compass',
    # point / types
    'Point',
    'Position',
    'Ellipse',
    # vincenty
    'VincentyCalculationType',
    'VincentyResult',
    'vincenty_formula',
    'vincenty_inverse',
    # coordinate_system
    'CoordinateSystem',
]
