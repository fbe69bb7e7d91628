"""
Vincenty inverse solution on the WGS-84 ellipsoid

두 지점 간 측지선 거리 및 방위각 계산

Iterates the standard Vincenty recurrence on lambda (difference in
longitude on the auxiliary sphere) until successive values agree within
CONVERGENCE_THRESHOLD radians or ITERATION_LIMIT iterations are spent.

Failure handling:
    - Coincident points: distance 0 is returned immediately, whatever the
      requested calculation type.
    - Equatorial line: cos(2*sigma_m) is undefined, 0 is substituted.
    - Non-convergence (nearly antipodal points): NaN is returned.
      vincenty_inverse() additionally reports converged=False.

References:
- T. Vincenty (1975). "Direct and Inverse Solutions of Geodesics on the
  Ellipsoid with application of nested equations." Survey Review XXIII.
"""
import logging
from enum import Enum
from typing import NamedTuple

import numpy as np

from ..exceptions import InvalidArgumentError
from ..utils import is_finite_coordinate

logger = logging.getLogger(__name__)

# WGS-84 ellipsoid
WGS84_A = 6378137.0
WGS84_B = 6356752.3142
WGS84_F = 1 / 298.257223563

CONVERGENCE_THRESHOLD = 1e-12  # radians
ITERATION_LIMIT = 20


class VincentyCalculationType(Enum):
    """Quantity requested from the inverse solution"""
    DISTANCE = "distance"
    INITIAL_BEARING = "initial_bearing"
    FINAL_BEARING = "final_bearing"


class VincentyResult(NamedTuple):
    """
    Inverse solution result

    All numeric fields are NaN when converged is False. Bearings are
    degrees in atan2 range (-180, 180], 0 for coincident points.
    """
    distance: float          # meters
    initial_bearing: float   # degrees
    final_bearing: float     # degrees
    iterations: int
    converged: bool

    def get(self, calc_type: VincentyCalculationType) -> float:
        if calc_type is VincentyCalculationType.DISTANCE:
            return self.distance
        if calc_type is VincentyCalculationType.INITIAL_BEARING:
            return self.initial_bearing
        return self.final_bearing


_FAILED = float('nan')


def vincenty_inverse(
    latitude1: float,
    longitude1: float,
    latitude2: float,
    longitude2: float,
    iteration_limit: int = ITERATION_LIMIT
) -> VincentyResult:
    """
    Vincenty inverse solution

    Args:
        latitude1, longitude1: First point (degrees)
        latitude2, longitude2: Second point (degrees)
        iteration_limit: Maximum number of lambda iterations

    Returns:
        VincentyResult with distance (meters) and forward / final azimuths

    Raises:
        InvalidArgumentError: a non-finite coordinate
    """
    if not is_finite_coordinate(latitude1, longitude1, latitude2, longitude2):
        raise InvalidArgumentError(
            f"coordinates must be finite, got ({latitude1}, {longitude1}) / ({latitude2}, {longitude2})"
        )

    a, b, f = WGS84_A, WGS84_B, WGS84_F

    L = np.radians(longitude2 - longitude1)
    U1 = np.arctan((1 - f) * np.tan(np.radians(latitude1)))
    U2 = np.arctan((1 - f) * np.tan(np.radians(latitude2)))
    sinU1, cosU1 = np.sin(U1), np.cos(U1)
    sinU2, cosU2 = np.sin(U2), np.cos(U2)

    lam = L
    sinLambda = cosLambda = 0.0
    sinSigma = cosSigma = sigma = 0.0
    cosSqAlpha = cos2SigmaM = 0.0

    iterations = 0
    converged = False
    for iterations in range(1, iteration_limit + 1):
        sinLambda = np.sin(lam)
        cosLambda = np.cos(lam)
        sinSigma = np.sqrt(
            (cosU2 * sinLambda) ** 2
            + (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2
        )
        if sinSigma == 0:
            logger.debug(
                "Coincident points (%s, %s) / (%s, %s): distance 0",
                latitude1, longitude1, latitude2, longitude2
            )
            return VincentyResult(0.0, 0.0, 0.0, iterations, True)

        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = np.arctan2(sinSigma, cosSigma)
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha * sinAlpha
        if cosSqAlpha == 0:
            # equatorial line: cos(2σm) undefined
            logger.debug("Equatorial line: cos(2*sigma_m) set to 0")
            cos2SigmaM = 0.0
        else:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
            if np.isnan(cos2SigmaM):
                cos2SigmaM = 0.0

        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        lam_prev = lam
        lam = L + (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM * cos2SigmaM))
        )
        if abs(lam - lam_prev) < CONVERGENCE_THRESHOLD:
            converged = True
            break

    if not converged:
        logger.warning(
            "Vincenty formula failed to converge within %d iterations: (%s, %s) / (%s, %s)",
            iteration_limit, latitude1, longitude1, latitude2, longitude2
        )
        return VincentyResult(_FAILED, _FAILED, _FAILED, iterations, False)

    uSq = cosSqAlpha * (a * a - b * b) / (b * b)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
        cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM * cos2SigmaM)
            - B / 6 * cos2SigmaM * (-3 + 4 * sinSigma * sinSigma) * (-3 + 4 * cos2SigmaM * cos2SigmaM)
        )
    )
    distance = b * A * (sigma - deltaSigma)

    # Azimuths from the converged lambda
    fwd_az = np.degrees(np.arctan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda))
    final_az = np.degrees(np.arctan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda))

    return VincentyResult(float(distance), float(fwd_az), float(final_az), iterations, True)


def vincenty_formula(
    latitude1: float,
    longitude1: float,
    latitude2: float,
    longitude2: float,
    calc_type: VincentyCalculationType = VincentyCalculationType.DISTANCE,
    iteration_limit: int = ITERATION_LIMIT
) -> float:
    """
    Scalar form of the inverse solution.

    Returns:
        Requested quantity (meters or degrees), NaN if the iteration did
        not converge. Callers must test with math.isnan().
    """
    result = vincenty_inverse(latitude1, longitude1, latitude2, longitude2, iteration_limit)
    return result.get(calc_type)
