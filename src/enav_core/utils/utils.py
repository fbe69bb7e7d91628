import numpy as np


def WrapTo180(deg):
    """Transform an angle in degrees to the range (-180, 180]."""
    wrapped = (deg + 180.0) % 360.0 - 180.0
    return 180.0 if wrapped == -180.0 else float(wrapped)


def WrapTo360(deg):
    """
    Transform an angle in degrees to the range [0, 360).
    """
    wrapped = deg % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if wrapped == 360.0 else float(wrapped)


def is_finite_coordinate(*values) -> bool:
    """True if every value is a finite number (no NaN / inf)."""
    return bool(np.all(np.isfinite(np.asarray(values, dtype=float))))
