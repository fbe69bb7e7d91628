from .utils import (
    WrapTo180,
    WrapTo360,
    is_finite_coordinate,
)

__all__ = [
    'WrapTo180',
    'WrapTo360',
    'is_finite_coordinate',
]
