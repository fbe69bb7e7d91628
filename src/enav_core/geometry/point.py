"""
Local planar point (meters)

Math coordinate convention: x = East, y = North, angles counter-clockwise
from +x.
"""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point in a local planar frame.

    Attributes:
        x: East component (meters)
        y: North component (meters)
    """
    x: float
    y: float

    def rotate(self, pivot: "Point", angle_deg: float) -> "Point":
        """
        pivot을 중심으로 회전한 새 Point 반환

        Args:
            pivot: Center of rotation
            angle_deg: Rotation angle (degrees, math convention, CCW positive)

        Returns:
            Rotated point. The receiver is not modified.
        """
        angle_rad = np.radians(angle_deg)
        cos_a = np.cos(angle_rad)
        sin_a = np.sin(angle_rad)

        dx = self.x - pivot.x
        dy = self.y - pivot.y

        x_rot = pivot.x + dx * cos_a - dy * sin_a
        y_rot = pivot.y + dx * sin_a + dy * cos_a
        return Point(float(x_rot), float(y_rot))

    def translate(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)
