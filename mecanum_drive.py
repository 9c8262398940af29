import math
from dataclasses import dataclass
from typing import Dict, Iterator

import numpy as np

from mecanum_constants import REMAP_OFFSET, OUTPUT_MIN, OUTPUT_MAX, ATOL, \
    WHEEL_NAMES, MOTOR_GROUP_1, MOTOR_GROUP_2, DESIGN_TABLE


class UndefinedAngleError(ValueError):
    """Raised when a direction has no angle, i.e. the point (0, 0)."""


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def from_angle(cls, theta: float) -> "Point":
        """Unit circle point at angle theta [rad]"""
        return cls(math.cos(theta), math.sin(theta))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def __neg__(self):
        return Point(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class WheelCommands:
    """Motor group coordinate commanded to each wheel, in [-1, 1]."""
    front_left: float
    front_right: float
    rear_left: float
    rear_right: float

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in WHEEL_NAMES}


def clamp_unit(d: float) -> float:
    """
    If d is within (-1, 1) return d, otherwise return the closest bound (1 or -1).
    A magnitude of exactly 1 saturates to the bound with the same sign.
    """
    if abs(d) < OUTPUT_MAX:
        return d
    return OUTPUT_MAX if d > 0 else OUTPUT_MIN


def _validate_point(point: Point) -> None:
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise ValueError(f"Direction must have finite components, got {point}")
    if point.x == 0 and point.y == 0:
        raise UndefinedAngleError(
            "Direction (0, 0) has no angle to map.")


def direction_angle(point: Point) -> float:
    """ Angle of the point measured from the +X axis, in [-pi/2, 3pi/2).

    Quadrants 3 and 4 land above pi so the whole circle is covered from the
    negative Y-axis upward; the negative X-axis (y == 0, x < 0) is exactly pi.

    Args:
        point (Point): Requested direction, any non-zero magnitude.

    Raises:
        UndefinedAngleError: If the point is (0, 0).
        ValueError: If a component is not finite.

    Returns:
        float: The direction angle in radians.
    """
    _validate_point(point)
    theta = math.atan2(point.y, point.x)
    if theta < -math.pi / 2:
        theta += 2 * math.pi
    # One ulp below -pi/2 rounds up onto 3pi/2
    if theta >= 3 * math.pi / 2:
        theta = -math.pi / 2
    return theta


def mecanum_coordinate(point: Point) -> Point:
    """ Convert a direction on the unit circle into motor group powers (two groups),
    returned in coordinate form on the unit circle.

    Each direction is flipped over the Y-axis and then rotated counterclockwise by
    45 degrees, which gives finalTheta = 3pi/4 - theta.

    Args:
        point (Point): Requested chassis direction (x strafe, y drive).

    Raises:
        UndefinedAngleError: If the point is (0, 0).
        ValueError: If a component is not finite.

    Returns:
        Point: (group 1, group 2) coordinate with both components in [-1, 1].
    """
    theta = direction_angle(point)
    final_theta = REMAP_OFFSET - theta
    return Point(
        clamp_unit(math.cos(final_theta)),
        clamp_unit(math.sin(final_theta)),
    )


def wheel_commands(point: Point) -> WheelCommands:
    """Fan the two motor group coordinates out to the four wheels."""
    group = mecanum_coordinate(point)
    values = {}
    for name in WHEEL_NAMES:
        if name in MOTOR_GROUP_1:
            values[name] = group.x
        elif name in MOTOR_GROUP_2:
            values[name] = group.y
    return WheelCommands(**values)


def direction_angles(points: np.ndarray) -> np.ndarray:
    """Vectorized direction_angle over (N, 2) rows, each in [-pi/2, 3pi/2)."""
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(
            f"Points must have shape (N, 2), got {points.shape}")
    if not np.all(np.isfinite(points)):
        raise ValueError("Points must have finite components.")
    zero_rows = np.all(points == 0, axis=1)
    if np.any(zero_rows):
        raise UndefinedAngleError(
            f"Direction (0, 0) has no angle to map (rows {np.flatnonzero(zero_rows).tolist()}).")

    theta = np.arctan2(points[:, 1], points[:, 0])
    theta = np.where(theta < -np.pi / 2, theta + 2 * np.pi, theta)
    return np.where(theta >= 3 * np.pi / 2, -np.pi / 2, theta)


def mecanum_coordinates(points: np.ndarray) -> np.ndarray:
    """ Vectorized mecanum_coordinate over an array of directions.

    Args:
        points (np.ndarray): Array of shape (N, 2) holding (x, y) rows.

    Raises:
        ValueError: If the shape is not (N, 2) or any value is not finite.
        UndefinedAngleError: If any row is (0, 0).

    Returns:
        np.ndarray: Array of shape (N, 2) of (group 1, group 2) coordinates.
    """
    theta = direction_angles(points)
    final_theta = REMAP_OFFSET - theta
    out = np.column_stack([np.cos(final_theta), np.sin(final_theta)])
    # Same saturation as clamp_unit
    return np.where(np.abs(out) < OUTPUT_MAX, out,
                    np.where(out > 0, OUTPUT_MAX, OUTPUT_MIN))


if __name__ == "__main__":
    print("Mecanum direction -> motor group coordinate:")
    for (x, y), expected in DESIGN_TABLE.items():
        out = mecanum_coordinate(Point(x, y))
        wheels = wheel_commands(Point(x, y))
        print(
            f"  ({x:+.0f}, {y:+.0f}) -> ({out.x:+.4f}, {out.y:+.4f})"
            f" | theta = {direction_angle(Point(x, y)):.4f} rad"
            f" | FL={wheels.front_left:+.2f} FR={wheels.front_right:+.2f}"
            f" RL={wheels.rear_left:+.2f} RR={wheels.rear_right:+.2f}"
        )
        assert np.allclose(
            out.as_array(),
            expected,
            atol=ATOL
        ), f"Mapping of ({x}, {y}) did not match the design table."

    # Verify the vectorized path against the scalar one
    inputs = np.array(list(DESIGN_TABLE.keys()))
    assert np.allclose(
        mecanum_coordinates(inputs),
        np.array(list(DESIGN_TABLE.values())),
        atol=ATOL
    ), "Vectorized mapping did not match the design table."
    print("Design table verified.")
