from math import pi

"""Mecanum chassis constants (angles in radians)


Coordinate Frame (body frame):
    +X right (strafe), +Y forward (drive). Directions are points on the unit circle.

Wheel Layout (rollers at 45 degrees, diagonal pairs share a motor group):

        1/        \\2
       G/          \\G
      M/            \\M

      M\\            /M
       G\\          /G
        2\\        /1

    MOTOR_GROUP_1 = front_left + rear_right
    MOTOR_GROUP_2 = front_right + rear_left

Remap:
    A requested direction at angle theta is reflected over the Y-axis and rotated
    counterclockwise by ROLLER_ANGLE:
        finalTheta = (pi/2 - theta) + pi/2 - pi/4 = 3pi/4 - theta
    The motor group coordinate is (cos(finalTheta), sin(finalTheta)), clamped per axis.
"""

# ---------------- Geometry ----------------
ROLLER_ANGLE: float = pi / 4           # Roller offset from the wheel axis [rad]
REMAP_OFFSET: float = pi - ROLLER_ANGLE  # 3pi/4 [rad]

# ---------------- Output Range ----------------
OUTPUT_MIN: float = -1.0
OUTPUT_MAX: float = 1.0

# Absolute tolerance for checking mapped coordinates
ATOL: float = 1e-9

# ---------------- Wheels ----------------
WHEEL_NAMES = ("front_left", "front_right", "rear_left", "rear_right")
MOTOR_GROUP_1 = {"front_left", "rear_right"}
MOTOR_GROUP_2 = {"front_right", "rear_left"}

# ---------------- Design Table ----------------
# input direction -> expected motor group coordinate
HALF_SQRT2 = 2 ** 0.5 / 2
DESIGN_TABLE = {
    (0.0, 1.0): (HALF_SQRT2, HALF_SQRT2),     # forward
    (1.0, 0.0): (-HALF_SQRT2, HALF_SQRT2),    # strafe right
    (0.0, -1.0): (-HALF_SQRT2, -HALF_SQRT2),  # backward
    (-1.0, 0.0): (HALF_SQRT2, -HALF_SQRT2),   # strafe left
}
