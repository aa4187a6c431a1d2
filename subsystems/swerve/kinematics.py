"""
Inverse kinematics for a four wheel swerve drive.

Inputs are on [-1, 1] with +y forwards, +x to the right and positive steering
turning clockwise from a top-down view.
"""

import math
from typing import NamedTuple, Sequence

import wpimath
from wpimath.units import degrees

from lib.vector import Vector2D
from subsystems.swerve.config import DriveConfiguration


class WheelCommand(NamedTuple):
    direction: degrees
    speed: float


class SwerveWheelCommands(NamedTuple):
    fl: WheelCommand
    fr: WheelCommand
    rl: WheelCommand
    rr: WheelCommand


def _clampUnit(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(-1.0, min(1.0, value))


def accountForDeadband(value: float, deadband: float) -> float:
    """
    Maps an input on [-1, 1] so anything inside the deadband is exactly zero and the
    rest is rescaled linearly, with the deadband edge landing on zero and 1 on 1.
    """
    value = _clampUnit(value)
    if abs(value) < deadband:
        return 0.0
    return _clampUnit(wpimath.applyDeadband(value, deadband))


def compute(
    strafeX: float,
    strafeY: float,
    steering: float,
    config: DriveConfiguration,
    previousDirections: Sequence[degrees],
    applyDeadband: bool = True,
) -> SwerveWheelCommands:
    """
    Turns a single body-frame motion command into the four wheel commands.

    :param previousDirections: last direction of (fl, fr, rl, rr), kept for any
        wheel that is not asked to move
    :param applyDeadband: deadband each axis independently before scaling
    """
    if applyDeadband:
        strafeX = accountForDeadband(strafeX, config.deadband)
        strafeY = accountForDeadband(strafeY, config.deadband)
        steering = accountForDeadband(steering, config.deadband)
    else:
        strafeX = _clampUnit(strafeX)
        strafeY = _clampUnit(strafeY)
        steering = _clampUnit(steering)

    strafe = Vector2D(strafeX, strafeY) * config.driveRelativeSpeed

    # Steering vector added to the FR wheel; the other three are its reflections
    steerFR = Vector2D(steering * config.widthToHeightRatio, -steering) * config.steerRelativeSpeed

    vectors = (
        strafe + steerFR.reflectAcrossX(),  # fl
        strafe + steerFR,                   # fr
        strafe + -steerFR,                  # rl
        strafe + steerFR.reflectAcrossY(),  # rr
    )

    speeds = [vector.magnitude() for vector in vectors]
    directions = [
        vector.angleFromForward() if speed > 0 else previous
        for vector, speed, previous in zip(vectors, speeds, previousDirections)
    ]

    # Uniform scale; the ratios between wheels must not change
    maxSpeed = max(speeds)
    if maxSpeed > config.maxOutput:
        ratio = config.maxOutput / maxSpeed
        speeds = [min(speed * ratio, config.maxOutput) for speed in speeds]

    return SwerveWheelCommands(*(WheelCommand(d, s) for d, s in zip(directions, speeds)))
