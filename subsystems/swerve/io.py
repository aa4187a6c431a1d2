from abc import ABC, abstractmethod
from typing import Final

from wpimath.units import degrees, degrees_per_second, seconds

from constants import Constants


def wrapDegrees(angle: degrees) -> degrees:
    """Wrap an angle to [-180, 180)."""
    return (angle + 180) % 360 - 180


class WheelActuator(ABC):
    """
    Abstract base class for one swerve module.
    Provides the interface for both real hardware and simulation.

    Directions are degrees on [0, 360), 0 is directly forwards and increasing
    values steer further clockwise from a top-down view.
    """

    @abstractmethod
    def steerAndDrive(self, direction: degrees, speed: float) -> None:
        """Steer towards a direction and drive at a speed on [0, 1]."""

    @abstractmethod
    def getDirection(self) -> degrees:
        """Current steering direction."""

    @abstractmethod
    def resetDirectionalEncoder(self) -> None:
        """Set the reference point for getDirectionalDifference."""

    @abstractmethod
    def getDirectionalDifference(self) -> float:
        """Signed inches driven since the last encoder reset."""

    @abstractmethod
    def stop(self) -> None:
        """Stop steering and driving immediately."""

    def checkWithin180Range(self, direction: degrees, marginOfError: degrees) -> bool:
        """
        Whether the wheel is within a margin of a direction, measured the short
        way around the circle (355 is within 10 of 0).
        """
        return abs(wrapDegrees(direction - self.getDirection())) <= marginOfError


class GyroSensor(ABC):
    """Abstract base class for the robot heading sensor."""

    @abstractmethod
    def getGyroAngle(self) -> degrees:
        """Heading in degrees, increasing clockwise and not wrapped to 360."""


class WheelActuatorSim(WheelActuator):
    """
    Simulation implementation for testing without hardware.
    Steering slews at a fixed rate; distance integrates the commanded speed.
    """

    def __init__(
        self,
        initialDirection: degrees = 0.0,
        steerRate: degrees_per_second = Constants.SimConstants.STEER_RATE,
        maxWheelSpeed: float = Constants.SimConstants.MAX_WHEEL_SPEED,
    ) -> None:
        """
        Initialize the simulated module.

        :param initialDirection: direction the wheel starts at
        :param steerRate: how fast the module can steer
        :param maxWheelSpeed: inches per second driven at full output
        """
        self._steerRate: Final[float] = steerRate
        self._maxWheelSpeed: Final[float] = maxWheelSpeed

        self._direction: degrees = initialDirection % 360
        self._targetDirection: degrees = self._direction
        self._speed: float = 0.0
        self._distance: float = 0.0
        self._distanceReference: float = 0.0

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def targetDirection(self) -> degrees:
        return self._targetDirection

    def steerAndDrive(self, direction: degrees, speed: float) -> None:
        self._targetDirection = direction % 360
        self._speed = max(0.0, min(1.0, speed))

    def getDirection(self) -> degrees:
        return self._direction

    def resetDirectionalEncoder(self) -> None:
        self._distanceReference = self._distance

    def getDirectionalDifference(self) -> float:
        return self._distance - self._distanceReference

    def stop(self) -> None:
        self._targetDirection = self._direction
        self._speed = 0.0

    def update(self, dt: seconds = Constants.SimConstants.LOOP_PERIOD) -> None:
        """Advance the module by one loop period."""
        error = wrapDegrees(self._targetDirection - self._direction)
        step = self._steerRate * dt
        if abs(error) <= step:
            self._direction = self._targetDirection
        else:
            self._direction = (self._direction + (step if error > 0 else -step)) % 360

        self._distance += self._speed * self._maxWheelSpeed * dt


class GyroSensorSim(GyroSensor):
    """Simulated gyro that integrates a yaw rate."""

    def __init__(self, initialAngle: degrees = 0.0) -> None:
        self._angle: degrees = initialAngle
        self._rate: degrees_per_second = 0.0

    def getGyroAngle(self) -> degrees:
        return self._angle

    def setGyroAngle(self, angle: degrees) -> None:
        self._angle = angle

    def setRate(self, rate: degrees_per_second) -> None:
        self._rate = rate

    def update(self, dt: seconds = Constants.SimConstants.LOOP_PERIOD) -> None:
        self._angle += self._rate * dt
