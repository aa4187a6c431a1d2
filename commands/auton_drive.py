import math
from enum import auto, Enum
from typing import Final

from ntcore import NetworkTableInstance
from wpilib import DataLogManager
from wpimath.units import degrees

from commands.task import Task
from constants import Constants
from lib.vector import Vector2D
from subsystems.swerve.config import ConfigurationError
from subsystems.swerve.drive import AutoDriveController
from subsystems.swerve.io import wrapDegrees
from subsystems.swerve.kinematics import accountForDeadband


class AutonomousStraightDrive(Task):
    """
    Strafes the drivetrain in a fixed direction, at a fixed speed, over a fixed
    distance, steering against any change in gyro heading on the way.

    One-shot: once it has ended it cannot be initialized again.
    """

    class State(Enum):
        INIT = auto()
        RUNNING = auto()
        DONE = auto()

    def __init__(self, controller: AutoDriveController, direction: degrees, distance: float, speed: float) -> None:
        """
        :param controller: the drivetrain to move
        :param direction: heading to travel in, on [0, 360), 0 is forwards and
            increasing values are further clockwise
        :param distance: inches to travel, greater than zero
        :param speed: drive speed on (0, 1]
        """
        if not (math.isfinite(direction) and 0 <= direction < 360):
            raise ConfigurationError(f"direction must be on [0, 360), got {direction}")
        if not (math.isfinite(distance) and distance > 0):
            raise ConfigurationError(f"distance must be positive, got {distance}")
        if not 0 < speed <= 1:
            raise ConfigurationError(f"speed must be on (0, 1], got {speed}")

        self._controller: Final[AutoDriveController] = controller
        self.targetDirection: Final[degrees] = direction
        self.targetDistance: Final[float] = distance
        self.targetSpeed: Final[float] = speed

        self.initialGyroAngle: degrees = 0.0
        self.finished = False
        self._state = self.State.INIT

        table = NetworkTableInstance.getDefault().getTable(Constants.AutonConstants.TELEMETRY_TABLE)
        self._correction_pub = table.getDoubleTopic("HeadingCorrection").publish()
        self._distance_pub = table.getDoubleTopic("DistanceTraveled").publish()

    @property
    def state(self) -> "AutonomousStraightDrive.State":
        return self._state

    def initialize(self) -> None:
        if self._state is not self.State.INIT:
            raise RuntimeError(f"{type(self).__name__} cannot be restarted from {self._state.name}")

        self._controller.stop()
        self._controller.setDistanceReference()
        self.initialGyroAngle = self._controller.getGyroAngle()
        self._state = self.State.RUNNING

        DataLogManager.log(
            f"Auton drive started: {self.targetDistance} in at {self.targetDirection} deg, speed {self.targetSpeed}"
        )

    def execute(self) -> None:
        if self._state is not self.State.RUNNING:
            return

        if self._checkDistance():
            return

        correction = self.getCorrectionTurn()
        steering = accountForDeadband(correction, self._controller.configuration.deadband)
        driveVector = Vector2D.fromDirection(self.targetDirection, self.targetSpeed)
        # Deadbanding x and y separately would bend the heading off the axes
        self._controller.inputDrive(driveVector.x, driveVector.y, steering, applyDeadband=False)

        self._correction_pub.set(correction)

    def getCorrectionTurn(self) -> float:
        """Steering output that turns the robot back to its starting heading."""
        # Heading error on (-180, 180]
        error = -wrapDegrees(self._controller.getGyroAngle() - self.initialGyroAngle)
        return max(-1.0, min(1.0, error * Constants.AutonConstants.CORRECTION_TURN_SCALAR))

    def end(self, interrupted: bool) -> None:
        self._controller.stop()
        self._state = self.State.DONE

        if interrupted:
            DataLogManager.log("Auton drive interrupted")
        else:
            DataLogManager.log(f"Auton drive finished after {self._controller.getDistanceTraveled():.1f} in")

    def isFinished(self) -> bool:
        if self._state is self.State.RUNNING:
            self._checkDistance()
        return self.finished

    def _checkDistance(self) -> bool:
        traveled = self._controller.getDistanceTraveled()
        self._distance_pub.set(traveled)
        if traveled >= self.targetDistance:
            self.finished = True
            self._state = self.State.DONE
        return self.finished
