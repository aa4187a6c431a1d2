from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Final, Optional, Tuple

from ntcore import NetworkTableInstance
from wpilib import DataLogManager
from wpimath.units import degrees

from constants import Constants
from subsystems.swerve import kinematics
from subsystems.swerve.config import DriveConfiguration
from subsystems.swerve.io import GyroSensor, WheelActuator
from subsystems.swerve.kinematics import SwerveWheelCommands


class Drivable(ABC):
    """Anything that can be driven from a strafe and steering input."""

    @abstractmethod
    def drive(self, strafeX: float, strafeY: float, steering: float) -> None:
        pass

    @abstractmethod
    def stop(self) -> None:
        pass

    @abstractmethod
    def describe(self) -> str:
        pass


class DriveController(Drivable):
    """
    Utilizes four WheelActuator modules to create a single, easy-to-use swerve drive.

    Every call, setters included, must come from the control loop that owns the
    controller. There is no locking.
    """

    def __init__(
        self,
        wheelFL: WheelActuator,
        wheelFR: WheelActuator,
        wheelRL: WheelActuator,
        wheelRR: WheelActuator,
        widthToHeightRatio: Optional[float] = None,
        config: Optional[DriveConfiguration] = None,
    ) -> None:
        """
        :param widthToHeightRatio: distance between the front wheels divided by the
            distance between the left wheels, fixed for the life of the controller
        :param config: starting tuning, defaults to the values in Constants
        """
        self._wheels: Final[Tuple[WheelActuator, ...]] = (wheelFL, wheelFR, wheelRL, wheelRR)

        if config is None:
            config = DriveConfiguration()
        if widthToHeightRatio is not None and widthToHeightRatio != config.widthToHeightRatio:
            config = replace(config, widthToHeightRatio=widthToHeightRatio)
        self._config: DriveConfiguration = config

        table = NetworkTableInstance.getDefault().getTable(Constants.SwerveConstants.TELEMETRY_TABLE)
        self._directions_pub = table.getDoubleArrayTopic("WheelDirections").publish()
        self._speeds_pub = table.getDoubleArrayTopic("WheelSpeeds").publish()

    @property
    def configuration(self) -> DriveConfiguration:
        return self._config

    @property
    def wheels(self) -> Tuple[WheelActuator, ...]:
        """The modules in (fl, fr, rl, rr) order."""
        return self._wheels

    def inputDrive(self, strafeX: float, strafeY: float, steering: float, applyDeadband: bool = True) -> SwerveWheelCommands:
        """
        Drives given strafing and steering inputs, all on [-1, 1], where +y is
        forwards, +x is to the right and positive steering turns clockwise.
        """
        commands = kinematics.compute(
            strafeX,
            strafeY,
            steering,
            self._config,
            [wheel.getDirection() for wheel in self._wheels],
            applyDeadband,
        )

        for wheel, command in zip(self._wheels, commands):
            wheel.steerAndDrive(command.direction, command.speed)

        self._directions_pub.set([command.direction for command in commands])
        self._speeds_pub.set([command.speed for command in commands])
        return commands

    def drive(self, strafeX: float, strafeY: float, steering: float) -> None:
        self.inputDrive(strafeX, strafeY, steering)

    def steerAndDriveAll(self, direction: degrees, speed: float) -> None:
        """Steers and drives every wheel identically, skipping the kinematics."""
        for wheel in self._wheels:
            wheel.steerAndDrive(direction, speed)

    def steerAllWithinRange(self, direction: degrees, marginOfError: degrees) -> bool:
        """
        Steers all wheels towards a direction without driving.

        :returns: True once every wheel is within the margin of the direction
        """
        self.steerAndDriveAll(direction, 0)
        return all(wheel.checkWithin180Range(direction, marginOfError) for wheel in self._wheels)

    def stop(self) -> None:
        for wheel in self._wheels:
            wheel.stop()

    def describe(self) -> str:
        return "SwerveDrive"

    def setMaxOutput(self, maxOutput: float) -> None:
        self._reconfigure(maxOutput=maxOutput)

    def setDeadband(self, deadband: float) -> None:
        self._reconfigure(deadband=deadband)

    def setSteerRelativeSpeed(self, steerRelativeSpeed: float) -> None:
        self._reconfigure(steerRelativeSpeed=steerRelativeSpeed)

    def setDriveRelativeSpeed(self, driveRelativeSpeed: float) -> None:
        self._reconfigure(driveRelativeSpeed=driveRelativeSpeed)

    def _reconfigure(self, **changes: float) -> None:
        # replace() re-runs validation, so a bad value leaves the old config in place
        self._config = replace(self._config, **changes)
        DataLogManager.log(f"{self.describe()} reconfigured: {changes}")


class AutoDriveController(DriveController):
    """
    A DriveController with a gyro and averaged wheel distance, for autonomous routines.
    """

    def __init__(
        self,
        wheelFL: WheelActuator,
        wheelFR: WheelActuator,
        wheelRL: WheelActuator,
        wheelRR: WheelActuator,
        gyro: GyroSensor,
        widthToHeightRatio: Optional[float] = None,
        config: Optional[DriveConfiguration] = None,
    ) -> None:
        super().__init__(wheelFL, wheelFR, wheelRL, wheelRR, widthToHeightRatio, config)
        self._gyro: Final[GyroSensor] = gyro

    def getGyroAngle(self) -> degrees:
        return self._gyro.getGyroAngle()

    def setDistanceReference(self) -> None:
        """Zero the reference that getDistanceTraveled measures from."""
        for wheel in self._wheels:
            wheel.resetDirectionalEncoder()

    def getDistanceTraveled(self) -> float:
        """
        Average distance in inches driven by the wheels since the last reference.
        Only accurate while every wheel points the same way.
        """
        return sum(abs(wheel.getDirectionalDifference()) for wheel in self._wheels) / len(self._wheels)

