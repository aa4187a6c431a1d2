"""
Swerve subsystem. DriveController turns strafe and steering input into four module commands.
"""

from subsystems.swerve.config import ConfigurationError, DriveConfiguration
from subsystems.swerve.drive import AutoDriveController, Drivable, DriveController
from subsystems.swerve.io import GyroSensor, GyroSensorSim, WheelActuator, WheelActuatorSim
from subsystems.swerve.kinematics import SwerveWheelCommands, WheelCommand

__all__ = [
    "AutoDriveController",
    "ConfigurationError",
    "Drivable",
    "DriveConfiguration",
    "DriveController",
    "GyroSensor",
    "GyroSensorSim",
    "SwerveWheelCommands",
    "WheelActuator",
    "WheelActuatorSim",
    "WheelCommand",
]
