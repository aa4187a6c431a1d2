import math
from dataclasses import dataclass

from constants import Constants


class ConfigurationError(ValueError):
    """Raised when a drivetrain or autonomous parameter is outside its legal range."""


@dataclass(frozen=True)
class DriveConfiguration:
    """
    Tuning and geometry for one swerve drivetrain.

    The controller that owns a configuration replaces it wholesale when a setter is
    called, so every instance seen by the kinematics is complete and validated.
    """
    steerRelativeSpeed: float = Constants.SwerveConstants.STEER_RELATIVE_SPEED
    driveRelativeSpeed: float = Constants.SwerveConstants.DRIVE_RELATIVE_SPEED
    deadband: float = Constants.SwerveConstants.DEADBAND
    maxOutput: float = Constants.SwerveConstants.MAX_OUTPUT
    widthToHeightRatio: float = Constants.SwerveConstants.WIDTH_TO_HEIGHT_RATIO

    def __post_init__(self) -> None:
        for name in ("steerRelativeSpeed", "driveRelativeSpeed", "deadband", "maxOutput", "widthToHeightRatio"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be finite, got {getattr(self, name)}")

        if self.widthToHeightRatio <= 0:
            raise ConfigurationError(f"widthToHeightRatio must be positive, got {self.widthToHeightRatio}")
        if not 0 <= self.deadband < 1:
            raise ConfigurationError(f"deadband must be on [0, 1), got {self.deadband}")
        if not 0 < self.maxOutput <= 1:
            raise ConfigurationError(f"maxOutput must be on (0, 1], got {self.maxOutput}")
        if self.steerRelativeSpeed <= 0:
            raise ConfigurationError(f"steerRelativeSpeed must be positive, got {self.steerRelativeSpeed}")
        if self.driveRelativeSpeed <= 0:
            raise ConfigurationError(f"driveRelativeSpeed must be positive, got {self.driveRelativeSpeed}")

