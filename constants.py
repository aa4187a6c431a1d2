from typing import Final


class Constants:

    class SwerveConstants:
        # Scalars applied to the joystick inputs before the wheel vectors are summed
        STEER_RELATIVE_SPEED: Final[float] = 0.3
        DRIVE_RELATIVE_SPEED: Final[float] = 0.5

        DEADBAND: Final[float] = 0.06
        MAX_OUTPUT: Final[float] = 1.0

        # Track / wheelbase. 1.0 for a square chassis
        WIDTH_TO_HEIGHT_RATIO: Final[float] = 1.0

        TELEMETRY_TABLE: Final[str] = "Swerve"

    class AutonConstants:
        # Turn output per degree of heading error
        CORRECTION_TURN_SCALAR: Final[float] = 0.08
        TELEMETRY_TABLE: Final[str] = "Auton"

    class SimConstants:
        LOOP_PERIOD: Final[float] = 0.02  # 20ms periodic
        STEER_RATE: Final[float] = 720.0  # degrees per second
        MAX_WHEEL_SPEED: Final[float] = 150.0  # inches per second at full output
