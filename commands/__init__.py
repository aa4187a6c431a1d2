from commands.auton_drive import AutonomousStraightDrive
from commands.task import asCommand, Task

__all__ = ["AutonomousStraightDrive", "Task", "asCommand"]
