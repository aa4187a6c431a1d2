from abc import ABC, abstractmethod

from commands2 import Command, FunctionalCommand, Subsystem


class Task(ABC):
    """
    A unit of work polled by an external scheduler.

    The scheduler calls initialize once, then execute and isFinished every tick
    until isFinished is True or the task is cancelled, and finally end.
    """

    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def end(self, interrupted: bool) -> None:
        pass

    @abstractmethod
    def isFinished(self) -> bool:
        pass


def asCommand(task: Task, *requirements: Subsystem) -> Command:
    """
    Wrap a task so the commands2 CommandScheduler can run it.

    DriveController is not a Subsystem, so pass the Subsystem that owns the
    drivetrain as a requirement. Without one the scheduler will happily run
    another command on the same controller at the same time.
    """
    command = FunctionalCommand(
        task.initialize,
        task.execute,
        task.end,
        task.isFinished,
        *requirements,
    )
    command.setName(type(task).__name__)
    return command
