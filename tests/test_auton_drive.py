import pytest
from commands2 import Subsystem

from commands import AutonomousStraightDrive, asCommand
from constants import Constants
from subsystems.swerve import AutoDriveController, ConfigurationError, GyroSensorSim, WheelActuatorSim


@pytest.mark.parametrize(
    "direction, distance, speed",
    [(360.0, 10.0, 0.5), (-1.0, 10.0, 0.5), (0.0, 0.0, 0.5), (0.0, -3.0, 0.5), (0.0, 10.0, 0.0), (0.0, 10.0, 1.2)],
)
def test_invalid_arguments_are_rejected(auto_controller, direction, distance, speed):
    with pytest.raises(ConfigurationError):
        AutonomousStraightDrive(auto_controller, direction, distance, speed)


def test_initialize_stops_resets_and_records_heading(auto_controller, wheels, gyro):
    gyro.setGyroAngle(42.0)
    for wheel in wheels:
        wheel.distance = 100.0
    task = AutonomousStraightDrive(auto_controller, 90.0, 24.0, 0.6)

    assert task.state is AutonomousStraightDrive.State.INIT
    task.initialize()

    assert task.state is AutonomousStraightDrive.State.RUNNING
    assert task.initialGyroAngle == 42.0
    assert [wheel.stops for wheel in wheels] == [1] * 4
    assert [wheel.resets for wheel in wheels] == [1] * 4
    assert auto_controller.getDistanceTraveled() == 0.0


def test_execute_drives_in_target_direction(auto_controller, wheels):
    task = AutonomousStraightDrive(auto_controller, 90.0, 24.0, 0.6)
    task.initialize()
    task.execute()

    for wheel in wheels:
        direction, speed = wheel.last
        assert direction == pytest.approx(90.0)
        assert speed > 0.0
    assert not task.isFinished()


@pytest.mark.parametrize(
    "initial, current, expected",
    [
        (0.0, 0.0, 0.0),
        (0.0, 5.0, -0.4),
        (0.0, -5.0, 0.4),
        (0.0, 30.0, -1.0),
        (0.0, 350.0, 0.8),
        (720.0, 0.0, 0.0),
        (0.0, 180.0, 1.0),
    ],
)
def test_correction_turn(auto_controller, gyro, initial, current, expected):
    gyro.setGyroAngle(initial)
    task = AutonomousStraightDrive(auto_controller, 0.0, 24.0, 0.5)
    task.initialize()

    gyro.setGyroAngle(current)
    assert task.getCorrectionTurn() == pytest.approx(expected)


def test_finishes_once_distance_is_reached(auto_controller, wheels):
    task = AutonomousStraightDrive(auto_controller, 0.0, 24.0, 0.5)
    task.initialize()
    task.execute()
    assert not task.isFinished()

    for wheel, distance in zip(wheels, (23.0, 25.0, -24.0, 24.0)):
        wheel.distance = distance
    assert task.isFinished()
    assert task.finished

    sent = [len(wheel.commands) for wheel in wheels]
    task.execute()
    assert [len(wheel.commands) for wheel in wheels] == sent


def test_end_stops_exactly_once(auto_controller, wheels):
    task = AutonomousStraightDrive(auto_controller, 0.0, 10.0, 0.5)
    task.initialize()
    for wheel in wheels:
        wheel.distance = 10.0
    task.execute()
    assert task.isFinished()

    before = [wheel.stops for wheel in wheels]
    task.end(False)
    assert [wheel.stops - b for wheel, b in zip(wheels, before)] == [1] * 4
    assert task.state is AutonomousStraightDrive.State.DONE


def test_interrupted_task_stops_and_cannot_restart(auto_controller, wheels):
    task = AutonomousStraightDrive(auto_controller, 180.0, 50.0, 0.5)
    task.initialize()
    task.execute()
    task.end(True)

    assert [wheel.stops for wheel in wheels] == [2] * 4
    assert not task.isFinished()

    sent = [len(wheel.commands) for wheel in wheels]
    task.execute()
    assert [len(wheel.commands) for wheel in wheels] == sent

    with pytest.raises(RuntimeError):
        task.initialize()


def test_execute_before_initialize_does_nothing(auto_controller, wheels):
    task = AutonomousStraightDrive(auto_controller, 0.0, 10.0, 0.5)
    task.execute()
    assert all(not wheel.commands for wheel in wheels)


def test_simulated_run_reaches_target():
    wheels = [WheelActuatorSim() for _ in range(4)]
    gyro = GyroSensorSim()
    gyro.setRate(5.0)
    controller = AutoDriveController(*wheels, gyro)

    task = AutonomousStraightDrive(controller, 90.0, 24.0, 0.6)
    command = asCommand(task)
    assert command.getName() == "AutonomousStraightDrive"

    command.initialize()
    for _ in range(500):
        command.execute()
        if command.isFinished():
            break
        for wheel in wheels:
            wheel.update()
        gyro.update()
    command.end(False)

    assert task.finished
    assert controller.getDistanceTraveled() >= 24.0
    assert all(wheel.speed == 0.0 for wheel in wheels)
    assert task.state is AutonomousStraightDrive.State.DONE


@pytest.mark.parametrize("direction", [5.0, 30.0, 172.0, 265.0, 359.0])
def test_off_axis_direction_is_held(auto_controller, wheels, direction):
    task = AutonomousStraightDrive(auto_controller, direction, 24.0, 0.5)
    task.initialize()
    task.execute()

    for wheel in wheels:
        sent_direction, speed = wheel.last
        assert sent_direction == pytest.approx(direction)
        assert speed == pytest.approx(0.5 * Constants.SwerveConstants.DRIVE_RELATIVE_SPEED)


def test_small_heading_correction_is_deadbanded(auto_controller, wheels, gyro):
    task = AutonomousStraightDrive(auto_controller, 30.0, 24.0, 0.5)
    task.initialize()

    # 0.5 degrees of drift gives a correction of 0.04, inside the 0.06 deadband
    gyro.setGyroAngle(0.5)
    task.execute()
    assert len({wheel.last for wheel in wheels}) == 1

    gyro.setGyroAngle(5.0)
    task.execute()
    assert len({wheel.last for wheel in wheels}) > 1


def test_state_is_done_once_distance_is_reached(auto_controller, wheels):
    task = AutonomousStraightDrive(auto_controller, 0.0, 10.0, 0.5)
    task.initialize()
    for wheel in wheels:
        wheel.distance = 10.0

    assert task.isFinished()
    assert task.state is AutonomousStraightDrive.State.DONE

    before = [wheel.stops for wheel in wheels]
    task.end(False)
    assert [wheel.stops - b for wheel, b in zip(wheels, before)] == [1] * 4


def test_command_declares_drivetrain_requirement(auto_controller):
    drivetrain = Subsystem()
    command = asCommand(AutonomousStraightDrive(auto_controller, 0.0, 10.0, 0.5), drivetrain)
    assert drivetrain in command.getRequirements()
