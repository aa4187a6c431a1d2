import pytest

from subsystems.swerve import AutoDriveController, DriveController, GyroSensorSim
from tests.fakes import RecordingWheel


@pytest.fixture
def wheels():
    return [RecordingWheel() for _ in range(4)]


@pytest.fixture
def controller(wheels):
    return DriveController(*wheels)


@pytest.fixture
def gyro():
    return GyroSensorSim()


@pytest.fixture
def auto_controller(wheels, gyro):
    return AutoDriveController(*wheels, gyro)
