from typing import Dict, Optional, Type

from location_simulator.domains.device.interfaces.command_runner_interface import (
    CommandRunnerInterface,
)
from location_simulator.domains.device.interfaces.device_driver_interface import (
    DeviceDriverInterface,
)
from location_simulator.domains.device.models.device_model import Platform
from location_simulator.domains.device.services.android_emulator_driver import (
    AndroidEmulatorDriver,
)
from location_simulator.domains.device.services.ios_simulator_driver import (
    IOSSimulatorDriver,
)

DRIVERS: Dict[Platform, Type[DeviceDriverInterface]] = {
    Platform.IOS: IOSSimulatorDriver,
    Platform.ANDROID: AndroidEmulatorDriver,
}


def get_device_driver(
    platform: Optional[str], runner: CommandRunnerInterface
) -> DeviceDriverInterface:
    """依平台名稱建立驅動；無法辨識的平台使用 Android"""
    return DRIVERS[Platform.resolve(platform)](runner)
