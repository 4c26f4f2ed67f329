import logging
from typing import List

from pydantic import ValidationError

from location_simulator.core.config import XCRUN_PATH
from location_simulator.core.exceptions import (
    CommandExecutionError,
    DeviceDiscoveryError,
)
from location_simulator.domains.coordinates.models.coordinate_model import Coordinate
from location_simulator.domains.device.interfaces.command_runner_interface import (
    CommandRunnerInterface,
)
from location_simulator.domains.device.interfaces.device_driver_interface import (
    DeviceDriverInterface,
)
from location_simulator.domains.device.models.device_model import (
    Platform,
    SimctlDeviceList,
)

logger = logging.getLogger(__name__)

BOOTED_STATE = "Booted"


class IOSSimulatorDriver(DeviceDriverInterface):
    """透過 `xcrun simctl` 控制已啟動的 iOS 模擬器"""

    platform = Platform.IOS
    no_devices_message = "No booted iOS simulators"

    def __init__(self, runner: CommandRunnerInterface, xcrun_path: str = XCRUN_PATH):
        super().__init__(runner)
        self.xcrun_path = xcrun_path

    async def list_devices(self) -> List[str]:
        args = [self.xcrun_path, "simctl", "list", "devices", "booted", "--json"]
        try:
            result = await self.runner.run(args)
        except CommandExecutionError as e:
            raise DeviceDiscoveryError(f"Could not list iOS simulators: {e}") from e

        if not result.ok:
            raise DeviceDiscoveryError(f"Could not list iOS simulators: {result.message}")

        try:
            listing = SimctlDeviceList.model_validate_json(result.stdout)
        except ValidationError as e:
            raise DeviceDiscoveryError(
                f"Unexpected output from simctl device listing: {e}"
            ) from e

        # 將各 runtime 的設備攤平，只保留狀態為 Booted 者
        udids = [
            device.udid
            for devices in listing.devices.values()
            for device in devices
            if device.state == BOOTED_STATE
        ]
        logger.debug(f"simctl reported {len(udids)} booted simulator(s): {udids}")
        return udids

    async def set_location(self, device_id: str, coordinate: Coordinate) -> bool:
        args = [
            self.xcrun_path,
            "simctl",
            "location",
            device_id,
            "set",
            f"{coordinate.latitude},{coordinate.longitude}",
        ]
        return await self._dispatch(device_id, args)
