import logging
import re
from typing import List

from location_simulator.core.config import ADB_PATH
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
from location_simulator.domains.device.models.device_model import Platform

logger = logging.getLogger(__name__)

SERIAL_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
OFFLINE_MARKER = "offline"
ADB_HEADER = "List of devices attached"


def parse_adb_devices(output: str) -> List[str]:
    """
    解析 `adb devices` 的表格輸出

    跳過標題行 (含之前的 daemon 啟動訊息)，每行取第一個欄位作為序號；
    排除離線設備以及不符合序號格式的行。
    """
    lines = output.splitlines()
    start = 1
    for index, line in enumerate(lines):
        if line.startswith(ADB_HEADER):
            start = index + 1
            break

    serials = []
    for line in lines[start:]:
        fields = line.split()
        if not fields:
            continue

        serial = fields[0]
        if OFFLINE_MARKER in line:
            continue
        if SERIAL_PATTERN.match(serial):
            serials.append(serial)

    return serials


class AndroidEmulatorDriver(DeviceDriverInterface):
    """透過 `adb emu geo fix` 控制已連線的 Android 模擬器"""

    platform = Platform.ANDROID
    no_devices_message = "No connected Android emulators"

    def __init__(self, runner: CommandRunnerInterface, adb_path: str = ADB_PATH):
        super().__init__(runner)
        self.adb_path = adb_path

    async def list_devices(self) -> List[str]:
        try:
            result = await self.runner.run([self.adb_path, "devices"])
        except CommandExecutionError as e:
            raise DeviceDiscoveryError(f"Could not list Android devices: {e}") from e

        if not result.ok:
            raise DeviceDiscoveryError(f"Could not list Android devices: {result.message}")

        serials = parse_adb_devices(result.stdout)
        logger.debug(f"adb reported {len(serials)} usable device(s): {serials}")
        return serials

    async def set_location(self, device_id: str, coordinate: Coordinate) -> bool:
        # geo fix 的參數順序是經度在前
        args = [
            self.adb_path,
            "-s",
            device_id,
            "emu",
            "geo",
            "fix",
            coordinate.longitude,
            coordinate.latitude,
        ]
        return await self._dispatch(device_id, args)
