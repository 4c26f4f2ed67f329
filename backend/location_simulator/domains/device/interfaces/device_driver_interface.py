import logging
from abc import ABC, abstractmethod
from typing import List, Sequence

from location_simulator.core.exceptions import CommandExecutionError
from location_simulator.domains.coordinates.models.coordinate_model import Coordinate
from location_simulator.domains.device.interfaces.command_runner_interface import (
    CommandRunnerInterface,
)
from location_simulator.domains.device.models.device_model import Platform

logger = logging.getLogger(__name__)


class DeviceDriverInterface(ABC):
    """單一平台的設備驅動：列舉設備、設定單一設備的位置"""

    platform: Platform
    no_devices_message: str

    def __init__(self, runner: CommandRunnerInterface):
        self.runner = runner

    @abstractmethod
    async def list_devices(self) -> List[str]:
        """回傳目前可用的設備識別碼；列舉指令失敗時拋出 DeviceDiscoveryError"""
        pass

    @abstractmethod
    async def set_location(self, device_id: str, coordinate: Coordinate) -> bool:
        """設定一台設備的位置，失敗只記錄並回傳 False，不拋出例外"""
        pass

    async def _dispatch(self, device_id: str, args: Sequence[str]) -> bool:
        """執行單一設備的指令；失敗只記錄，讓同一批次的其他設備繼續"""
        try:
            result = await self.runner.run(args)
        except CommandExecutionError as e:
            logger.error(f"{self.platform.value} device {device_id}: {e}")
            return False

        if not result.ok:
            logger.error(f"{self.platform.value} device {device_id}: {result.message}")
            return False

        return True
