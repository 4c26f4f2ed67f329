import asyncio
import logging
from typing import List, Optional

from location_simulator.core.config import SIMULATION_DELAY_MS
from location_simulator.core.exceptions import (
    NoActiveDevicesError,
    NoCoordinatesError,
)
from location_simulator.domains.coordinates.models.coordinate_model import Coordinate
from location_simulator.domains.device.interfaces.command_runner_interface import (
    CommandRunnerInterface,
)
from location_simulator.domains.device.services.device_driver_factory import (
    get_device_driver,
)
from location_simulator.domains.simulation.interfaces.simulation_service_interface import (
    SimulationServiceInterface,
)

logger = logging.getLogger(__name__)


class SimulationService(SimulationServiceInterface):
    """
    位置模擬服務實現

    每次執行只列舉一次設備，之後依座標順序廣播：
    同一個座標依序送到所有設備，再停頓 delay_ms 後處理下一個座標。
    執行期間設備的連線 / 斷線不會被觀察到。
    """

    def __init__(
        self,
        runner: CommandRunnerInterface,
        delay_ms: int = SIMULATION_DELAY_MS,
    ):
        self.runner = runner
        self.delay_ms = delay_ms

    async def list_devices(self, platform: Optional[str]) -> List[str]:
        driver = get_device_driver(platform, self.runner)
        return await driver.list_devices()

    async def simulate_locations(
        self,
        platform: Optional[str],
        coordinates: List[Coordinate],
        delay_ms: Optional[int] = None,
    ) -> int:
        if not coordinates:
            raise NoCoordinatesError()

        if delay_ms is None:
            delay_ms = self.delay_ms

        driver = get_device_driver(platform, self.runner)
        device_ids = await driver.list_devices()
        if not device_ids:
            raise NoActiveDevicesError(driver.no_devices_message)

        logger.info(
            f"Simulating {len(coordinates)} coordinate(s) on {len(device_ids)} "
            f"{driver.platform.value} device(s), {delay_ms} ms apart"
        )

        for index, coordinate in enumerate(coordinates, start=1):
            failed = 0
            for device_id in device_ids:
                if not await driver.set_location(device_id, coordinate):
                    failed += 1

            if failed:
                logger.info(
                    f"Coordinate {index}/{len(coordinates)} ({coordinate}): "
                    f"{failed}/{len(device_ids)} device(s) failed"
                )
            else:
                logger.debug(f"Coordinate {index}/{len(coordinates)} ({coordinate}) sent")

            await asyncio.sleep(delay_ms / 1000)

        return len(coordinates)
