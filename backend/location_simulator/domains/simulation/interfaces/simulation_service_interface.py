from abc import ABC, abstractmethod
from typing import List, Optional

from location_simulator.domains.coordinates.models.coordinate_model import Coordinate


class SimulationServiceInterface(ABC):
    """位置模擬服務介面"""

    @abstractmethod
    async def list_devices(self, platform: Optional[str]) -> List[str]:
        """列出指定平台目前可用的設備"""
        pass

    @abstractmethod
    async def simulate_locations(
        self,
        platform: Optional[str],
        coordinates: List[Coordinate],
        delay_ms: Optional[int] = None,
    ) -> int:
        """依序將每個座標送到所有設備，回傳處理的座標數量"""
        pass
