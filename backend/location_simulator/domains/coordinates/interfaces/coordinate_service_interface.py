from abc import ABC, abstractmethod
from typing import Any, List, Optional

from location_simulator.domains.coordinates.models.coordinate_model import Coordinate


class CoordinateServiceInterface(ABC):
    """座標擷取服務介面"""

    @abstractmethod
    def parse_text(self, text: str) -> List[Coordinate]:
        """解析每行一組 `lat,lon` 的文字"""
        pass

    @abstractmethod
    def parse_gpx(self, content: bytes) -> List[Coordinate]:
        """解析 GPX 內容，取第一條軌跡第一個區段的所有軌跡點"""
        pass

    @abstractmethod
    async def extract_coordinates(
        self,
        manual: Optional[str] = None,
        batch: Optional[str] = None,
        gpx: Optional[Any] = None,
    ) -> List[Coordinate]:
        """依 manual → batch → gpx 的順序，只處理第一個存在的輸入"""
        pass
