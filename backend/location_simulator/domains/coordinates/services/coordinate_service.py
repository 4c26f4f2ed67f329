import logging
import xml.etree.ElementTree as ET
from typing import Any, List, Optional

from pydantic import ValidationError

from location_simulator.core.exceptions import (
    CoordinateParseError,
    CoordinateReadError,
)
from location_simulator.domains.coordinates.models.coordinate_model import Coordinate
from location_simulator.domains.coordinates.interfaces.coordinate_service_interface import (
    CoordinateServiceInterface,
)

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """去除 XML 命名空間，例如 `{http://www.topografix.com/GPX/1/1}trkpt` → `trkpt`"""
    return tag.rsplit("}", 1)[-1]


def _first_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


class CoordinateService(CoordinateServiceInterface):
    """座標擷取服務實現"""

    def parse_text(self, text: str) -> List[Coordinate]:
        """將手動或批次輸入的文字轉為座標序列，順序與行順序一致"""
        coordinates = []
        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line:
                continue

            # 只以第一個逗號切分
            lat, sep, lon = line.partition(",")
            lat, lon = lat.strip(), lon.strip()
            if not sep or not lat or not lon:
                raise CoordinateParseError(
                    f"Line {line_number} is not a 'lat,lon' pair: {line!r}"
                )
            coordinates.append(Coordinate(latitude=lat, longitude=lon))

        return coordinates

    def parse_gpx(self, content: bytes) -> List[Coordinate]:
        """讀取 gpx > trk[0] > trkseg[0] > trkpt[*] 的 lat / lon 屬性"""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise CoordinateParseError(f"Invalid GPX file: {e}") from e

        if _local_name(root.tag) != "gpx":
            raise CoordinateParseError("Invalid GPX file: root element is not <gpx>")

        track = _first_child(root, "trk")
        if track is None:
            raise CoordinateParseError("Invalid GPX file: no <trk> element")

        segment = _first_child(track, "trkseg")
        if segment is None:
            raise CoordinateParseError("Invalid GPX file: no <trkseg> in the first track")

        points = [child for child in segment if _local_name(child.tag) == "trkpt"]
        if not points:
            raise CoordinateParseError("Invalid GPX file: the first track segment has no <trkpt>")

        coordinates = []
        for index, point in enumerate(points):
            lat = point.get("lat")
            lon = point.get("lon")
            if lat is None or lon is None:
                raise CoordinateParseError(
                    f"Invalid GPX file: track point {index} is missing lat/lon"
                )
            try:
                coordinates.append(Coordinate(latitude=lat, longitude=lon))
            except ValidationError as e:
                raise CoordinateParseError(
                    f"Invalid GPX file: track point {index} has an empty lat/lon"
                ) from e

        logger.debug(f"Parsed {len(coordinates)} track points from GPX")
        return coordinates

    async def extract_coordinates(
        self,
        manual: Optional[str] = None,
        batch: Optional[str] = None,
        gpx: Optional[Any] = None,
    ) -> List[Coordinate]:
        """
        從請求內容擷取座標序列

        `gpx` 為具有非同步 `read()` 的上傳檔案 (例如 FastAPI 的 UploadFile)。
        三種輸入都不存在時回傳空列表，由呼叫端決定是否視為錯誤。
        """
        if manual is not None:
            return self.parse_text(manual)

        if batch is not None:
            return self.parse_text(batch)

        if gpx is not None:
            try:
                content = await gpx.read()
            except OSError as e:
                raise CoordinateReadError(f"Could not read the GPX upload: {e}") from e
            return self.parse_gpx(content)

        return []
