import logging
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from location_simulator.core.config import DEFAULT_PLATFORM

logger = logging.getLogger(__name__)


class Platform(str, Enum):
    """支援的設備平台"""

    IOS = "ios"  # Xcode 模擬器 (xcrun simctl)
    ANDROID = "android"  # Android 模擬器 (adb)

    @classmethod
    def resolve(cls, value: Optional[str]) -> "Platform":
        """不分大小寫解析平台名稱，無法辨識時回退為 DEFAULT_PLATFORM"""
        normalized = (value or "").strip().lower()
        for platform in cls:
            if platform.value == normalized:
                return platform

        default = cls(DEFAULT_PLATFORM)
        if normalized:
            logger.warning(f"Unknown platform {value!r}, falling back to {default.value}")
        return default


class CommandResult(BaseModel):
    """一次外部指令的執行結果"""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def message(self) -> str:
        """失敗時的說明：優先 stderr，其次 stdout，最後是結束碼"""
        return (
            self.stderr.strip()
            or self.stdout.strip()
            or f"exited with status {self.returncode}"
        )


class SimctlDevice(BaseModel):
    udid: str
    state: str
    name: Optional[str] = None


class SimctlDeviceList(BaseModel):
    """`xcrun simctl list devices --json` 的輸出：runtime 名稱 → 設備列表"""

    devices: Dict[str, List[SimctlDevice]] = Field(default_factory=dict)


class DeviceListResponse(BaseModel):
    platform: Platform
    devices: List[str]
