import logging
import os
from typing import List, Optional

# --- Service ---
API_PREFIX = os.getenv("API_PREFIX", "/api")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# --- Simulation ---
SIMULATION_DELAY_MS = int(os.getenv("SIMULATION_DELAY_MS", "1500"))  # 每個座標之間的停頓
DEFAULT_PLATFORM = "android"  # 未指定或無法辨識的平台一律使用 Android

# --- External tools ---
XCRUN_PATH = os.getenv("XCRUN_PATH", "xcrun")
ADB_PATH = os.getenv("ADB_PATH", "adb")

_timeout = os.getenv("COMMAND_TIMEOUT_SECONDS")
COMMAND_TIMEOUT_SECONDS: Optional[float] = float(_timeout) if _timeout else None

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging():
    """設定根 logger，重複呼叫不會新增 handler"""
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("location_simulator").setLevel(level)
