import logging
import shutil
from contextlib import asynccontextmanager
from fastapi import FastAPI

from location_simulator.core.config import (
    ADB_PATH,
    SIMULATION_DELAY_MS,
    XCRUN_PATH,
    configure_logging,
)

logger = logging.getLogger(__name__)


def check_external_tools():
    """檢查 xcrun / adb 是否可執行，找不到只警告，對應平台的請求會在執行時失敗"""
    for name, path in (("xcrun", XCRUN_PATH), ("adb", ADB_PATH)):
        resolved = shutil.which(path)
        if resolved:
            logger.info(f"{name} found at {resolved}")
        else:
            logger.warning(
                f"{name} ({path}) was not found on PATH; requests for that platform will fail"
            )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Context manager for FastAPI startup and shutdown logic."""
    configure_logging()
    logger.info("Application startup sequence initiated...")

    check_external_tools()
    logger.info(f"Default delay between coordinates: {SIMULATION_DELAY_MS} ms")

    logger.info("Application startup complete.")

    yield

    logger.info("Application shutdown complete.")
