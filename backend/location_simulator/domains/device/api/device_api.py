import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from location_simulator.api.dependencies import get_simulation_service
from location_simulator.api.responses import ErrorResponse, error_response
from location_simulator.core.exceptions import LocationSimulatorError
from location_simulator.domains.device.models.device_model import (
    DeviceListResponse,
    Platform,
)
from location_simulator.domains.simulation.interfaces.simulation_service_interface import (
    SimulationServiceInterface,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=DeviceListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_devices(
    platform: Optional[str] = Query(None, description="ios 或 android，預設 android"),
    simulation_service: SimulationServiceInterface = Depends(get_simulation_service),
):
    """列出模擬執行時會收到位置的設備"""
    resolved = Platform.resolve(platform)
    try:
        devices = await simulation_service.list_devices(resolved.value)
    except LocationSimulatorError as e:
        logger.warning(f"Device listing failed: {e}")
        return error_response(str(e))

    return DeviceListResponse(platform=resolved, devices=devices)
