import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from starlette.datastructures import FormData

from location_simulator.api.dependencies import (
    get_coordinate_service,
    get_simulation_service,
)
from location_simulator.api.responses import ErrorResponse, error_response
from location_simulator.core.exceptions import (
    CoordinateParseError,
    LocationSimulatorError,
    NoCoordinatesError,
)
from location_simulator.domains.coordinates.interfaces.coordinate_service_interface import (
    CoordinateServiceInterface,
)
from location_simulator.domains.simulation.interfaces.simulation_service_interface import (
    SimulationServiceInterface,
)
from location_simulator.domains.simulation.models.simulation_model import (
    SimulationResult,
)

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error while simulating locations"

router = APIRouter()


def text_field(form: FormData, name: str) -> Optional[str]:
    """
    取出表單中的文字欄位，保留空字串

    欄位是否存在決定使用哪一種輸入，因此不能讓空字串變成 None
    """
    if name not in form:
        return None
    value = form[name]
    if not isinstance(value, str):
        raise CoordinateParseError(f"Form field '{name}' must be text, not a file")
    return value


@router.post(
    "",
    response_model=SimulationResult,
    responses={500: {"model": ErrorResponse}},
)
async def simulate_locations(
    request: Request,
    platform: Optional[str] = Form(None),
    gpx: Optional[UploadFile] = File(None),
    coordinate_service: CoordinateServiceInterface = Depends(get_coordinate_service),
    simulation_service: SimulationServiceInterface = Depends(get_simulation_service),
):
    """
    將座標依序送到指定平台的所有模擬器

    表單需包含 manual、batch、gpx 其中之一 (依此順序只處理第一個存在的欄位)；
    platform 不分大小寫，未提供時使用 android。整個模擬跑完後才回應。
    """
    try:
        form = await request.form()
        coordinates = await coordinate_service.extract_coordinates(
            manual=text_field(form, "manual"),
            batch=text_field(form, "batch"),
            gpx=gpx,
        )
        if not coordinates:
            raise NoCoordinatesError()

        total = await simulation_service.simulate_locations(platform, coordinates)
    except LocationSimulatorError as e:
        logger.warning(f"Simulation failed: {e}")
        return error_response(str(e))
    except Exception:
        logger.exception("Unexpected error while simulating locations")
        return error_response(UNKNOWN_ERROR_MESSAGE)

    return SimulationResult(total=total)
