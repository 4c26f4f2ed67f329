from fastapi import Depends

from location_simulator.core.config import COMMAND_TIMEOUT_SECONDS, SIMULATION_DELAY_MS
from location_simulator.domains.coordinates.interfaces.coordinate_service_interface import (
    CoordinateServiceInterface,
)
from location_simulator.domains.coordinates.services.coordinate_service import (
    CoordinateService,
)
from location_simulator.domains.device.interfaces.command_runner_interface import (
    CommandRunnerInterface,
)
from location_simulator.domains.device.services.command_runner import (
    SubprocessCommandRunner,
)
from location_simulator.domains.simulation.interfaces.simulation_service_interface import (
    SimulationServiceInterface,
)
from location_simulator.domains.simulation.services.simulation_service import (
    SimulationService,
)


def get_command_runner() -> CommandRunnerInterface:
    return SubprocessCommandRunner(timeout=COMMAND_TIMEOUT_SECONDS)


def get_coordinate_service() -> CoordinateServiceInterface:
    return CoordinateService()


def get_simulation_service(
    runner: CommandRunnerInterface = Depends(get_command_runner),
) -> SimulationServiceInterface:
    return SimulationService(runner, delay_ms=SIMULATION_DELAY_MS)
