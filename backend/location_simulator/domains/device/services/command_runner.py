import asyncio
import logging
from typing import Optional, Sequence

from location_simulator.core.exceptions import CommandExecutionError
from location_simulator.domains.device.interfaces.command_runner_interface import (
    CommandRunnerInterface,
)
from location_simulator.domains.device.models.device_model import CommandResult

logger = logging.getLogger(__name__)


class SubprocessCommandRunner(CommandRunnerInterface):
    """以 asyncio 子行程執行外部指令 (不經過 shell)"""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    async def run(self, args: Sequence[str]) -> CommandResult:
        command = " ".join(args)
        logger.debug(f"Running: {command}")

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise CommandExecutionError(f"Could not start '{args[0]}': {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            try:
                process.kill()
            except ProcessLookupError:
                pass  # 已自行結束
            await process.wait()
            raise CommandExecutionError(
                f"'{command}' timed out after {self.timeout} seconds"
            ) from e

        return CommandResult(
            returncode=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
