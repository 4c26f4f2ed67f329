import json
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest

from location_simulator.domains.device.interfaces.command_runner_interface import (
    CommandRunnerInterface,
)
from location_simulator.domains.device.models.device_model import CommandResult

ADB_HEADER = "List of devices attached"


def adb_devices_output(*lines: str) -> str:
    return "\n".join([ADB_HEADER, *lines, "", ""])


def simctl_devices_output(devices: Dict[str, List[Tuple[str, str]]]) -> str:
    """runtime → [(udid, state)]"""
    return json.dumps(
        {
            "devices": {
                runtime: [
                    {"udid": udid, "state": state, "name": f"iPhone {udid}"}
                    for udid, state in entries
                ]
                for runtime, entries in devices.items()
            }
        }
    )


class FakeCommandRunner(CommandRunnerInterface):
    """
    記錄每次呼叫的指令，依 handler 回傳結果

    未提供 handler 時，清單指令回傳 listing，其餘指令回傳成功。
    handler 可拋出例外來模擬指令無法啟動。
    """

    def __init__(
        self,
        listing: str = "",
        handler: Optional[Callable[[Sequence[str]], CommandResult]] = None,
    ):
        self.listing = listing
        self.handler = handler
        self.calls: List[List[str]] = []
        self.timestamps: List[float] = []

    async def run(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        self.timestamps.append(time.monotonic())
        if self.handler is not None:
            return self.handler(args)
        if is_listing(args):
            return CommandResult(returncode=0, stdout=self.listing)
        return CommandResult(returncode=0)

    @property
    def dispatch_calls(self) -> List[List[str]]:
        return [call for call in self.calls if not is_listing(call)]


def is_listing(args: Sequence[str]) -> bool:
    return list(args[1:]) == ["devices"] or list(args[1:3]) == ["simctl", "list"]


@pytest.fixture
def android_runner():
    return FakeCommandRunner(
        listing=adb_devices_output("emulator-5554\tdevice", "emulator-5556\tdevice")
    )


@pytest.fixture
def ios_runner():
    return FakeCommandRunner(
        listing=simctl_devices_output(
            {"com.apple.CoreSimulator.SimRuntime.iOS-17-5": [("A1B2", "Booted")]}
        )
    )


GPX_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Route</name>
    <trkseg>
{points}
    </trkseg>
    <trkseg>
      <trkpt lat="0.0" lon="0.0"/>
    </trkseg>
  </trk>
  <trk>
    <trkseg>
      <trkpt lat="1.0" lon="1.0"/>
    </trkseg>
  </trk>
</gpx>
"""


def make_gpx(points: List[Tuple[str, str]]) -> bytes:
    body = "\n".join(
        f'      <trkpt lat="{lat}" lon="{lon}"><ele>2240.0</ele><name>{i}</name></trkpt>'
        for i, (lat, lon) in enumerate(points)
    )
    return GPX_TEMPLATE.format(points=body).encode("utf-8")
