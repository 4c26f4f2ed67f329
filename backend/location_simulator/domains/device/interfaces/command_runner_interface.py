from abc import ABC, abstractmethod
from typing import Sequence

from location_simulator.domains.device.models.device_model import CommandResult


class CommandRunnerInterface(ABC):
    """外部指令執行介面，測試時可替換為假的實作"""

    @abstractmethod
    async def run(self, args: Sequence[str]) -> CommandResult:
        """
        執行指令並擷取 stdout / stderr / 結束碼

        非零結束碼以 CommandResult 回傳；指令無法啟動時拋出 CommandExecutionError
        """
        pass
