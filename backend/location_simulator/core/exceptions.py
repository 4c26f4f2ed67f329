"""
應用程序錯誤分類

所有致命錯誤都在請求邊界被捕獲一次，並以 JSON 錯誤訊息回傳。
單一設備的指令失敗不屬於此處，由設備驅動自行記錄並略過。
"""


class LocationSimulatorError(Exception):
    """所有可預期錯誤的基底類別"""


class CoordinateInputError(LocationSimulatorError):
    """輸入內容無法轉換為座標序列"""


class NoCoordinatesError(CoordinateInputError):
    def __init__(self, message: str = "No coordinates were provided"):
        super().__init__(message)


class CoordinateParseError(CoordinateInputError):
    """手動 / 批次文字或 GPX 內容格式錯誤"""


class CoordinateReadError(CoordinateInputError):
    """上傳的 GPX 檔案無法讀取"""


class DeviceDiscoveryError(LocationSimulatorError):
    """設備列舉指令本身失敗（無法執行、非零結束碼、輸出無法解析）"""


class NoActiveDevicesError(LocationSimulatorError):
    """列舉成功，但沒有任何可用設備"""


class CommandExecutionError(LocationSimulatorError):
    """外部指令無法啟動或執行逾時"""
