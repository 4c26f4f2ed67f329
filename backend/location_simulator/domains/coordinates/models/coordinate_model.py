from pydantic import BaseModel, Field, field_validator


class Coordinate(BaseModel):
    """
    經緯度座標 (十進位度數)

    保留為文字而非數值：下游的 simctl / adb 指令直接使用文字，
    此層不做任何運算，也不檢查數值範圍。
    """

    latitude: str = Field(..., description="緯度")
    longitude: str = Field(..., description="經度")

    @field_validator("latitude", "longitude")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("coordinate component must not be empty")
        return value

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"
