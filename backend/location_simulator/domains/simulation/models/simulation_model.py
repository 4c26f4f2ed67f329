from pydantic import BaseModel, Field


class SimulationResult(BaseModel):
    total: int = Field(..., description="已處理的座標數量")
