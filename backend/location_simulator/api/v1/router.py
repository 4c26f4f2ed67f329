# backend/location_simulator/api/v1/router.py

from fastapi import APIRouter
from .api import api_router_v1

# 導入領域特定的 API 路由器
from location_simulator.domains.device.api.device_api import router as device_router
from location_simulator.domains.simulation.api.simulation_api import router as simulation_router

# 創建主要的 API 路由器
api_router = APIRouter()

# 包含子路由器
api_router.include_router(api_router_v1, tags=["API v1"])

# 包含領域特定的路由器
api_router.include_router(device_router, prefix="/devices", tags=["Devices"])
api_router.include_router(simulation_router, prefix="/simulate", tags=["Simulations"])
