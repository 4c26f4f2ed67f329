from fastapi import APIRouter

api_router_v1 = APIRouter()


@api_router_v1.get("/health")
async def health_check():
    """服務存活檢查"""
    return {"status": "ok"}
