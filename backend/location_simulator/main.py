import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from location_simulator.api.responses import validation_exception_handler
from location_simulator.api.v1.router import api_router
from location_simulator.core.config import API_PREFIX, CORS_ORIGINS
from location_simulator.core.lifespan import lifespan


def create_app() -> FastAPI:
    app = FastAPI(
        title="Location Simulator",
        description="將座標送到本機執行中的 iOS 模擬器與 Android 模擬器",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()


def run():
    uvicorn.run("location_simulator.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
