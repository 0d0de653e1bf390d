from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tubeinfo import log
from tubeinfo.config import Config
from tubeinfo.services.youtube import YouTubeService
from tubeinfo.utils import utils

from .routes import router


def create_app(config: Config | None = None) -> FastAPI:
    config = config or Config.load()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        utils.module_log("api", "green", f"serving channel lookups, debug={config.server.debug}")
        yield

    app = FastAPI(title="tubeinfo", version="0.1.0", lifespan=lifespan)
    app.state.config = config
    app.state.client_factory = lambda: YouTubeService(config.youtube)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.exception_handler(Exception)
    async def exception_handler(request: Request, exc: Exception):
        if config.server.debug:
            log.error(f"[API Error] {request.url} - {exc!r}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "error": True,
                "message": "An unexpected error occurred. Please try again later.",
            },
        )

    return app


app = create_app()


def run(host: str | None = None, port: int | None = None):
    server = app.state.config.server
    uvicorn.run(
        "tubeinfo.api.api:app",
        host=host or server.host,
        port=port or server.port,
        reload=server.debug,
    )
