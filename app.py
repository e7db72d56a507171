from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    from endpoints.mcp_endpoints import mcp

    async with mcp.session_manager.run():
        yield


def _prepare_data_dir() -> None:
    from endpoints.commands import app_data_dir
    from persistence.paths import ensure_dir

    data_dir = app_data_dir()
    if data_dir is None:
        logger.warning("APP DATA: no application data directory available; document commands will fail")
        return
    try:
        ensure_dir(data_dir)
    except OSError as e:
        logger.warning("APP DATA: failed to create %s: %r", data_dir, e)
        return
    logger.info("APP DATA: using %s", data_dir)


def create_app() -> FastAPI:
    load_dotenv("local.env")

    from endpoints.mcp_endpoints import mcp
    from endpoints.storage_endpoints import router as commands_router, storage_error_handler
    from logging_config import setup_logging
    from persistence.errors import StorageError
    from settings import get_settings

    setup_logging(get_settings())
    _prepare_data_dir()

    mcp.settings.streamable_http_path = "/"

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorageError, storage_error_handler)

    @app.post("/mcp")
    async def mcp_redirect_post():
        return RedirectResponse(url="/mcp/", status_code=307)

    @app.get("/mcp")
    async def mcp_redirect_get():
        return RedirectResponse(url="/mcp/", status_code=307)

    app.include_router(commands_router)

    app.mount("/mcp", mcp.streamable_http_app())

    return app


app = create_app()
