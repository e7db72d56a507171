from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, JsonValue

from endpoints import commands
from persistence.errors import StorageError
from settings import get_settings

router = APIRouter(prefix="/commands", tags=["commands"])
logger = logging.getLogger(__name__)

# Anything not listed maps to 500.
STATUS_BY_KIND = {
    "serialization_error": 400,
    "directory_unavailable": 503,
}


class KeyRequest(BaseModel):
    key: str


class SaveRequest(KeyRequest):
    value: JsonValue


class EnvVarRequest(BaseModel):
    name: str


def _log_command(command: str, **fields: Any) -> None:
    if get_settings().debug_log_requests:
        logger.info("COMMAND %s %s", command, fields)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    status = STATUS_BY_KIND.get(exc.kind, 500)
    logger.info("COMMAND %s failed: %s (%s)", request.url.path, exc.kind, exc.message)
    return JSONResponse(exc.to_dict(), status_code=status)


# -------------------------------------------------------------------
# SECURE DATA (keyed JSON documents)
# -------------------------------------------------------------------
@router.post("/save_secure_data")
async def save_secure_data(body: SaveRequest) -> None:
    _log_command("save_secure_data", key=body.key)
    await commands.save_secure_data(body.key, body.value)


@router.post("/load_secure_data")
async def load_secure_data(body: KeyRequest) -> JSONResponse:
    _log_command("load_secure_data", key=body.key)
    return JSONResponse(await commands.load_secure_data(body.key))


@router.post("/remove_secure_data")
async def remove_secure_data(body: KeyRequest) -> None:
    _log_command("remove_secure_data", key=body.key)
    await commands.remove_secure_data(body.key)


# -------------------------------------------------------------------
# ENVIRONMENT / CONFIG
# -------------------------------------------------------------------
@router.post("/get_env_var")
async def get_env_var(body: EnvVarRequest) -> str:
    _log_command("get_env_var", name=body.name)
    return commands.get_env_var(body.name)


@router.post("/get_app_config")
async def get_app_config() -> dict[str, Any]:
    _log_command("get_app_config")
    return commands.get_app_config().model_dump(mode="json")
