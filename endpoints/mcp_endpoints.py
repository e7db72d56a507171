from __future__ import annotations

import logging
from typing import Any, Literal

from typing_extensions import TypedDict

from mcp.server.fastmcp import FastMCP

from endpoints import commands
from persistence.errors import StorageError

logger = logging.getLogger(__name__)


class ToolTextContent(TypedDict):
    type: Literal["text"]
    text: str


class CommandToolResponse(TypedDict, total=False):
    content: list[ToolTextContent]
    structuredContent: dict[str, Any]


def _reply(message: str | None = None, **structured: Any) -> CommandToolResponse:
    return {
        "content": ([{"type": "text", "text": message}] if message else []),
        "structuredContent": structured,
    }


def _error_reply(exc: StorageError) -> CommandToolResponse:
    logger.info("MCP TOOL: %s failed for key=%s: %s", exc.kind, exc.key, exc.message)
    return _reply(exc.message, key=exc.key, error=exc.to_dict())


mcp = FastMCP(
    "Keyed Document Store",
    stateless_http=True,
    json_response=True,
)


@mcp.tool()
async def save_secure_data(key: str, value: Any) -> CommandToolResponse:
    """
    Saves a JSON document under `key`, replacing any previous document.
    """
    try:
        await commands.save_secure_data(key, value)
    except StorageError as e:
        return _error_reply(e)
    return _reply(f'Saved "{key}".', key=key)


@mcp.tool()
async def load_secure_data(key: str) -> CommandToolResponse:
    """
    Loads the JSON document stored under `key` (null if nothing was saved).
    """
    try:
        value = await commands.load_secure_data(key)
    except StorageError as e:
        return _error_reply(e)
    msg = f'Loaded "{key}".' if value is not None else f'No document stored under "{key}".'
    return _reply(msg, key=key, value=value)


@mcp.tool()
async def remove_secure_data(key: str) -> CommandToolResponse:
    """
    Removes the JSON document stored under `key`. Removing a missing key succeeds.
    """
    try:
        await commands.remove_secure_data(key)
    except StorageError as e:
        return _error_reply(e)
    return _reply(f'Removed "{key}".', key=key)


@mcp.tool()
async def get_env_var(name: str) -> CommandToolResponse:
    """
    Returns the value of an environment variable ("" when unset).
    """
    return _reply(None, name=name, value=commands.get_env_var(name))


@mcp.tool()
async def get_app_config() -> CommandToolResponse:
    """
    Returns the derived application configuration.
    """
    return _reply(None, config=commands.get_app_config().model_dump(mode="json"))
