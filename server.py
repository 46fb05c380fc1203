"""
Qwen MCP Server - Main server implementation

This module implements the MCP (Model Context Protocol) server that exposes
the Qwen chat API to agent hosts. It registers three tools:

- qwen_chat: chat with text plus optional video/image/document URLs
- qwen_list_models: list the models the upstream API advertises
- qwen_upload_and_chat: push a local video or image to temporary hosting
  and chat about it

The server communicates over stdio, so all logging goes to stderr (and an
optional rotating log file) to keep stdout reserved for protocol traffic.
"""

import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import ServerCapabilities, TextContent, Tool, ToolAnnotations, ToolsCapability

from config import LOG_LEVEL, SERVER_NAME, __version__
from tools import ChatTool, ListModelsTool, UploadAndChatTool
from utils.env import get_env_bool


class LocalTimeFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        """Override to use local timezone instead of UTC"""
        import time

        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            t = time.strftime("%Y-%m-%d %H:%M:%S", ct)
            s = f"{t},{record.msecs:03.0f}"
        return s


def configure_logging() -> None:
    """Send logs to stderr and, unless disabled, to logs/mcp_server.log."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(LocalTimeFormatter(log_format))
    root_logger.addHandler(stderr_handler)

    if get_env_bool("QWEN_MCP_LOG_TO_FILE", True):
        try:
            log_dir = Path(__file__).resolve().parent / "logs"
            log_dir.mkdir(exist_ok=True)
            file_handler = RotatingFileHandler(
                log_dir / "mcp_server.log",
                maxBytes=20 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(LocalTimeFormatter(log_format))
            root_logger.addHandler(file_handler)
        except OSError as exc:
            root_logger.warning("File logging disabled: %s", exc)

    # httpx logs every request at INFO, including upload URLs
    logging.getLogger("httpx").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

server: Server = Server(SERVER_NAME)

TOOLS = {
    "qwen_chat": ChatTool(),
    "qwen_list_models": ListModelsTool(),
    "qwen_upload_and_chat": UploadAndChatTool(),
}


@server.list_tools()
async def handle_list_tools() -> list[Tool]:
    """List all available tools with their descriptions and input schemas."""
    tools = []
    for tool in TOOLS.values():
        annotations = tool.get_annotations()
        tools.append(
            Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.get_input_schema(),
                annotations=ToolAnnotations(**annotations) if annotations else None,
            )
        )
    logger.debug("Returning %d tools to MCP client", len(tools))
    return tools


@server.call_tool()
async def handle_call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Dispatch a tool call; tools report their own failures as text."""
    logger.info("MCP tool call: %s", name)

    tool = TOOLS.get(name)
    if tool is None:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    result = await tool.execute(arguments or {})
    logger.info("Tool '%s' execution completed", name)
    return result


async def main() -> None:
    configure_logging()

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Qwen API MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=SERVER_NAME,
                server_version=__version__,
                capabilities=ServerCapabilities(tools=ToolsCapability()),
            ),
        )


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    run()
