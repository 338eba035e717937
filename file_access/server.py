from __future__ import annotations

from fastapi import FastAPI

from . import __version__
from .config import Settings
from .mcp.server.base import ToolRegistry
from .mcp.server.fastapi import MCPServer
from .mcp.server.stdio import StdioMCPServer
from .sandbox import PathGuard
from .tools_fs import FileOps, ListFilesArgs, ReadFileArgs, WriteFileArgs

SERVER_NAME = "file-access-server"


def build_file_ops(settings: Settings) -> FileOps:
    guard = PathGuard(settings.allowed_directory, resolve_symlinks=settings.resolve_symlinks)
    return FileOps(guard, diagnostics=settings.diagnostics)


def build_registry(ops: FileOps) -> ToolRegistry:
    registry = ToolRegistry()
    registry.add_tool(
        name="read_file",
        description="Read the contents of a file",
        args_model=ReadFileArgs,
        handler=ops.read_file,
    )
    registry.add_tool(
        name="write_file",
        description="Write content to a file, creating it if it doesn't exist",
        args_model=WriteFileArgs,
        handler=ops.write_file,
    )
    registry.add_tool(
        name="list_files",
        description="List files and directories in a given path",
        args_model=ListFilesArgs,
        handler=ops.list_files,
    )
    return registry


def create_stdio_server(settings: Settings) -> StdioMCPServer:
    return StdioMCPServer(SERVER_NAME, __version__, build_registry(build_file_ops(settings)))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    server = MCPServer(
        name=SERVER_NAME,
        registry=build_registry(build_file_ops(settings)),
        description="File tools confined to a single allowed directory",
    )
    return server.app
