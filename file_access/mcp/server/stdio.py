from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any

from ...results import to_tool_content
from .base import ToolRegistry, UnknownToolError

logger = logging.getLogger(__name__)

_DEFAULT_PROTOCOL_VERSION = "2024-11-05"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def _error(request_id: Any, code: int, message: str) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "error": {"code": code, "message": message}}


def _result(request_id: Any, result: dict) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


class StdioMCPServer:
    """
    Minimal MCP server speaking line-delimited JSON-RPC 2.0 over stdin/stdout.

    Only the tools capability is offered. Messages are handled strictly one at
    a time, in the order they arrive.
    """

    def __init__(self, name: str, version: str, registry: ToolRegistry) -> None:
        self.name = name
        self.version = version
        self.registry = registry

    def handle_message(self, message: Any) -> dict | None:
        if not isinstance(message, dict) or message.get("jsonrpc") != "2.0":
            return _error(None, INVALID_REQUEST, "Invalid JSON-RPC request")

        method = message.get("method")
        request_id = message.get("id")
        is_notification = "id" not in message

        if not isinstance(method, str):
            if is_notification:
                return None
            return _error(request_id, INVALID_REQUEST, "Missing method")

        if is_notification:
            # notifications/initialized, notifications/cancelled, ...
            logger.debug("Notification received: %s", method)
            return None

        params = message.get("params") or {}
        if not isinstance(params, dict):
            return _error(request_id, INVALID_PARAMS, "params must be an object")

        if method == "initialize":
            return _result(request_id, self._initialize(params))
        if method == "ping":
            return _result(request_id, {})
        if method == "tools/list":
            return _result(request_id, {"tools": self.registry.list_tools()})
        if method == "tools/call":
            return self._call_tool(request_id, params)

        return _error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    def _initialize(self, params: dict) -> dict:
        protocol_version = params.get("protocolVersion") or _DEFAULT_PROTOCOL_VERSION
        client = params.get("clientInfo") or {}
        logger.info("Client connected: %s (protocol %s)", client.get("name", "unknown"), protocol_version)
        return {
            "protocolVersion": protocol_version,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": self.name, "version": self.version},
        }

    def _call_tool(self, request_id: Any, params: dict) -> dict:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            return _error(request_id, INVALID_PARAMS, "Missing tool name")
        try:
            result = self.registry.call(name, params.get("arguments"))
        except UnknownToolError as exc:
            return _error(request_id, INVALID_PARAMS, str(exc))
        return _result(request_id, to_tool_content(result))

    def handle_line(self, line: str) -> dict | None:
        line = line.strip()
        if not line:
            return None
        try:
            message = json.loads(line)
        except json.JSONDecodeError as exc:
            return _error(None, PARSE_ERROR, f"Parse error: {exc.msg}")
        try:
            return self.handle_message(message)
        except Exception:
            logger.exception("Unhandled error while processing request")
            request_id = message.get("id") if isinstance(message, dict) else None
            return _error(request_id, INTERNAL_ERROR, "Internal error")

    def serve(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        if stdin is None:
            stdin = sys.stdin
        if stdout is None:
            stdout = sys.stdout
        logger.info("%s running on stdio", self.name)
        for line in stdin:
            response = self.handle_line(line)
            if response is None:
                continue
            stdout.write(json.dumps(response) + "\n")
            stdout.flush()
        logger.info("stdin closed, shutting down")
