from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException

from .base import ToolRegistry, UnknownToolError

logger = logging.getLogger(__name__)


class MCPServer:
    def __init__(self, name: str, registry: ToolRegistry, description: str | None = None):
        self.name = name
        self.description = description or "MCP Server"
        self.registry = registry
        self.app = FastAPI(title=self.name, description=self.description)

        @self.app.get("/tools")
        async def list_tools():
            return {"tools": self.registry.list_tools()}

        # Declared async so tool calls run one at a time on the event loop.
        @self.app.post("/tools")
        async def run_tool(payload: dict[str, Any]):
            tool = payload.get("tool")
            args = payload.get("args", {})

            if not tool or not isinstance(tool, str):
                raise HTTPException(status_code=400, detail="Missing 'tool' in request")

            try:
                result = self.registry.call(tool, args)
            except UnknownToolError as exc:
                raise HTTPException(status_code=404, detail=str(exc)) from exc
            except Exception:
                logger.exception("Unhandled error while running tool %s", tool)
                return {"result": f"Internal error while running tool {tool}", "isError": True}

            # Lone surrogates from JSON input cannot be encoded as UTF-8 in the response body.
            text = result.text.encode("utf-8", "backslashreplace").decode("utf-8")
            return {"result": text, "isError": result.is_error}
