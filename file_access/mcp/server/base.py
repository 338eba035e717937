from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from ...results import Failure, OperationResult

logger = logging.getLogger(__name__)


class UnknownToolError(LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    args_model: type[BaseModel]
    handler: Callable[..., OperationResult]

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.args_model.model_json_schema(),
        }


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def add_tool(
        self,
        name: str,
        description: str,
        args_model: type[BaseModel],
        handler: Callable[..., OperationResult],
    ) -> None:
        self._tools[name] = Tool(name=name, description=description, args_model=args_model, handler=handler)

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def list_tools(self) -> list[dict[str, Any]]:
        return [tool.describe() for tool in self._tools.values()]

    def call(self, name: str, args: Any) -> OperationResult:
        tool = self.get(name)
        if args is None:
            args = {}
        try:
            parsed = tool.args_model.model_validate(args)
        except ValidationError as exc:
            logger.info("Invalid arguments for %s: %s", name, exc)
            return Failure(f"Invalid arguments for {name}: {_format_validation_error(exc)}")
        return tool.handler(**parsed.model_dump())
