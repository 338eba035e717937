from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: EntryKind

    def render(self) -> str:
        return f"[{self.kind.value}] {self.name}"


@dataclass(frozen=True)
class Success:
    text: str
    entries: tuple[DirectoryEntry, ...] = ()

    is_error: ClassVar[bool] = False


@dataclass(frozen=True)
class Failure:
    message: str

    is_error: ClassVar[bool] = True

    @property
    def text(self) -> str:
        return self.message


OperationResult = Union[Success, Failure]


def to_tool_content(result: OperationResult) -> dict[str, Any]:
    # MCP tools/call result shape.
    return {
        "content": [{"type": "text", "text": result.text}],
        "isError": result.is_error,
    }
