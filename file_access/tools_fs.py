from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from .errors import AccessDenied, describe_error
from .results import DirectoryEntry, EntryKind, Failure, OperationResult, Success
from .sandbox import PathGuard

logger = logging.getLogger(__name__)


class ReadFileArgs(BaseModel):
    path: str = Field(description="Path to the file to read")


class WriteFileArgs(BaseModel):
    path: str = Field(description="Path to the file to write")
    content: str = Field(description="Content to write to the file")


class ListFilesArgs(BaseModel):
    path: str | None = Field(default=None, description="Path to list (defaults to allowed directory)")


class FileOps:
    def __init__(self, guard: PathGuard, *, diagnostics: bool = False) -> None:
        self.guard = guard
        self.diagnostics = diagnostics

    def _failure(self, action: str, path: str, exc: BaseException) -> Failure:
        if isinstance(exc, AccessDenied):
            logger.warning("Rejected %s outside allowed directory: %r", action, path)
        else:
            logger.info("%s %r failed: %s", action, path, exc)
        return Failure(f"Error {action} {path}: {describe_error(exc)}")

    def read_file(self, path: str) -> OperationResult:
        try:
            target = self.guard.validate(path)
            with open(target, "r", encoding="utf-8", newline="") as fh:
                content = fh.read()
        except (OSError, UnicodeError) as exc:
            return self._failure("reading file", path, exc)

        logger.debug("Read %d characters from %s", len(content), target)
        return Success(f"File: {path}\n\n{content}")

    def write_file(self, path: str, content: str) -> OperationResult:
        try:
            target = self.guard.validate(path)
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except (OSError, UnicodeError) as exc:
            return self._failure("writing file", path, exc)

        logger.debug("Wrote %d characters to %s", len(content), target)
        return Success(f"Successfully wrote to file: {path}")

    def list_files(self, path: str | None = None) -> OperationResult:
        if path is None:
            path = "."

        target = None
        try:
            target = self.guard.validate(path)
            with os.scandir(target) as it:
                entries = tuple(
                    DirectoryEntry(
                        name=entry.name,
                        kind=EntryKind.DIRECTORY if entry.is_dir(follow_symlinks=False) else EntryKind.FILE,
                    )
                    for entry in it
                )
        except (OSError, UnicodeError) as exc:
            failure = self._failure("listing directory", path, exc)
            if self.diagnostics:
                return Failure(f"{self._diagnostic_info(path, target)}\n\n{failure.message}")
            return failure

        listing = "\n".join(entry.render() for entry in entries) or "(empty)"
        text = f"Contents of {path}:\n\n{listing}"
        if self.diagnostics:
            text = f"{self._diagnostic_info(path, target)}\n\n{text}"
        return Success(text, entries=entries)

    def _diagnostic_info(self, path: str, resolved: Path | None) -> str:
        lines = [
            "Debug info:",
            f"- ALLOWED_DIRECTORY: {self.guard.root}",
            f"- Requested path: {path}",
        ]
        if resolved is not None:
            lines.append(f"- Resolved path: {resolved}")
        lines.append(f"- Working directory: {os.getcwd()}")
        return "\n".join(lines)
