from __future__ import annotations


class ConfigurationError(RuntimeError):
    pass


class AccessDenied(PermissionError):
    """Raised when a requested path resolves outside the allowed directory."""

    def __init__(self, candidate: object) -> None:
        self.candidate = candidate
        super().__init__(f"Access denied: Path {candidate} is outside allowed directory")

    def __str__(self) -> str:
        return self.args[0]


def describe_error(exc: BaseException) -> str:
    if isinstance(exc, AccessDenied):
        return str(exc)
    if isinstance(exc, UnicodeDecodeError):
        return "File is not valid UTF-8 text"
    if isinstance(exc, FileNotFoundError):
        return "No such file or directory"
    if isinstance(exc, IsADirectoryError):
        return "Is a directory"
    if isinstance(exc, NotADirectoryError):
        return "Not a directory"
    if isinstance(exc, FileExistsError):
        return "A file already exists where a directory is required"
    if isinstance(exc, PermissionError):
        return "Permission denied"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__
