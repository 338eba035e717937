__version__ = "0.1.0"

from .config import Settings
from .errors import AccessDenied, ConfigurationError
from .results import DirectoryEntry, EntryKind, Failure, OperationResult, Success
from .sandbox import PathGuard, validate_path
from .tools_fs import FileOps

__all__ = [
    "__version__",
    "Settings",
    "AccessDenied",
    "ConfigurationError",
    "DirectoryEntry",
    "EntryKind",
    "Failure",
    "OperationResult",
    "Success",
    "PathGuard",
    "validate_path",
    "FileOps",
]
