import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from file_access.errors import AccessDenied, describe_error  # noqa: E402


@pytest.mark.parametrize(
    "exc, expected",
    [
        (AccessDenied("../x"), "Access denied: Path ../x is outside allowed directory"),
        (FileNotFoundError(2, "No such file"), "No such file or directory"),
        (IsADirectoryError(21, "Is a directory"), "Is a directory"),
        (NotADirectoryError(20, "Not a directory"), "Not a directory"),
        (FileExistsError(17, "File exists"), "A file already exists where a directory is required"),
        (PermissionError(13, "Permission denied"), "Permission denied"),
        (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), "File is not valid UTF-8 text"),
        (OSError(5, "Input/output error"), "Input/output error"),
        (OSError("plain message"), "plain message"),
        (ValueError(), "ValueError"),
    ],
)
def test_describe_error(exc, expected) -> None:
    assert describe_error(exc) == expected
