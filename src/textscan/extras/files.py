"""File-backed line counting."""

from pathlib import Path
from typing import Union
from ..core.errors import TextscanError
from ..engine.wrapper import count_lines

class FileLinesError(TextscanError, FileNotFoundError):
    """Raised when the file to count lines of does not exist."""
    pass

class FileReadError(TextscanError):
    """Raised when the file exists but cannot be read as UTF-8 text."""
    pass

def count_file_lines(path: Union[str, Path]) -> int:
    """
    Count the newline characters in a UTF-8 text file.
    
    Raises:
        FileLinesError: If the file does not exist
        FileReadError: If the file is unreadable or not valid UTF-8
    """
    path = Path(path)
    if not path.is_file():
        raise FileLinesError(f"Error, could not find file: {path}")
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return count_lines(f.read())
    except UnicodeDecodeError as e:
        raise FileReadError(f"File {path} is not valid UTF-8: {e}")
    except OSError as e:
        raise FileReadError(f"Cannot read file {path}: {e}")
