"""Protocol interfaces for collaborators injected by the host program."""

from typing import Protocol, Any

class Logger(Protocol):
    """Optional structured logging interface."""
    
    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...
        
    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...
        
    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class CharClassifier(Protocol):
    """Answers character-class questions for one locale configuration."""

    def is_whitespace(self, ch: str) -> bool:
        """True if ``ch`` is whitespace in this locale."""
        ...

    def is_digit(self, ch: str) -> bool:
        """True if ``ch`` is a decimal digit."""
        ...

    def whitespace_string(self) -> str:
        """All whitespace characters, ordered by code point."""
        ...
