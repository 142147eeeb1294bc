"""Adapter exposing a standard library logger through the Logger protocol."""

import logging
from typing import Any, Optional

class StdlibLogger:
    """Forward structured log calls to a ``logging.Logger``, rendering kv pairs."""
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("textscan")

    @staticmethod
    def _render(msg: str, kv: dict) -> str:
        details = " ".join(f"{k}={v!r}" for k, v in kv.items())
        return f"{msg} {details}" if details else msg

    def info(self, msg: str, **kv: Any) -> None:
        self.logger.info(self._render(msg, kv))

    def warn(self, msg: str, **kv: Any) -> None:
        self.logger.warning(self._render(msg, kv))

    def error(self, msg: str, **kv: Any) -> None:
        self.logger.error(self._render(msg, kv))
