"""JSON rendering for command-line output."""

import json
from dataclasses import asdict, is_dataclass
from typing import Any

def _encode_result(obj: Any) -> Any:
    # Only result dataclasses (LiteralCheck, Span) need help; lists and dicts encode natively.
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"{type(obj).__name__} is not JSON serializable")

def to_json(obj: Any) -> str:
    """Render segments, offsets or literal checks as indented JSON."""
    return json.dumps(obj, default=_encode_result, indent=2, ensure_ascii=False)
