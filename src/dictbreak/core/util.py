"""Small utility functions."""

import json
import sys
from typing import Any, TextIO, Optional


def safe_json(obj: Any) -> str:
    """Serialize results to JSON, handling numpy types and keeping non-ASCII text readable."""
    def serialize_item(item):
        if hasattr(item, 'item') and not isinstance(item, (str, bytes)):  # numpy scalar
            return item.item()
        elif hasattr(item, 'tolist'):  # numpy array
            return item.tolist()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items() if not k.startswith('_')}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"


class ConsoleLogger:
    """Logger protocol implementation that writes one line per event to stderr."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _write(self, level: str, msg: str, kv: dict) -> None:
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        line = f"{level}: {msg} {details}" if details else f"{level}: {msg}"
        print(line, file=self.stream or sys.stderr)

    def info(self, msg: str, **kv):
        self._write("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._write("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._write("ERROR", msg, kv)
