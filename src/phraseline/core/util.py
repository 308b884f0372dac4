"""Small utility functions."""

import hashlib
import json
import sys
from typing import Any, Mapping

def hash_table(table: Mapping[str, Mapping[str, int]]) -> str:
    """Create a stable hash of weight table content, independent of key order."""
    canonical = json.dumps(
        {group: dict(ngrams) for group, ngrams in table.items()},
        sort_keys=True, ensure_ascii=False, separators=(",", ":"),
    )
    return hashlib.sha256(canonical.encode('utf-8')).hexdigest()[:16]

def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling numpy types and read-only mappings."""
    def serialize_item(item):
        if hasattr(item, 'item'):  # numpy scalar
            return item.item()
        elif hasattr(item, 'tolist'):  # numpy array
            return item.tolist()
        elif isinstance(item, Mapping):
            return {k: serialize_item(v) for k, v in item.items()}
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"

class ConsoleLogger:
    """Logger that writes `LEVEL: msg k=v` lines to a stream (stderr by default)."""

    def __init__(self, stream=None):
        self.stream = stream

    def _write(self, level: str, msg: str, kv: dict):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        line = f"{level}: {msg} {details}" if details else f"{level}: {msg}"
        print(line, file=self.stream or sys.stderr)

    def info(self, msg: str, **kv):
        self._write("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._write("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._write("ERROR", msg, kv)
