from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


class StructuredLogger:
    def __init__(self, stream: TextIO | None = None, *, component: str = "job-tracker") -> None:
        self._stream = stream
        self._component = component

    def info(self, message: str, **fields: Any) -> None:
        self._emit("info", message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit("warning", message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit("error", message, fields)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "component": self._component,
            "message": message,
            "fields": fields,
        }
        # stdout is looked up per call so redirected streams are honoured.
        stream = self._stream or sys.stdout
        print(json.dumps(payload, sort_keys=True, default=str), file=stream, flush=True)
