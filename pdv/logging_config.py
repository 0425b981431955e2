from __future__ import annotations

import json
import logging
import sys
from typing import Any

from pdv.settings import settings

# Campos passados via `extra=` pelas rotas e pelo parser
EXTRA_KEYS = ("trace_id", "lines", "items", "notes", "catalog_size", "phone", "status_code")


def _json_default(obj: Any) -> str:
    try:
        return str(obj)
    except Exception:
        return "<unserializable>"


class JsonFormatter(logging.Formatter):
    """Uma linha JSON por registro, com app/env para separar as instâncias."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "app": settings.app_name,
            "env": settings.env,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        payload.update({key: getattr(record, key) for key in EXTRA_KEYS if hasattr(record, key)})
        # acentos das mensagens de WhatsApp ficam legíveis no log
        return json.dumps(payload, default=_json_default, ensure_ascii=False)


def init_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers = [handler]
