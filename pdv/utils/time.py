from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo


def parse_datetime(value: str | datetime | None) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    # "Z" só é aceito por fromisoformat a partir do Python 3.11
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_hora(dt: datetime, tz: str = "America/Sao_Paulo") -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    local = dt.astimezone(ZoneInfo(tz))
    return f"{local:%H:%M}"
