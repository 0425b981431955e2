from __future__ import annotations

import re


def clean_phone_number(raw: str | None) -> str:
    if not raw:
        return ""
    return re.sub(r"\D+", "", str(raw))


def normalize_phone(raw: str | None) -> str:
    cleaned = clean_phone_number(raw).lstrip("0")
    if cleaned and not cleaned.startswith("55"):
        cleaned = "55" + cleaned
    return cleaned
