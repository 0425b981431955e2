"""Normalização de texto para comparação de nomes de produtos."""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def strip_accents(text: str) -> str:
    """Remove acentos e cedilha (decomposição NFD)."""
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def normalize(text: str) -> str:
    """
    Normaliza texto para comparação:
    - minúsculas, sem espaços nas pontas
    - sem acentos
    - singular para os plurais mais comuns em português
    """
    t = strip_accents(text.lower().strip())

    # Só uma regra de plural é aplicada
    if t.endswith("oes"):
        t = t[:-3] + "ao"
    elif t.endswith("aes"):
        t = t[:-3] + "ao"
    elif t.endswith("is") and len(t) > 3:
        t = t[:-2] + "l"
    elif t.endswith("es") and len(t) > 3:
        t = t[:-2]
    elif t.endswith("s") and len(t) > 2:
        t = t[:-1]

    return t
