"""Classificadores de linha: nome do cliente, horário e item do pedido."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, List, Optional, Pattern, Sequence, Tuple
from zoneinfo import ZoneInfo

from pdv.services.whatsapp_parser.matcher import find_best_match
from pdv.services.whatsapp_parser.models import CatalogProduct, ParsedOrderItem, ParsedProduct
from pdv.settings import settings

_NAME = r"([a-záéíóúãõâêîôûç]+)"

# Frases de apresentação, na ordem em que são testadas
CLIENT_PATTERNS: List[Pattern[str]] = [
    re.compile(r"(?:sou\s+(?:a|o)\s+)" + _NAME, re.IGNORECASE),
    re.compile(r"(?:aqui\s+(?:é|e)\s+(?:a|o)?\s*)" + _NAME, re.IGNORECASE),
    re.compile(r"(?:meu\s+nome\s+(?:é|e)\s*)" + _NAME, re.IGNORECASE),
    re.compile(r"(?:oi|olá|ola),?\s+(?:sou\s+)?(?:a|o)?\s*" + _NAME, re.IGNORECASE),
]

EXCLUDED_NAMES = {"quero", "gostaria", "preciso", "oi", "ola", "bom", "boa", "queria"}

# 11:30, 14h, 9h30, 10:00 hs, 15 horas, às 12:00
TIME_PATTERNS: List[Pattern[str]] = [
    re.compile(r"(\d{1,2})[h:]\s?(\d{0,2})\b", re.IGNORECASE),
    re.compile(r"(\d{1,2})(?::(\d{2}))?\s*(hs?|horas?)", re.IGNORECASE),
    re.compile(r"(?:às|as)\s*(\d{1,2})[h:]?\s?(\d{0,2})", re.IGNORECASE),
]

WORD_TO_NUMBER = {
    "meia": 0.5,
    "metade": 0.5,
    "meio": 0.5,
    "um": 1,
    "uma": 1,
    "dois": 2,
    "duas": 2,
    "tres": 3,
    "três": 3,
    "quatro": 4,
    "cinco": 5,
    "seis": 6,
    "sete": 7,
    "oito": 8,
    "nove": 9,
    "dez": 10,
}

# "dois frangos", "meia galinha"
WORD_ITEM_RE = re.compile(
    r"^(meia|metade|meio|um|uma|dois|duas|tres|três|quatro|cinco|seis|sete|oito|nove|dez)\s+(.+)",
    re.IGNORECASE,
)

# "2 frangos", "1.5 kg salada", "3x frango"
NUMERIC_ITEM_RE = re.compile(r"(\d+(?:[.,]\d+)?)\s*(x|kg|g|un|unidades|unidade)?\s*(.+)", re.IGNORECASE)


def parse_client_name(line: str) -> Optional[str]:
    """Extrai o nome do cliente de frases como "sou a Paula" ou "meu nome é Ana"."""
    line_lower = line.lower()

    for pattern in CLIENT_PATTERNS:
        match = pattern.search(line_lower)
        if match and match.group(1):
            name = match.group(1).strip()
            if len(name) >= 2 and name not in EXCLUDED_NAMES:
                return name[0].upper() + name[1:]
    return None


def parse_scheduled_time(line: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """
    Extrai o horário de retirada/entrega de uma linha.

    Retorna a data de hoje (ou a de `now`) com hora e minuto extraídos.
    Horários fora do relógio fazem a busca seguir para o próximo padrão.
    """
    line_lower = line.lower()

    for pattern in TIME_PATTERNS:
        match = pattern.search(line_lower)
        if not match:
            continue
        hours = int(match.group(1))
        minutes = int(match.group(2)) if match.group(2) else 0
        if hours < 24 and minutes < 60:
            base = now or datetime.now(ZoneInfo(settings.timezone))
            return base.replace(hour=hours, minute=minutes, second=0, microsecond=0)
    return None


def _quantity_from_word(match: re.Match) -> Tuple[float, str]:
    return WORD_TO_NUMBER.get(match.group(1).lower(), 1), match.group(2).strip()


def _quantity_from_number(match: re.Match) -> Tuple[float, str]:
    try:
        quantity = float(match.group(1).replace(",", "."))
    except ValueError:
        quantity = 1
    return quantity, match.group(3).strip()


# Estratégias de quantidade, na ordem de precedência
QUANTITY_STRATEGIES: List[Tuple[Pattern[str], Callable[[re.Match], Tuple[float, str]]]] = [
    (WORD_ITEM_RE, _quantity_from_word),
    (NUMERIC_ITEM_RE, _quantity_from_number),
]


def _split_quantity(line_lower: str) -> Tuple[float, str]:
    for pattern, handler in QUANTITY_STRATEGIES:
        match = pattern.search(line_lower)
        if match:
            return handler(match)
    # Sem quantidade: a linha inteira é o nome do produto
    return 1, line_lower


def parse_item_line(line: str, products: Sequence[CatalogProduct]) -> Optional[ParsedOrderItem]:
    """
    Interpreta uma linha como item do pedido.

    Retorna None quando o produto não existe no catálogo ou a quantidade
    não é positiva; nesses casos a linha vira observação.
    """
    line_lower = line.lower().strip()
    if not line_lower:
        return None

    quantity, product_name = _split_quantity(line_lower)
    if not product_name or quantity <= 0:
        return None

    product = find_best_match(product_name, products)
    if not product:
        return None

    return ParsedOrderItem(
        product=ParsedProduct(id=product.id, name=product.name, unit_price=product.unit_price),
        quantity=quantity,
        unit_price=product.unit_price,
        total_price=product.unit_price * quantity,
    )
