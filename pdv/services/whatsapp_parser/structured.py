"""Parser das mensagens geradas pelo catálogo virtual.

O catálogo envia o pedido num layout fixo:

    *Paola Gonçalves Rotisseria*
    Novo pedido online

    *Cliente:* Paula
    *Telefone:* (11) 98888-7777
    *Modalidade:* Retirada
    *Data:* 20/10/2026 às 11:30
    *Pagamento:* Pix

    *Itens:*
    2x Frango Assado - R$ 90,00

    *Total:* R$ 90,00

    *Observações:* sem cebola

    Pedido enviado via Catálogo Virtual
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo

from pdv.services.whatsapp_parser.classifiers import parse_item_line
from pdv.services.whatsapp_parser.models import CatalogProduct, ParsedMessage, ParsedOrderItem
from pdv.settings import settings

logger = logging.getLogger(__name__)

HEADER_MARKER = "Novo pedido online"
FOOTER_MARKER = "Pedido enviado via Catálogo Virtual"
CLIENT_FIELD = "*Cliente:*"
PHONE_FIELD = "*Telefone:*"
DATE_FIELD = "*Data:*"
ITEMS_FIELD = "*Itens:*"
TOTAL_FIELD = "*Total:*"
NOTES_FIELD = "*Observações:*"

IGNORED_FIELDS = (
    HEADER_MARKER,
    PHONE_FIELD,
    "*Modalidade:*",
    "*Endereço:*",
    "*Pagamento:*",
    TOTAL_FIELD,
    FOOTER_MARKER,
)

DATE_RE = re.compile(r"(\d{2}/\d{2}/\d{4}).*às\s*(\d{2}:\d{2})")


def is_structured_message(text: str) -> bool:
    """Detecta se a mensagem veio do catálogo virtual."""
    return HEADER_MARKER in text and ITEMS_FIELD in text


def _parse_date_field(line: str) -> Optional[datetime]:
    match = DATE_RE.search(line)
    if not match:
        return None
    day, month, year = (int(p) for p in match.group(1).split("/"))
    hours, minutes = (int(p) for p in match.group(2).split(":"))
    try:
        return datetime(year, month, day, hours, minutes, tzinfo=ZoneInfo(settings.timezone))
    except ValueError:
        logger.warning(f"Data inválida na mensagem do catálogo: {line}")
        return None


def _is_metadata(line: str) -> bool:
    if f"*{settings.store_name}*" in line:
        return True
    return any(field in line for field in IGNORED_FIELDS)


def parse_structured_message(text: str, products: Sequence[CatalogProduct]) -> ParsedMessage:
    """Extrai cliente, telefone, data, itens e observações de uma mensagem do catálogo."""
    items: List[ParsedOrderItem] = []
    notes_lines: List[str] = []
    result = ParsedMessage()
    parsing_items = False

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if CLIENT_FIELD in line:
            result.client_name = line.replace(CLIENT_FIELD, "").strip()
            continue

        if PHONE_FIELD in line:
            result.client_phone = line.replace(PHONE_FIELD, "").strip()
            continue

        if DATE_FIELD in line:
            result.scheduled_time = _parse_date_field(line)
            continue

        if ITEMS_FIELD in line:
            parsing_items = True
            continue

        # Total e observações encerram a seção de itens
        if TOTAL_FIELD in line or NOTES_FIELD in line:
            parsing_items = False

        if parsing_items:
            item = parse_item_line(line, products)
            if item:
                items.append(item)
            else:
                notes_lines.append(raw_line)
            continue

        if NOTES_FIELD in line:
            observation = line.replace(NOTES_FIELD, "").strip()
            if observation:
                notes_lines.append(observation)
            continue

        if _is_metadata(line):
            continue

        notes_lines.append(raw_line)

    result.items = items
    result.notes = "\n".join(notes_lines).strip()
    logger.debug(
        "Mensagem do catálogo interpretada",
        extra={"items": len(items), "notes": len(notes_lines)},
    )
    return result
