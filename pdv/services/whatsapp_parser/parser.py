"""Parser de mensagens de pedido digitadas livremente no WhatsApp."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

from pdv.services.whatsapp_parser.classifiers import (
    parse_client_name,
    parse_item_line,
    parse_scheduled_time,
)
from pdv.services.whatsapp_parser.models import CatalogProduct, ParsedMessage, ParsedOrderItem
from pdv.services.whatsapp_parser.structured import is_structured_message, parse_structured_message

logger = logging.getLogger(__name__)


@dataclass
class _ParseState:
    """Acumulador do parse linha a linha."""

    client_name: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    items: List[ParsedOrderItem] = field(default_factory=list)
    notes_lines: List[str] = field(default_factory=list)


def _consume_line(state: _ParseState, raw_line: str, products: Sequence[CatalogProduct], now: Optional[datetime]) -> None:
    line = raw_line.strip()

    # 1. Nome do cliente (só o primeiro da mensagem)
    if state.client_name is None:
        name = parse_client_name(line)
        if name:
            state.client_name = name
            return

    # 2. Horário (só o primeiro da mensagem)
    if state.scheduled_time is None:
        scheduled = parse_scheduled_time(line, now)
        if scheduled:
            state.scheduled_time = scheduled
            return

    # 3. Item do catálogo
    item = parse_item_line(line, products)
    if item:
        state.items.append(item)
        return

    # 4. O resto vira observação, como foi digitado
    state.notes_lines.append(raw_line)


def parse_message(text: str, products: Sequence[CatalogProduct], now: Optional[datetime] = None) -> ParsedMessage:
    """
    Interpreta uma mensagem completa do WhatsApp.

    Mensagens do catálogo virtual seguem o parser estruturado. Nas demais,
    cada linha passa pelos classificadores na ordem nome, horário, item;
    o que nenhum reconhece vai para as observações.

    Args:
        text: Mensagem colada pelo atendente
        products: Catálogo usado no matching dos itens
        now: Data base para o horário extraído (padrão: agora, no fuso configurado)

    Returns:
        ParsedMessage: Itens, horário, nome do cliente e observações
    """
    if is_structured_message(text):
        return parse_structured_message(text, products)

    state = _ParseState()
    lines = [raw_line for raw_line in text.split("\n") if raw_line.strip()]
    for raw_line in lines:
        _consume_line(state, raw_line, products, now)

    logger.debug(
        "Mensagem interpretada",
        extra={
            "lines": len(lines),
            "items": len(state.items),
            "notes": len(state.notes_lines),
            "catalog_size": len(products),
        },
    )

    return ParsedMessage(
        items=state.items,
        scheduled_time=state.scheduled_time,
        client_name=state.client_name,
        notes="\n".join(state.notes_lines).strip(),
    )


class MessageParser:
    """Parser ligado a um catálogo, para interpretar várias mensagens."""

    def __init__(self, products: Sequence[CatalogProduct]):
        self.products = list(products)

    def parse(self, text: str, now: Optional[datetime] = None) -> ParsedMessage:
        return parse_message(text, self.products, now)
