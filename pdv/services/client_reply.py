"""Mensagens de retorno ao cliente pelo WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from urllib.parse import quote

from pdv.settings import settings
from pdv.utils.phone import clean_phone_number
from pdv.utils.time import format_hora, parse_datetime

ORDER_STATUS_LABELS = {
    "received": "Recebido",
    "preparing": "Em Preparo",
    "ready": "Pronto",
    "delivered": "Entregue",
    "cancelled": "Cancelado",
}

WHATSAPP_URL = "https://wa.me/{phone}?text={text}"


@dataclass
class ReplyParams:
    display_id: int
    order_status: str
    is_delivery: bool
    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    scheduled_pickup: Optional[datetime | str] = None


def generate_client_reply_message(params: ReplyParams) -> str:
    name = params.client_name or "Cliente"
    pickup = parse_datetime(params.scheduled_pickup)
    pickup_time = format_hora(pickup, settings.timezone) if pickup else ""

    if params.order_status == "ready" and not params.is_delivery:
        return f"Seu pedido #{params.display_id} está pronto! Retire às {pickup_time}"

    if params.order_status == "ready" and params.is_delivery:
        return f"Seu pedido #{params.display_id} está pronto e sai pra entrega em 20min!"

    if params.order_status == "delivered":
        return f"Seu pedido #{params.display_id} foi entregue! Obrigada e volte sempre!"

    label = ORDER_STATUS_LABELS.get(params.order_status, params.order_status)
    return f"Olá {name}! Seu pedido #{params.display_id} está {label.lower()}. Qualquer dúvida é só chamar!"


def build_whatsapp_client_reply_url(params: ReplyParams) -> Optional[str]:
    """Link wa.me que abre a conversa com a mensagem já digitada."""
    phone = clean_phone_number(params.client_phone)
    if not phone:
        return None
    # Mesmo conjunto de caracteres livres do encodeURIComponent
    text = quote(generate_client_reply_message(params), safe="-_.!~*'()")
    return WHATSAPP_URL.format(phone=phone, text=text)
