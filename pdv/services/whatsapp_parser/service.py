"""Serviço de importação de pedidos colados do WhatsApp."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from pdv.services.whatsapp_parser.models import CatalogProduct
from pdv.services.whatsapp_parser.parser import parse_message
from pdv.utils.phone import normalize_phone

logger = logging.getLogger(__name__)

ClientLookup = Callable[[str], Optional[Dict[str, Any]]]


@dataclass
class ImportedItem:
    """Item pronto para o formulário de novo pedido, com o produto completo."""

    id: str
    product: CatalogProduct
    quantity: float
    unit_price: float
    total_price: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "product": self.product.to_dict(),
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total_price": self.total_price,
        }


@dataclass
class WhatsAppImportResult:
    """Resultado da importação para pré-preencher o pedido."""

    items: List[ImportedItem] = field(default_factory=list)
    notes: str = ""
    scheduled_pickup: Optional[datetime] = None
    client: Optional[Dict[str, Any]] = None
    client_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [i.to_dict() for i in self.items],
            "notes": self.notes,
            "scheduled_pickup": self.scheduled_pickup.isoformat() if self.scheduled_pickup else None,
            "client": self.client,
            "client_name": self.client_name,
        }


class WhatsAppImportService:
    """
    Orquestra a importação de uma mensagem do WhatsApp:
    1. Parser: extrai cliente, horário, itens e observações
    2. Catálogo: troca a cópia do produto pelo objeto do catálogo
    3. Clientes: reconhece o cliente pelo telefone, quando houver
    """

    def __init__(self, products: Sequence[CatalogProduct], find_client_by_phone: Optional[ClientLookup] = None):
        """
        Args:
            products: Catálogo de produtos ativos
            find_client_by_phone: Busca de cliente pelo telefone normalizado (opcional)
        """
        self.products = list(products)
        self.find_client_by_phone = find_client_by_phone

    def _lookup_client(self, phone: Optional[str]) -> Optional[Dict[str, Any]]:
        if not phone or self.find_client_by_phone is None:
            return None
        normalized = normalize_phone(phone)
        if not normalized:
            return None
        try:
            return self.find_client_by_phone(normalized)
        except Exception:
            logger.exception("Erro ao buscar cliente pelo telefone", extra={"phone": normalized})
            return None

    def analyze(self, text: str) -> WhatsAppImportResult:
        """Interpreta a mensagem e mapeia o resultado para o domínio de pedidos."""
        parsed = parse_message(text, self.products)
        by_id = {p.id: p for p in self.products}

        items = [
            ImportedItem(
                id=parsed_item.id,
                product=by_id[parsed_item.product.id],
                quantity=parsed_item.quantity,
                unit_price=parsed_item.unit_price,
                total_price=parsed_item.total_price,
            )
            for parsed_item in parsed.items
        ]

        client = self._lookup_client(parsed.client_phone)
        logger.info(
            "Mensagem do WhatsApp importada",
            extra={"items": len(items), "catalog_size": len(self.products)},
        )

        return WhatsAppImportResult(
            items=items,
            notes=parsed.notes,
            scheduled_pickup=parsed.scheduled_time,
            client=client,
            client_name=parsed.client_name,
        )

    def analyze_to_dict(self, text: str) -> Dict[str, Any]:
        return self.analyze(text).to_dict()
