"""Modelos de dados do parser de mensagens do WhatsApp."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class CatalogProduct:
    """Produto do catálogo usado como referência no matching."""

    id: str
    name: str
    unit_price: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogProduct":
        price = data.get("unit_price")
        if price is None:
            price = data.get("base_price")
        if price is None:
            price = data.get("price")
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            unit_price=float(price or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "unit_price": self.unit_price}


@dataclass(frozen=True)
class ParsedProduct:
    """Cópia dos dados do produto encontrado no catálogo."""

    id: str
    name: str
    unit_price: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "unit_price": self.unit_price}


@dataclass(frozen=True)
class ParsedOrderItem:
    """Item reconhecido em uma linha da mensagem."""

    product: ParsedProduct
    quantity: float
    unit_price: float
    total_price: float
    id: str = field(default_factory=lambda: str(uuid.uuid4()), compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "product": self.product.to_dict(),
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total_price": self.total_price,
        }


@dataclass
class ParsedMessage:
    """Resultado final do parse de uma mensagem."""

    items: List[ParsedOrderItem] = field(default_factory=list)
    scheduled_time: Optional[datetime] = None
    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [i.to_dict() for i in self.items],
            "scheduled_time": self.scheduled_time.isoformat() if self.scheduled_time else None,
            "client_name": self.client_name,
            "client_phone": self.client_phone,
            "notes": self.notes,
        }
