from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from pdv.services.client_reply import (
    ReplyParams,
    build_whatsapp_client_reply_url,
    generate_client_reply_message,
)
from pdv.services.whatsapp_parser import CatalogProduct, parse_message

router = APIRouter(prefix="/whatsapp")

logger = logging.getLogger(__name__)


class CatalogProductIn(BaseModel):
    id: str
    name: str
    unit_price: float = Field(0.0, ge=0)


class ParseRequest(BaseModel):
    message: str
    catalog: List[CatalogProductIn] = Field(default_factory=list)


class ReplyRequest(BaseModel):
    display_id: int
    order_status: str
    is_delivery: bool = False
    client_name: Optional[str] = None
    client_phone: Optional[str] = None
    scheduled_pickup: Optional[datetime] = None


@router.post("/parse")
def parse_whatsapp_message(body: ParseRequest) -> Dict[str, Any]:
    products = [CatalogProduct(id=p.id, name=p.name, unit_price=p.unit_price) for p in body.catalog]
    parsed = parse_message(body.message, products)
    logger.info(
        "parse_whatsapp_message",
        extra={"items": len(parsed.items), "catalog_size": len(products)},
    )
    return parsed.to_dict()


@router.post("/reply")
def build_reply(body: ReplyRequest) -> Dict[str, Any]:
    params = ReplyParams(**body.model_dump())
    return {
        "message": generate_client_reply_message(params),
        "url": build_whatsapp_client_reply_url(params),
    }
