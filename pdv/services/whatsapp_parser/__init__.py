"""WhatsApp Parser - Interpreta pedidos colados do WhatsApp contra o catálogo."""

from pdv.services.whatsapp_parser.matcher import find_best_match, levenshtein
from pdv.services.whatsapp_parser.models import (
    CatalogProduct,
    ParsedMessage,
    ParsedOrderItem,
    ParsedProduct,
)
from pdv.services.whatsapp_parser.normalizer import normalize
from pdv.services.whatsapp_parser.parser import MessageParser, parse_message
from pdv.services.whatsapp_parser.service import WhatsAppImportResult, WhatsAppImportService

__all__ = [
    "CatalogProduct",
    "MessageParser",
    "ParsedMessage",
    "ParsedOrderItem",
    "ParsedProduct",
    "WhatsAppImportResult",
    "WhatsAppImportService",
    "find_best_match",
    "levenshtein",
    "normalize",
    "parse_message",
]
