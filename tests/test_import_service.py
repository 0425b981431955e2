import logging

from pdv.services.whatsapp_parser import CatalogProduct, WhatsAppImportService

CARDAPIO = [
    CatalogProduct(id="1", name="Frango Assado", unit_price=45.00),
    CatalogProduct(id="2", name="Farofa", unit_price=15.00),
]

PEDIDO_CATALOGO = """Novo pedido online
*Cliente:* Paula
*Telefone:* (11) 98888-7777
*Itens:*
2x Frango Assado - R$ 90,00
*Total:* R$ 90,00"""


def test_analyze_free_text_without_lookup():
    calls = []
    service = WhatsAppImportService(CARDAPIO, find_client_by_phone=calls.append)
    result = service.analyze("Oi, sou a Paula\n2 frangos assados\nsem sal")

    assert result.client_name == "Paula"
    assert result.client is None
    assert result.notes == "sem sal"
    assert result.items[0].product is CARDAPIO[0]
    assert result.items[0].total_price == 90.0
    assert calls == []


def test_analyze_recognizes_client_by_phone():
    seen = []

    def find_client(phone):
        seen.append(phone)
        return {"id": "c1", "name": "Paula", "phone": phone}

    service = WhatsAppImportService(CARDAPIO, find_client_by_phone=find_client)
    result = service.analyze(PEDIDO_CATALOGO)

    assert seen == ["5511988887777"]
    assert result.client["id"] == "c1"
    assert result.client_name == "Paula"
    assert len(result.items) == 1


def test_lookup_error_is_logged(caplog):
    def broken_lookup(phone):
        raise RuntimeError("directory offline")

    service = WhatsAppImportService(CARDAPIO, find_client_by_phone=broken_lookup)
    with caplog.at_level(logging.ERROR):
        result = service.analyze(PEDIDO_CATALOGO)

    assert result.client is None
    assert len(result.items) == 1
    assert "Erro ao buscar cliente" in caplog.text


def test_analyze_to_dict():
    service = WhatsAppImportService(CARDAPIO)
    data = service.analyze_to_dict("1 farofa")
    assert data["items"][0]["product"] == {"id": "2", "name": "Farofa", "unit_price": 15.0}
    assert data["scheduled_pickup"] is None
    assert data["client"] is None
