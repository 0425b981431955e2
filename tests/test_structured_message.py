"""Testes para mensagens do catálogo virtual."""

from datetime import datetime
from zoneinfo import ZoneInfo

from pdv.services.whatsapp_parser import CatalogProduct, parse_message
from pdv.services.whatsapp_parser.structured import is_structured_message, parse_structured_message
from pdv.settings import settings

CARDAPIO = [
    CatalogProduct(id="1", name="Frango Assado", unit_price=45.00),
    CatalogProduct(id="2", name="Salada de Maionese", unit_price=25.00),
    CatalogProduct(id="3", name="Farofa", unit_price=15.00),
]

PEDIDO_CATALOGO = """*Paola Gonçalves Rotisseria*
Novo pedido online

*Cliente:* Paula Souza
*Telefone:* (11) 98888-7777
*Modalidade:* Retirada
*Data:* 20/10/2026 às 11:30
*Pagamento:* Pix

*Itens:*
2x Frango Assado - R$ 90,00
1x Farofa - R$ 15,00
1x Pizza Calabresa - R$ 50,00

*Total:* R$ 105,00

*Observações:* sem cebola

Pedido enviado via Catálogo Virtual"""


def test_detects_catalog_message():
    assert is_structured_message(PEDIDO_CATALOGO) is True
    assert is_structured_message("Oi, sou a Paula\n2 frangos") is False
    assert is_structured_message("Novo pedido online") is False


def test_parse_catalog_message(monkeypatch):
    monkeypatch.setattr(settings, "timezone", "America/Sao_Paulo")
    result = parse_structured_message(PEDIDO_CATALOGO, CARDAPIO)

    assert result.client_name == "Paula Souza"
    assert result.client_phone == "(11) 98888-7777"
    assert result.scheduled_time == datetime(2026, 10, 20, 11, 30, tzinfo=ZoneInfo("America/Sao_Paulo"))
    assert [(i.product.name, i.quantity, i.total_price) for i in result.items] == [
        ("Frango Assado", 2, 90.0),
        ("Farofa", 1, 15.0),
    ]
    assert result.notes == "1x Pizza Calabresa - R$ 50,00\nsem cebola"


def test_parse_message_delegates_to_catalog_parser():
    result = parse_message(PEDIDO_CATALOGO, CARDAPIO)
    assert result.client_phone == "(11) 98888-7777"
    assert len(result.items) == 2


def test_date_to_be_arranged_leaves_time_empty():
    text = PEDIDO_CATALOGO.replace("20/10/2026 às 11:30", "A combinar às 11:30")
    assert parse_structured_message(text, CARDAPIO).scheduled_time is None


def test_impossible_date_leaves_time_empty():
    text = PEDIDO_CATALOGO.replace("20/10/2026", "31/02/2026")
    result = parse_structured_message(text, CARDAPIO)
    assert result.scheduled_time is None
    assert len(result.items) == 2


def test_store_name_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "store_name", "Casa do Frango")
    text = PEDIDO_CATALOGO.replace("Paola Gonçalves Rotisseria", "Casa do Frango")
    assert "Casa do Frango" not in parse_structured_message(text, CARDAPIO).notes

    monkeypatch.setattr(settings, "store_name", "Outra Loja")
    assert "*Casa do Frango*" in parse_structured_message(text, CARDAPIO).notes


def test_delivery_address_is_ignored():
    text = PEDIDO_CATALOGO.replace(
        "*Modalidade:* Retirada",
        "*Modalidade:* Entrega\n*Endereço:* Rua A, 10 - Centro, Itajaí - CEP: 88300-000",
    )
    result = parse_structured_message(text, CARDAPIO)
    assert "Rua A" not in result.notes


def test_empty_observation_is_skipped():
    text = PEDIDO_CATALOGO.replace("*Observações:* sem cebola", "*Observações:*")
    assert parse_structured_message(text, CARDAPIO).notes == "1x Pizza Calabresa - R$ 50,00"
