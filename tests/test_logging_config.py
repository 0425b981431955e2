import json
import logging

from pdv.logging_config import JsonFormatter, init_logging
from pdv.settings import settings


def test_json_formatter_includes_extras():
    record = logging.LogRecord("pdv.test", logging.INFO, __file__, 1, "Mensagem interpretada", None, None)
    record.items = 2
    record.catalog_size = 5
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["message"] == "Mensagem interpretada"
    assert payload["items"] == 2
    assert payload["catalog_size"] == 5
    assert "phone" not in payload


def test_json_formatter_tags_app_and_keeps_accents(monkeypatch):
    monkeypatch.setattr(settings, "app_name", "pdv-teste")
    monkeypatch.setattr(settings, "env", "test")
    record = logging.LogRecord("pdv.test", logging.INFO, __file__, 1, "Pedido às 11h", None, None)
    line = JsonFormatter().format(record)
    assert "às" in line
    payload = json.loads(line)
    assert payload["app"] == "pdv-teste"
    assert payload["env"] == "test"
    assert "time" in payload


def test_init_logging_installs_single_json_handler():
    root = logging.getLogger()
    previous = (root.level, root.handlers)
    try:
        init_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.setLevel(previous[0])
        root.handlers = previous[1]
