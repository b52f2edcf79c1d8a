import json
import logging

from app.core.logging import JSONFormatter, TextFormatter, request_id_context
from medlogic.utils import Config, JsonFormatter


def test_config_is_singleton():
    assert Config() is Config()


def test_kb_path_empty_means_builtin(monkeypatch):
    monkeypatch.setenv("KB_PATH", "")

    assert Config().kb_path is None


def test_kb_path_is_resolved_against_project_root(monkeypatch, tmp_path):
    config = Config()
    monkeypatch.setenv("KB_PATH", "data/kb.json")
    assert config.kb_path == config.project_root / "data" / "kb.json"

    monkeypatch.setenv("KB_PATH", str(tmp_path / "kb.json"))
    assert config.kb_path == tmp_path / "kb.json"


def test_kb_strict_parses_booleans(monkeypatch):
    config = Config()

    for value, expected in [("true", True), ("1", True), ("YES", True), ("false", False), ("no", False)]:
        monkeypatch.setenv("KB_STRICT", value)
        assert config.kb_strict is expected

    monkeypatch.delenv("KB_STRICT")
    assert config.kb_strict is False


def _record(message="Base cargada"):
    return logging.LogRecord("knowledge.loader", logging.INFO, __file__, 10, message, None, None)


def test_json_formatter_fields():
    record = _record()
    record.extra_data = {"rules": 13}

    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["logger"] == "knowledge.loader"
    assert data["message"] == "Base cargada"
    assert data["rules"] == 13


def test_service_formatters_add_request_id():
    token = request_id_context.set("abc-123")
    try:
        data = json.loads(JSONFormatter().format(_record()))
        text = TextFormatter().format(_record())
    finally:
        request_id_context.reset(token)

    assert data["request_id"] == "abc-123"
    assert data["message"] == "Base cargada"
    assert "INFO [abc-123] - Base cargada" in text


def test_service_json_formatter_without_request_id():
    data = json.loads(JSONFormatter().format(_record()))

    assert "request_id" not in data
