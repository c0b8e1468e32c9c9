"""Tests for the logging formatters and correlation id context."""

import json
import logging

import pytest

from textbook_scanner.infrastructure.config.settings import get_settings
from textbook_scanner.infrastructure.logging import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from textbook_scanner.infrastructure.logging.formatters import (
    DetailedFormatter,
    JSONFormatter,
    StructuredFormatter,
    get_formatter,
)


def _record(message: str = "Page saved", **extra) -> logging.LogRecord:
    record = logging.LogRecord("textbook_scanner.page", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    output = json.loads(JSONFormatter().format(_record(page_id=7, document_id=3)))

    assert output["level"] == "INFO"
    assert output["message"] == "Page saved"
    assert output["page_id"] == 7
    assert output["document_id"] == 3


def test_json_formatter_stringifies_unserializable_extras():
    output = json.loads(JSONFormatter().format(_record(fields={"title"})))

    assert output["fields"] == "{'title'}"


def test_structured_formatter_quotes_strings_only():
    line = StructuredFormatter().format(_record(page_id=7, owner_id="user-1"))

    assert "page_id=7" in line
    assert 'owner_id="user-1"' in line
    assert 'message="Page saved"' in line


def test_detailed_formatter_without_correlation_id():
    assert "(no-correlation)" in DetailedFormatter().format(_record())


def test_unknown_formatter():
    with pytest.raises(ValueError):
        get_formatter("xml")


def test_correlation_id_context():
    assert get_correlation_id() is None

    correlation_id = generate_correlation_id()
    token = set_correlation_id(correlation_id)
    try:
        assert get_correlation_id() == correlation_id
    finally:
        reset_correlation_id(token)

    assert get_correlation_id() is None


def test_sqlite_database_url_is_detected():
    settings = get_settings()

    assert settings.DATABASE_URL == "sqlite+aiosqlite:///:memory:"
    assert settings.DATABASE_IS_SQLITE
