"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("INFO", logging.INFO), ("debug", logging.DEBUG), ("warning", logging.WARNING), ("CRITICAL", logging.CRITICAL)],
    )
    def test_levels(self, level: str, expected: int) -> None:
        """Nível é aplicado ao logger raiz (case insensitive)."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers(self) -> None:
        """Substitui handlers existentes por um único handler JSON."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "share-normalizer"


class TestGetLogger:
    """Testes para get_logger."""

    def test_same_name_same_instance(self) -> None:
        assert get_logger("share.module") is get_logger("share.module")
        assert get_logger("share.module").name == "share.module"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "share_extractor")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "share_extractor")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "share_extractor"}

    def test_with_reason_and_source(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "share_extractor", reason="clip_data_empty", source="extras_stream")
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "clip_data_empty"
        assert extra["source"] == "extras_stream"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_and_service(self) -> None:
        record = _record()
        assert CorrelationIdFilter("svc", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "svc"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter."""

    def test_field_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json(self) -> None:
        """Campos renomeados e extras aparecem no JSON."""
        record = _record("share_event_normalized", name="api.normalizers.share")
        record.correlation_id = "abc-123"
        record.service = "share-normalizer"
        record.item_count = 2

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "share_event_normalized"
        assert output["logger"] == "api.normalizers.share"
        assert output["level"] == "INFO"
        assert output["correlation_id"] == "abc-123"
        assert output["item_count"] == 2
