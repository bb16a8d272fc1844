"""Tests for logging_config.py — JSON formatting and one-time setup."""

import json
import logging

from logging_config import JsonFormatter, logger, setup_logging


class TestJsonFormatter:
    def _record(self, **extra):
        record = logging.LogRecord('engcalc', logging.INFO, __file__, 10, 'converted %s', ('bar',), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        entry = json.loads(JsonFormatter().format(self._record()))
        assert entry['level'] == 'INFO'
        assert entry['logger'] == 'engcalc'
        assert entry['message'] == 'converted bar'

    def test_extra_fields_included(self):
        entry = json.loads(JsonFormatter().format(self._record(status=200, duration_ms=1.5)))
        assert entry['status'] == 200
        assert entry['duration_ms'] == 1.5


class TestSetup:
    def test_setup_is_idempotent(self):
        root = logging.getLogger()
        before = len(root.handlers)
        assert setup_logging() is logger
        assert len(root.handlers) == before

    def test_request_is_logged(self, app_client, caplog):
        with caplog.at_level(logging.DEBUG, logger='engcalc'):
            app_client.get('/health')
        assert any('GET /health -> 200' in r.getMessage() for r in caplog.records)
