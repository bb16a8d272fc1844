import json
import logging
import os
import time
from logging.handlers import RotatingFileHandler

from flask import g, request

from config import Config

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Attributes every LogRecord has; anything else was passed through extra=
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including any extra= fields."""

    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "filename": record.filename,
            "lineno": record.lineno,
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith('_'):
                log_entry[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def _log_dir(path):
    if not os.path.exists(path):
        try:
            os.makedirs(path)
        except OSError:
            return '.'
    return path


def _rotating_handler(path, level, max_bytes, backups):
    try:
        handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups)
    except OSError:
        return None
    handler.setLevel(level)
    return handler


def setup_logging(log_dir=None, log_format=None):
    """
    Attach console and rotating file handlers to the root logger.

    Safe to call more than once; handlers are only added the first time.
    Returns the 'engcalc' application logger.
    """
    app_logger = logging.getLogger('engcalc')
    root_logger = logging.getLogger()
    if getattr(root_logger, '_engcalc_configured', False):
        return app_logger

    log_dir = _log_dir(log_dir or Config.LOG_DIR)
    log_format = (log_format or Config.LOG_FORMAT).lower()
    formatter = JsonFormatter() if log_format == 'json' else logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    handlers = [
        console_handler,
        # 5MB x 5 for everything, 2MB x 3 for errors only
        _rotating_handler(os.path.join(log_dir, 'engcalc.log'), logging.DEBUG, 5 * 1024 * 1024, 5),
        _rotating_handler(os.path.join(log_dir, 'errors.log'), logging.ERROR, 2 * 1024 * 1024, 3),
    ]

    root_logger.setLevel(logging.DEBUG)
    for handler in handlers:
        if handler is None:
            continue
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger._engcalc_configured = True

    app_logger.setLevel(logging.DEBUG)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    app_logger.info(f"Engcalc logging initialized ({log_format}, dir={log_dir})")
    return app_logger


def register_request_logging(app):
    """Log method, path, status and duration of every request at debug level."""
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop('request_started', None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.debug(
            f"{request.method} {request.path} -> {response.status_code}",
            extra={'status': response.status_code, 'duration_ms': round(elapsed_ms, 2)},
        )
        return response

    return app


logger = setup_logging()
