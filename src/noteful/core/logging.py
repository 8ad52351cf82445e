"""
Logging setup for the Noteful backend.

Console output is colored text in debug mode and one JSON object per line
otherwise. Everything under the ``noteful`` logger is also written to a
rotating ``noteful.log`` and, from ERROR up, to ``error.log``.
"""
import copy
import json
import logging
import logging.config
import sys
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import Settings, get_settings

# LogRecord attributes that are not user supplied ``extra`` fields
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "color_message", "taskName"}

REQUEST_ID_HEADER = b"x-request-id"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` fields are nested under ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat(timespec='milliseconds')
            .replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
        }

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            entry['exception'] = {
                'type': exc_type.__name__,
                'message': str(exc_value),
                'traceback': self.formatException(record.exc_info),
            }

        extra = {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}
        if extra:
            entry['extra'] = extra

        return json.dumps(entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Level-colored console output for local development."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    DIM = '\033[90m'
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # handlers share the record; never mutate it in place
        record = copy.copy(record)
        color = self.LEVEL_COLORS.get(record.levelno, '')
        record.levelname = f"{color}{record.levelname:<8}{self.RESET}"
        record.name = f"{self.DIM}{record.name}{self.RESET}"
        return super().format(record)


def get_log_level(level_str: Optional[str] = None) -> int:
    """Numeric level for a name such as ``"debug"``; unknown names mean INFO."""
    level = logging.getLevelName((level_str or get_settings().log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _rotating_file(path: Path, formatter: str, level: str, settings: Settings) -> Dict[str, Any]:
    return {
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': str(path),
        'maxBytes': settings.log_file_max_bytes,
        'backupCount': settings.log_file_backups,
        'formatter': formatter,
        'level': level,
        'encoding': 'utf-8',
    }


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """dictConfig mapping for ``settings``."""
    log_dir = Path(settings.log_dir)
    console_format = 'colored' if settings.debug and not settings.log_json else 'json'

    # logger name -> (handlers, level)
    routes = {
        'noteful': (['console', 'file', 'error_file'], 'DEBUG'),
        'uvicorn': (['console'], 'INFO'),
        'uvicorn.access': (['console'], 'INFO'),
        'sqlalchemy': (['file'], 'WARNING'),
        'alembic': (['console', 'file'], 'INFO'),
    }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'json': {'()': JSONFormatter},
            'colored': {
                '()': ColoredFormatter,
                'format': '%(asctime)s %(levelname)s %(name)s  %(message)s',
                'datefmt': '%H:%M:%S',
            },
            'file': {
                'format': settings.log_format,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': console_format,
                'stream': sys.stdout,
                'level': get_log_level(settings.log_level),
            },
            'file': _rotating_file(log_dir / 'noteful.log', 'file', 'DEBUG', settings),
            'error_file': _rotating_file(log_dir / 'error.log', 'json', 'ERROR', settings),
        },
        'root': {'handlers': ['console', 'file'], 'level': 'INFO'},
        'loggers': {
            name: {'handlers': handlers, 'level': level, 'propagate': False}
            for name, (handlers, level) in routes.items()
        },
    }


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Install handlers; safe to call more than once."""
    settings = settings or get_settings()
    Path(settings.log_dir).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(settings))

    get_logger("logging").info("Logging configured", extra={
        'log_level': settings.log_level,
        'environment': settings.environment,
        'log_dir': settings.log_dir,
    })


def get_logger(name: str) -> logging.Logger:
    """Logger below the ``noteful`` namespace."""
    return logging.getLogger(f"noteful.{name}")


class LoggingMiddleware:
    """ASGI middleware logging one line per request.

    The request id is taken from an incoming ``X-Request-ID`` header when
    present and echoed back on the response.
    """

    def __init__(self, app, logger_name: str = "http"):
        self.app = app
        self.logger = get_logger(logger_name)

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        request_id = headers.get(REQUEST_ID_HEADER, b"").decode("latin-1") or uuid.uuid4().hex
        start = time.perf_counter()
        context = {
            'request_id': request_id,
            'method': scope['method'],
            'path': scope['path'],
        }
        self.logger.debug("Request started", extra={
            **context,
            'client_ip': scope['client'][0] if scope.get('client') else 'unknown',
            'user_agent': headers.get(b"user-agent", b"unknown").decode("latin-1"),
        })

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status = message.get("status", 0)
                message["headers"] = [
                    *message.get("headers", []),
                    (REQUEST_ID_HEADER, request_id.encode("latin-1")),
                ]
                self.logger.log(
                    logging.WARNING if status >= 500 else logging.INFO,
                    f"{scope['method']} {scope['path']} -> {status}",
                    extra={
                        **context,
                        'status_code': status,
                        'duration_ms': round((time.perf_counter() - start) * 1000, 2),
                    },
                )
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            self.logger.error(
                "Request failed",
                exc_info=exc,
                extra={**context, 'duration_ms': round((time.perf_counter() - start) * 1000, 2)},
            )
            raise
