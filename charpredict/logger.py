from datetime import datetime
import json
import logging
import os
import sys

from charpredict.config import settings


class JsonFormatter(logging.Formatter):
    """Formatter that renders each record as one JSON object per line."""

    def format(self, record):
        log_data = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'path': record.pathname,
            'line': record.lineno,
            'function': record.funcName,
        }

        # structured payload passed as extra={"metrics": {...}}
        if hasattr(record, 'metrics'):
            log_data['metrics'] = record.metrics

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info),
            }

        return json.dumps(log_data, default=str)


def _file_handler(log_file: str) -> logging.FileHandler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(JsonFormatter())
    return handler


def get_logger(name: str, log_file: str | None = None, console_json: bool | None = None) -> logging.Logger:
    """
    Get a logger configured with the project's handlers.

    Handlers are attached once per logger name; later calls return the same
    logger untouched.

    Args:
        name: Logger name, usually ``__name__``.
        log_file: Optional path of a JSON log file. Defaults to ``LOG_FILE``.
        console_json: Use JSON on stderr instead of plain text. Defaults to ``LOG_JSON``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(settings.log_level.upper())

    if console_json is None:
        console_json = settings.log_json
    console = logging.StreamHandler(sys.stderr)
    if console_json:
        console.setFormatter(JsonFormatter())
    else:
        console.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        ))
    logger.addHandler(console)

    log_file = log_file or settings.log_file
    if log_file:
        logger.addHandler(_file_handler(log_file))

    return logger


def set_level(level: str | int, prefix: str = "charpredict") -> None:
    """Change the level of every logger already created under ``prefix``."""
    if isinstance(level, str):
        level = level.upper()
    for name in list(logging.root.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(level)
