"""
Logging Utilities
=================
One logger per area (app, translation, api, database). Each writes to its
own rotating file and the console, and mirrors warnings into the in-memory
buffer served by ``/logs``.
"""
import os
import logging
import threading
from collections import deque
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import List, Dict, Optional
from ae_lingo.config import config


# attribute -> (logger name, file, buffer source)
LOGGERS = {
    'app_logger': ('ae_lingo.app', 'app.log', 'APP'),
    'translation_logger': ('ae_lingo.translation', 'translations.log', 'TRANSLATE'),
    'api_logger': ('ae_lingo.api', 'api.log', 'API'),
    'db_logger': ('ae_lingo.database', 'database.log', 'DB'),
}

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class LogBuffer:
    """Bounded, thread-safe list of recent log lines with increasing ids."""

    def __init__(self, max_size: int = None):
        self._entries = deque(maxlen=max_size or config.logging.log_buffer_size)
        self._lock = threading.Lock()
        self._next_id = 1

    def add(self, level: str, source: str, message: str) -> Dict:
        with self._lock:
            entry = {
                'id': self._next_id,
                'timestamp': datetime.now().strftime('%H:%M:%S.%f')[:-3],
                'level': level,
                'source': source,
                'message': message
            }
            self._next_id += 1
            self._entries.append(entry)
            return entry

    def entries(self, since_id: int = 0) -> List[Dict]:
        """Entries with an id greater than ``since_id``, oldest first."""
        with self._lock:
            return [e for e in self._entries if e['id'] > since_id]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._next_id = 1


log_buffer = LogBuffer()


class BufferHandler(logging.Handler):
    """Mirrors WARNING and above into the log buffer."""

    def __init__(self, buffer: LogBuffer, source: str):
        super().__init__(level=logging.WARNING)
        self.buffer = buffer
        self.source = source

    def emit(self, record):
        self.buffer.add(record.levelname, self.source, record.getMessage())


class AppLogger:
    """Holds the per-area loggers as attributes (``app_logger``, ``api_logger``, ...)."""

    def __init__(self, log_dir: str = None):
        self.log_dir = log_dir or config.paths.log_folder
        os.makedirs(self.log_dir, exist_ok=True)
        self.level = logging.DEBUG if config.logging.verbose_debug else logging.INFO

        for attribute, (name, filename, source) in LOGGERS.items():
            setattr(self, attribute, self._build(name, filename, source))

    def _build(self, name: str, filename: str, source: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(self.level)
        if logger.handlers:
            return logger

        file_handler = RotatingFileHandler(
            os.path.join(self.log_dir, filename),
            maxBytes=config.logging.log_file_max_bytes,
            backupCount=config.logging.log_file_backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))

        for handler in (file_handler, console_handler, BufferHandler(log_buffer, source)):
            logger.addHandler(handler)
        return logger


_logger_instance: Optional[AppLogger] = None


def get_logger() -> AppLogger:
    """Get or create the global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = AppLogger()
    return _logger_instance


def debug_print(message: str, level: str = 'INFO', source: str = 'DEBUG'):
    """Record a progress line for the frontend console; echo it when VERBOSE_DEBUG is on."""
    log_buffer.add(level, source, message)
    if config.logging.verbose_debug:
        print(message)
