"""
Centralized Logging Configuration for deptree
=============================================

Unified logging across all components: human-readable console output plus
optional structured JSON log files.
"""
import json
import logging
import logging.handlers
import os
import sys
import threading
from collections import defaultdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict


class DependencyTreeFormatter(logging.Formatter):
    """Formatter for deptree logs with structured JSON output."""

    def __init__(self):
        super().__init__()
        self.hostname = os.environ.get('HOSTNAME', 'localhost')

    def format(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'hostname': self.hostname,
            'process_id': os.getpid(),
            'thread_id': record.thread,
        }

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        # Extra fields that do not serialize are stored as strings
        if hasattr(record, 'extra_fields') and isinstance(record.extra_fields, dict):
            for key, value in record.extra_fields.items():
                try:
                    json.dumps(value)
                    log_entry[key] = value
                except (TypeError, ValueError):
                    log_entry[key] = str(value)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ComponentLogger:
    """Logger wrapper for a specific component with per-level counters."""

    def __init__(self, component_name: str):
        self.component_name = component_name
        self.logger = logging.getLogger(f"deptree.{component_name}")
        self.log_counts = defaultdict(int)
        self._lock = threading.RLock()

    def _log(self, level: str, message: str, **extra):
        with self._lock:
            self.log_counts[level] += 1

        log_method = getattr(self.logger, level)
        log_method(message, extra={'extra_fields': {'component': self.component_name, **extra}})

    def debug(self, message: str, **extra):
        """Log debug message."""
        self._log('debug', message, **extra)

    def info(self, message: str, **extra):
        """Log info message."""
        self._log('info', message, **extra)

    def warning(self, message: str, **extra):
        """Log warning message."""
        self._log('warning', message, **extra)

    def error(self, message: str, **extra):
        """Log error message."""
        self._log('error', message, **extra)

    def get_stats(self) -> Dict[str, Any]:
        """Get logging statistics for this component."""
        with self._lock:
            return {
                'component': self.component_name,
                'log_counts': dict(self.log_counts),
                'total_logs': sum(self.log_counts.values()),
            }


def setup_logging(
    log_level: str = "INFO",
    log_dir: str = "logs",
    component: str = "main",
    enable_console: bool = True,
    enable_file: bool = False,
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> ComponentLogger:
    """
    Setup centralized logging for deptree components.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files
        component: Component name for log identification
        enable_console: Enable console output
        enable_file: Enable JSON file output
        max_file_size: Maximum file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        ComponentLogger instance
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger("deptree")
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(console_handler)

    if enable_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path / f"{component}.log",
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(DependencyTreeFormatter())
        root_logger.addHandler(file_handler)

    return ComponentLogger(component)


def get_logger(component: str) -> ComponentLogger:
    """Get a logger for a specific component."""
    return ComponentLogger(component)
