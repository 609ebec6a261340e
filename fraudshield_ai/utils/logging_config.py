"""
Structured logging configuration for FraudShield AI.

JSON logs in production, readable lines in development, plus a small
in-process metrics collector for the admin endpoints.
"""

import json
import logging
import sys
import time
import traceback
from collections import Counter, deque
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from pathlib import Path
from typing import Any, Deque, Dict, Optional

from fraudshield_ai.config import settings


# Context variables for request tracking
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if request_id_var.get():
            log_data["request_id"] = request_id_var.get()

        if hasattr(record, "extra_data"):
            log_data["data"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        log_data["environment"] = settings.environment

        return json.dumps(log_data, ensure_ascii=False)


class StructuredLogger:
    """
    Wrapper for structured logging with additional context.

    Usage:
        logger = StructuredLogger("fraudshield_ai.api")
        logger.info("Message analyzed", classification="fraud", score=100)
        logger.error("Analysis failed", error=str(e), exc_info=True)
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, **kwargs):
        if not self._logger.isEnabledFor(level):
            return
        record = self._logger.makeRecord(
            name=self._logger.name,
            level=level,
            fn="",
            lno=0,
            msg=message,
            args=(),
            exc_info=None,
        )
        if kwargs:
            record.extra_data = kwargs
        self._logger.handle(record)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        if exc_info:
            self._logger.error(message, exc_info=True, extra={"extra_data": kwargs})
        else:
            self._log(logging.ERROR, message, **kwargs)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: Optional[str] = None,
):
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatting (True for prod, False for dev)
        log_file: Optional file path for file logging
    """
    log_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_format:
        console_handler.setFormatter(JSONFormatter())
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
        )
        console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFormatter())  # Always JSON for files
        root_logger.addHandler(file_handler)

    # Suppress noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)


# ============== METRICS ==============


class MetricsCollector:
    """
    In-process counters and latency samples for the admin endpoints.

    Usage:
        metrics.increment("analysis.text.total")
        metrics.timing("analysis.text.latency", 0.002)
    """

    def __init__(self, max_timings: int = 1000):
        self._counters: Counter = Counter()
        self._timings: Dict[str, Deque[float]] = {}
        self._max_timings = max_timings
        self._start_time = time.time()

    def increment(self, name: str, value: int = 1):
        self._counters[name] += value

    def timing(self, name: str, seconds: float):
        # Only the most recent samples are kept
        if name not in self._timings:
            self._timings[name] = deque(maxlen=self._max_timings)
        self._timings[name].append(seconds)

    def get_stats(self) -> Dict[str, Any]:
        timings = {
            name: {
                "count": len(samples),
                "min": min(samples),
                "max": max(samples),
                "avg": sum(samples) / len(samples),
            }
            for name, samples in self._timings.items()
            if samples
        }
        return {
            "uptime_seconds": time.time() - self._start_time,
            "counters": dict(self._counters),
            "timings": timings,
        }

    def reset(self):
        self._counters.clear()
        self._timings.clear()


metrics = MetricsCollector()


# ============== DECORATORS ==============


def track_analysis(modality: str):
    """
    Count calls, errors and classifications of an analysis function
    returning a result dict, and record its latency.
    """
    prefix = f"analysis.{modality}"

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            metrics.increment(f"{prefix}.total")
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                metrics.increment(f"{prefix}.errors")
                raise
            metrics.timing(f"{prefix}.latency", time.perf_counter() - start)
            metrics.increment(f"{prefix}.classification.{result.get('classification', 'unknown')}")
            return result

        return wrapper

    return decorator


def init_logging():
    """Initialize logging based on environment settings."""
    is_prod = settings.is_production
    default_level = "INFO" if is_prod else "DEBUG"
    setup_logging(
        level=settings.log_level or default_level,
        json_format=is_prod,
        log_file=settings.log_file if is_prod else None,
    )
