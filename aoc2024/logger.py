"""
Structured logging system for aoc2024.

Provides centralized logging with console and optional file output, plus
per-run metrics (line counts and phase timings) for the puzzle solvers.
"""

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks how many input lines were read, used and skipped.
    """

    def __init__(
        self,
        name: str = "aoc2024",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = False,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console (stderr; stdout carries results)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers

        # Metrics tracking
        self.metrics = {
            "lines_read": 0,
            "records_parsed": 0,
            "lines_skipped": 0,
            "phase_timings": {},
        }

        # Console handler
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        # File handler
        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"aoc2024_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        """Internal logging method with context."""
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_line(self):
        """Count one input line seen by a pass."""
        self.metrics["lines_read"] += 1

    def record_parsed(self):
        """Count a line that contributed to a result."""
        self.metrics["records_parsed"] += 1

    def record_skipped(self, line: str, phase: str):
        """Count a line dropped by the leniency rule."""
        self.metrics["lines_skipped"] += 1
        self.debug("Skipping malformed line", phase=phase, line=line.rstrip("\n"))

    def record_phase(self, phase: str, seconds: float):
        """Accumulate elapsed time for a named phase."""
        timings = self.metrics["phase_timings"]
        timings[phase] = timings.get(phase, 0.0) + seconds

    @contextmanager
    def timed(self, phase: str) -> Iterator[None]:
        """Time the enclosed block and record it under `phase`."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.record_phase(phase, elapsed)
            self.debug(f"{phase} completed in {elapsed:.6f}s")

    def get_metrics(self) -> dict:
        """Return current metrics."""
        metrics_copy = self.metrics.copy()
        metrics_copy["phase_timings"] = dict(self.metrics["phase_timings"])
        metrics_copy["total_time"] = round(sum(metrics_copy["phase_timings"].values()), 6)
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Run Metrics ===")
        self.info(
            f"Lines: {metrics['lines_read']} read, "
            f"{metrics['records_parsed']} used, {metrics['lines_skipped']} skipped"
        )

        if metrics["phase_timings"]:
            self.info("Phase Timings:")
            for phase, seconds in metrics["phase_timings"].items():
                self.info(f"  {phase}: {seconds:.6f}s")
        self.info(f"Total time: {metrics['total_time']:.6f}s")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "aoc2024",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
