"""Logging utilities for roughsketch."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import structlog

from roughsketch.domain import Drawable, OpSetType

_installed_handlers: list[logging.Handler] = []


@dataclass
class GenerationStats:
    """Statistics accumulated over a generation run."""

    drawables: int = 0
    op_sets: int = 0
    ops: int = 0
    fill_sets: int = 0
    degenerate: int = 0

    @property
    def avg_ops_per_drawable(self) -> float:
        """Average number of operations per drawable."""
        if self.drawables:
            return self.ops / self.drawables
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so it never mixes with SVG or JSON written
    to stdout.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output entirely

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by a previous call
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("roughsketch")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking generated drawables and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = GenerationStats()

    def log_drawable(self, drawable: Drawable) -> None:
        """Log a finished drawable."""
        fill_sets = sum(1 for s in drawable.sets if s.type is not OpSetType.PATH)
        self._logger.debug(
            "Drawable generated",
            shape=drawable.shape,
            sets=len(drawable.sets),
            ops=drawable.op_count,
            fill_sets=fill_sets,
            seed=drawable.options.seed,
        )
        self._stats.drawables += 1
        self._stats.op_sets += len(drawable.sets)
        self._stats.ops += drawable.op_count
        self._stats.fill_sets += fill_sets

    def log_degenerate(self, shape: str, reason: str) -> None:
        """Log a shape whose geometry collapsed."""
        self._logger.debug("Degenerate shape", shape=shape, reason=reason)
        self._stats.degenerate += 1

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
