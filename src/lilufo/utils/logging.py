"""Logging utilities for Lil' UFO."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "lilufo"


@dataclass
class NormalizationStats:
    """Statistics from a normalization run."""

    file_count: int = 0
    point_count: int = 0
    defaulted_count: int = 0
    failed_files: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("lilufo")
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


class NormalizationLogger:
    """Logger for tracking outline normalization progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = NormalizationStats()

    def log_run_start(self, package_root: Path, file_count: int) -> None:
        """Log start of a normalization run and reset the statistics."""
        self._stats = NormalizationStats(start_time=time.time())
        self._logger.info(
            "Normalization started",
            package=str(package_root),
            files=file_count,
        )

    def log_coordinate_defaulted(self, path: Path, attribute: str, value: str) -> None:
        """Log a coordinate that could not be parsed and was treated as zero."""
        self._logger.warning(
            "Unparsable coordinate treated as zero",
            file=str(path),
            attribute=attribute,
            value=value,
        )
        self._stats.defaulted_count += 1

    def log_file_complete(self, path: Path, points: int, all_even: bool) -> None:
        """Log a processed outline file."""
        self._stats.file_count += 1
        self._stats.point_count += points
        if all_even:
            self._logger.debug("Outline normalized", file=str(path), points=points)
        else:
            self._stats.failed_files.append(str(path))
            self._logger.error("Outline verification failed", file=str(path), points=points)

    def log_run_complete(self) -> None:
        """Log end of a normalization run."""
        self._stats.end_time = time.time()
        self._logger.info(
            "Normalization complete",
            files=self._stats.file_count,
            points=self._stats.point_count,
            defaulted=self._stats.defaulted_count,
            failed=len(self._stats.failed_files),
            duration_s=round(self._stats.duration_seconds, 3),
        )

    @property
    def stats(self) -> NormalizationStats:
        """Get current normalization statistics."""
        return self._stats
