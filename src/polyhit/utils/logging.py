"""Logging utilities for Polyhit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from polyhit.core.hit_test import HitTarget
from polyhit.domain import Inclusion, Point


@dataclass
class QueryStats:
    """Statistics from a run of kernel queries."""

    classifications: dict[Inclusion, int] = field(
        default_factory=lambda: {inclusion: 0 for inclusion in Inclusion}
    )
    targets: dict[HitTarget, int] = field(
        default_factory=lambda: {target: 0 for target in HitTarget}
    )
    zoom_steps: int = 0

    @property
    def query_count(self) -> int:
        """Total number of containment and hit queries recorded."""
        return sum(self.classifications.values()) + sum(self.targets.values())


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
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

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
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

    logger = structlog.get_logger("polyhit")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class QueryLogger:
    """Logger for tracking kernel queries and their outcomes."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = QueryStats()

    def log_classification(
        self,
        point: Point,
        inclusion: Inclusion,
        contour_count: int,
    ) -> None:
        """Log a containment classification."""
        self._logger.debug(
            "Point classified",
            x=point.x,
            y=point.y,
            inclusion=inclusion.name,
            contours=contour_count,
        )
        self._stats.classifications[inclusion] += 1

    def log_hit(self, point: Point, target: HitTarget) -> None:
        """Log a hit-test result."""
        self._logger.debug("Hit tested", x=point.x, y=point.y, target=target.value)
        self._stats.targets[target] += 1

    def log_zoom(
        self,
        previous_scale: float,
        scale: float,
        offset: Point,
    ) -> None:
        """Log a zoom step."""
        self._logger.debug(
            "Zoom applied",
            previous_scale=previous_scale,
            scale=scale,
            offset_x=offset.x,
            offset_y=offset.y,
        )
        self._stats.zoom_steps += 1

    @property
    def stats(self) -> QueryStats:
        """Get current query statistics."""
        return self._stats
