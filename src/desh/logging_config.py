"""Console logging with structlog."""

import sys

import structlog


def configure_logging(stream=None) -> None:
    """Configure structlog for the desh command line."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
    )


def get_logger(name: str = "desh"):
    """Get a logger instance."""
    return structlog.get_logger(name)
