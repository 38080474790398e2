import logging

from rich.logging import RichHandler

from wayfarer.core.config import settings


def setup_logging(level: str | int | None = None) -> None:
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
