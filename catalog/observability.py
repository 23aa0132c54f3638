"""Event recorders handed to the controller for observability side effects."""

import logging
from typing import Any

from catalog.logging import logger as default_logger


class LoggingEventRecorder:
    """
    EventRecorder that writes every event as one log line.

    Event fields are attached to the record through ``extra`` so the JSON
    formatter emits them as separate keys.
    """

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.INFO
    ):
        self.logger = logger or default_logger
        self.level = level

    def record(self, event: str, **fields: Any) -> None:
        summary = ", ".join(f"{key}: {value}" for key, value in fields.items())
        self.logger.log(
            self.level,
            f"{event}: {summary}" if summary else event,
            extra={"event": event, **{f"event_{k}": v for k, v in fields.items()}},
        )

