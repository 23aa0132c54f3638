"""HTTP middlewares for the catalog application."""

from catalog.middlewares.correlation_id import CorrelationIDMiddleware
from catalog.middlewares.logging_context import LoggingContextMiddleware

__all__ = ["CorrelationIDMiddleware", "LoggingContextMiddleware"]
