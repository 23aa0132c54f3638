"""
Application-level constants for hardcoded business logic.

These values represent core application behavior and should NEVER be changed
via environment variables or configuration.

For configurable values (database URL, logging, etc.),
see catalog/settings.py where values can be overridden via environment variables.
"""

# ============================================================================
# Logging Constants
# ============================================================================

# Maximum size (bytes) of a single JSON log line accepted by Loki
LOKI_MAX_LOG_SIZE_BYTES = 256 * 1024

# Correlation IDs are truncated to this many characters
CORRELATION_ID_LENGTH = 8


# ============================================================================
# Catalog URLs
# ============================================================================

AUTHOR_LIST_URL = "/authors"
AUTHOR_URL_TEMPLATE = "/authors/{id}"
BOOK_URL_TEMPLATE = "/books/{id}"

# Projection used by the detail and delete views
BOOK_SUMMARY_FIELDS = ("title", "summary")


# ============================================================================
# View Names
# ============================================================================

VIEW_AUTHOR_LIST = "author_list"
VIEW_AUTHOR_DETAIL = "author_detail"
VIEW_AUTHOR_FORM = "author_form"
VIEW_AUTHOR_DELETE = "author_delete"
VIEW_ERROR = "error"


# ============================================================================
# Author Fields
# ============================================================================

# Column length of first_name/family_name, checked after escaping
NAME_MAX_LENGTH = 100
