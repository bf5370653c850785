"""Package-wide constants."""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
"""Log level names accepted by settings and ``setup_logging``."""
