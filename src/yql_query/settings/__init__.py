"""Settings for yql-query built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority)
    2. ``.env`` file in the working directory
    3. Default Values in code (lowest priority)

Environment Variable Naming:
    - Format: YQL_SETTING_NAME
    - Case: UPPER_SNAKE_CASE

Available Settings:
    - YQL_STRICT_CONDITIONS: raise on unsupported condition input
    - YQL_LOG_LEVEL: default level for setup_logging()
    - YQL_LOG_RENDERED_STATEMENTS: debug-log every rendered statement

Quick Start:
    >>> from yql_query.settings import get_settings
    >>> settings = get_settings()
    >>> settings.strict_conditions
    False
"""

from .main import _Settings, get_settings, _reload_settings
from .base import YqlBaseSettings

__all__ = [
    "get_settings",
]
