"""
Application constants for the pager settings service

Centralizes configuration key names, limits and logging settings so that
no module builds storage keys or magic numbers on its own.
"""

from typing import Final


class FormSettings:
    """Identity of the settings form and its configuration object"""

    FORM_ID: Final[str] = "pager_for_content_type_settings"
    CONFIG_NAME: Final[str] = "pager_for_content_type.settings"
    TEXT_FIELD_SIZE: Final[int] = 30
    # Lower-cased checkbox values that mean unchecked
    CHECKBOX_OFF_VALUES: Final[frozenset[str]] = frozenset({"", "0", "false", "off", "no"})


class PagerLimits:
    """Validation limits for pager settings"""

    MAX_TEXT_LENGTH: Final[int] = 64
    MORE_LINKS_OPTIONS: Final[tuple[int, ...]] = (0, 4, 6, 10)
    DEFAULT_MORE_LINKS: Final[int] = 0


class ConfigKeys:
    """Flat configuration key names owned by the pager feature"""

    GLOBAL_PREVIOUS_TEXT: Final[str] = "pager_for_content_type_previous_text"
    GLOBAL_NEXT_TEXT: Final[str] = "pager_for_content_type_next_text"

    ENABLED_SUFFIX: Final[str] = "_pager_for_content_type_on"
    AUTHOR_SUFFIX: Final[str] = "_pager_for_content_type_author"
    PREVIOUS_TEXT_SUFFIX: Final[str] = "_pager_for_content_type_previous_text"
    NEXT_TEXT_SUFFIX: Final[str] = "_pager_for_content_type_next_text"
    MORE_LINKS_SUFFIX: Final[str] = "_pager_for_content_type_more_links"

    @staticmethod
    def enabled(content_type: str) -> str:
        return f"{content_type}{ConfigKeys.ENABLED_SUFFIX}"

    @staticmethod
    def author(content_type: str) -> str:
        return f"{content_type}{ConfigKeys.AUTHOR_SUFFIX}"

    @staticmethod
    def previous_text(content_type: str) -> str:
        return f"{content_type}{ConfigKeys.PREVIOUS_TEXT_SUFFIX}"

    @staticmethod
    def next_text(content_type: str) -> str:
        return f"{content_type}{ConfigKeys.NEXT_TEXT_SUFFIX}"

    @staticmethod
    def more_links(content_type: str) -> str:
        return f"{content_type}{ConfigKeys.MORE_LINKS_SUFFIX}"


class ErrorCodes:
    """Error codes carried by application exceptions"""

    GENERAL_ERROR: Final[str] = "GENERAL_ERROR"
    VALIDATION_ERROR: Final[str] = "VALIDATION_ERROR"
    STORE_UNAVAILABLE: Final[str] = "STORE_UNAVAILABLE"


class DatabaseSettings:
    """Database connection and pool configuration"""

    POOL_RECYCLE_SECONDS: Final[int] = 3600  # 1 hour
    CONNECTION_TIMEOUT_SECONDS: Final[int] = 30


class LoggingSettings:
    """Logging file names, sizes and rotation settings"""

    LOG_DIR: Final[str] = "logs"
    MAIN_LOG_FILE: Final[str] = "pager_settings.log"
    JSON_LOG_FILE: Final[str] = "pager_settings.json.log"
    ERROR_LOG_FILE: Final[str] = "errors.log"
    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT: Final[int] = 5
