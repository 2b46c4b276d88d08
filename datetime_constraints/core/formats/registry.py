"""
Registry of database formats available to the database rules.

The registry is the capability check for to_mysql_* / to_pg_* rules:
a format that is not enabled makes those rules unusable, which is
reported as a ConfigurationError when the rule is set up.
"""

from datetime_constraints.config import load_settings
from datetime_constraints.core.errors import ConfigurationError
from datetime_constraints.observability.logger import get_logger

from .base import DatabaseFormat
from .mysql import MySQLFormat
from .pg import PgFormat

logger = get_logger(__name__)

KNOWN_FORMATS: dict[str, type[DatabaseFormat]] = {
    "mysql": MySQLFormat,
    "pg": PgFormat,
}


class FormatRegistry:
    """
    Enabled database formats by name.

    Args:
        enabled: Names of formats to enable; defaults to the
                 DATETIME_CONSTRAINTS_FORMATS setting
    """

    def __init__(self, enabled: list[str] | None = None):
        if enabled is None:
            enabled = load_settings().enabled_formats

        self.formats: dict[str, DatabaseFormat] = {}
        for name in enabled:
            format_class = KNOWN_FORMATS.get(name)
            if format_class is None:
                raise ConfigurationError(
                    f"Unknown database format '{name}'. Known formats: {sorted(KNOWN_FORMATS)}"
                )
            self.formats[name] = format_class()

    def get(self, name: str) -> DatabaseFormat:
        """
        Return the formatter for ``name``.

        Raises:
            ConfigurationError: If the format is not enabled
        """
        try:
            return self.formats[name]
        except KeyError:
            logger.error(
                "Database format not available",
                extra={"format_name": name, "enabled_formats": sorted(self.formats)},
            )
            raise ConfigurationError(
                f"Database format '{name}' is required for this rule but is not enabled"
            ) from None

    def is_available(self, name: str) -> bool:
        return name in self.formats

    def __repr__(self) -> str:
        return f"FormatRegistry(enabled={sorted(self.formats)})"


_default_registry: FormatRegistry | None = None


def get_default_registry() -> FormatRegistry:
    """Registry built from settings on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = FormatRegistry()
    return _default_registry


def get_format(name: str, registry: FormatRegistry | None = None) -> DatabaseFormat:
    """Look up an enabled format in ``registry`` (default registry if None)."""
    return (registry or get_default_registry()).get(name)
