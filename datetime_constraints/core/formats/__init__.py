"""
Database date/time formats (MySQL, PostgreSQL) and their registry.
"""

from .base import DatabaseFormat
from .mysql import MySQLFormat
from .pg import PgFormat
from .registry import FormatRegistry, get_default_registry, get_format

__all__ = [
    "DatabaseFormat",
    "MySQLFormat",
    "PgFormat",
    "FormatRegistry",
    "get_default_registry",
    "get_format",
]
