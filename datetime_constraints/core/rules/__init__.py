"""
Rule engine and rule configuration management.
"""

from .rule_config import RuleConfigBuilder, RuleConfigLoader, field_ref
from .rule_engine import RuleEngine

__all__ = [
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "field_ref",
]
