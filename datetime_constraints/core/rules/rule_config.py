"""
Rule configuration management.

Loads date/time validation profiles from YAML files and provides a
builder for assembling them in code.
"""

from pathlib import Path
from typing import Any

import yaml


def field_ref(name: str) -> dict[str, str]:
    """Parameter value that refers to another field of the submission."""
    return {"field": name}


class RuleConfigLoader:
    """
    Loads validation profiles from YAML configuration files.

    Expected YAML format:
    ```yaml
    required:
      - start_date

    rules:
      start_date:
        - type: to_datetime
          params:
            pattern: "%m/%d/%Y"

      end_date:
        - type: after_datetime
          params:
            pattern: "%m/%d/%Y"
            target: {field: start_date}

      created_at:
        - type: to_mysql_datetime
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML profile
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")
        self._config: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._config is None:
            with open(self.config_path) as f:
                config = yaml.safe_load(f)
            if not config or "rules" not in config:
                raise ValueError("Configuration file must contain 'rules' section")
            self._config = config
        return self._config

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse rule definitions.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            ValueError: If YAML is invalid or missing required fields
        """
        field_rules = self._load()["rules"] or {}
        if not isinstance(field_rules, dict):
            raise ValueError("'rules' must map field names to rule lists")

        rules = []
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise ValueError(f"Rules for field '{field_name}' must be a list")

            for idx, rule_def in enumerate(field_rule_list):
                rules.append(self._parse_rule(field_name, rule_def, idx))

        return rules

    def load_required(self) -> list[str]:
        """Return the profile's required field names (empty if none)."""
        required = self._load().get("required") or []
        if not isinstance(required, list) or not all(isinstance(name, str) for name in required):
            raise ValueError("'required' must be a list of field names")
        return required

    def _parse_rule(self, field_name: str, rule_def: Any, idx: int) -> dict[str, Any]:
        """
        Parse a single rule definition.

        A bare string is shorthand for a rule without parameters
        (``- to_mysql_datetime``).
        """
        if isinstance(rule_def, str):
            rule_def = {"type": rule_def}

        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise ValueError(f"Rule for field '{field_name}' is missing 'type'")

        rule_type = rule_def["type"]
        rule_name = rule_def.get("name", f"{field_name}_{rule_type}_{idx}")
        parameters = rule_def.get("params", rule_def.get("parameters", {})) or {}

        severity = rule_def.get("severity", "error")
        if severity not in ("error", "warning"):
            raise ValueError(f"Invalid severity '{severity}' for rule '{rule_name}'. Must be 'error' or 'warning'")

        return {
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "severity": severity,
            "enabled": rule_def.get("enabled", True),
        }


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.

    Any target or calendar-part argument may be a literal string or
    ``field_ref("other_field")``.
    """

    def __init__(self):
        self.rules: list[dict[str, Any]] = []
        self.required: list[str] = []

    def _add(
        self,
        field_name: str,
        rule_type: str,
        parameters: dict[str, Any],
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": f"{field_name}_{rule_type}",
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": {k: v for k, v in parameters.items() if v is not None},
            "severity": severity,
            "enabled": True,
        })
        return self

    def add_required(self, field_name: str) -> "RuleConfigBuilder":
        self.required.append(field_name)
        return self

    def add_to_datetime(self, field_name: str, pattern: str, severity: str = "error") -> "RuleConfigBuilder":
        return self._add(field_name, "to_datetime", {"pattern": pattern}, severity)

    def add_ymd_to_datetime(
        self,
        field_name: str,
        month: Any,
        day: Any,
        year: Any = None,
        hour: Any = None,
        minute: Any = None,
        second: Any = None,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a ymd_to_datetime rule; ``year`` defaults to the field itself."""
        return self._add(
            field_name,
            "ymd_to_datetime",
            {"year": year, "month": month, "day": day, "hour": hour, "minute": minute, "second": second},
            severity,
        )

    def add_before_today(self, field_name: str, pattern: str, today: str | None = None) -> "RuleConfigBuilder":
        return self._add(field_name, "before_today", {"pattern": pattern, "today": today})

    def add_after_today(self, field_name: str, pattern: str, today: str | None = None) -> "RuleConfigBuilder":
        return self._add(field_name, "after_today", {"pattern": pattern, "today": today})

    def add_before_datetime(self, field_name: str, pattern: str, target: Any) -> "RuleConfigBuilder":
        return self._add(field_name, "before_datetime", {"pattern": pattern, "target": target})

    def add_after_datetime(self, field_name: str, pattern: str, target: Any) -> "RuleConfigBuilder":
        return self._add(field_name, "after_datetime", {"pattern": pattern, "target": target})

    def add_between_datetimes(
        self,
        field_name: str,
        pattern: str,
        target1: Any,
        target2: Any,
    ) -> "RuleConfigBuilder":
        return self._add(
            field_name,
            "between_datetimes",
            {"pattern": pattern, "target1": target1, "target2": target2},
        )

    def add_to_mysql_datetime(self, field_name: str, pattern: str | None = None) -> "RuleConfigBuilder":
        return self._add(field_name, "to_mysql_datetime", {"pattern": pattern})

    def add_to_mysql_date(self, field_name: str, pattern: str | None = None) -> "RuleConfigBuilder":
        return self._add(field_name, "to_mysql_date", {"pattern": pattern})

    def add_to_mysql_timestamp(self, field_name: str, pattern: str | None = None) -> "RuleConfigBuilder":
        return self._add(field_name, "to_mysql_timestamp", {"pattern": pattern})

    def add_to_pg_datetime(self, field_name: str, pattern: str | None = None) -> "RuleConfigBuilder":
        return self._add(field_name, "to_pg_datetime", {"pattern": pattern})

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules
