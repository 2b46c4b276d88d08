"""
Unit tests for rule engine and rule configuration.
"""

from datetime import date, datetime

import pytest

from datetime_constraints.core.errors import ConfigurationError
from datetime_constraints.core.models import FormSubmission
from datetime_constraints.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine, field_ref

PATTERN = "%m/%d/%Y"


def submission(**fields) -> FormSubmission:
    return FormSubmission(submission_id="SUB001", fields=fields)


class TestRuleEngine:
    """Tests for RuleEngine"""

    def test_validate_submission_all_pass(self):
        """Test validation passes and stores coerced values"""
        rules = RuleConfigBuilder() \
            .add_to_datetime("start", PATTERN) \
            .add_after_datetime("end", PATTERN, field_ref("start")) \
            .build()

        engine = RuleEngine(rules)
        result = engine.validate_submission(submission(start="02/17/2005", end="03/01/2005", note="hi"))

        assert result.passed is True
        assert result.valid["start"] == datetime(2005, 2, 17)
        assert str(result.valid["start"]) == "02/17/2005"
        assert result.valid["end"] == datetime(2005, 3, 1)
        assert result.valid["note"] == "hi"
        assert result.passed_rules == ["start_to_datetime", "end_after_datetime"]

    def test_validate_submission_with_failures(self):
        """Test a failing rule marks the field invalid"""
        rules = RuleConfigBuilder() \
            .add_to_datetime("start", PATTERN) \
            .add_after_datetime("end", PATTERN, field_ref("start")) \
            .build()

        engine = RuleEngine(rules)
        result = engine.validate_submission(submission(start="02/17/2005", end="01/01/2005"))

        assert result.passed is False
        assert result.invalid == ["end"]
        assert "end" not in result.valid
        assert "start" in result.valid
        assert result.failed_rules == ["end_after_datetime"]
        assert result.has_invalid()

    def test_comparison_uses_raw_sibling_value(self):
        """Test a sibling's coerced value does not leak into comparisons"""
        rules = RuleConfigBuilder() \
            .add_to_mysql_datetime("start", PATTERN) \
            .add_after_datetime("end", PATTERN, field_ref("start")) \
            .build()

        result = RuleEngine(rules).validate_submission(submission(start="02/17/2005", end="03/01/2005"))

        assert result.passed is True
        assert result.valid["start"] == "2005-02-17 00:00:00"

    def test_required_field_missing(self):
        """Test required fields without a value are reported as missing"""
        builder = RuleConfigBuilder().add_required("start").add_to_datetime("start", PATTERN)
        engine = RuleEngine(builder.build(), required=builder.required)

        result = engine.validate_submission(submission(start="  "))

        assert result.passed is False
        assert result.missing == ["start"]
        assert result.failed_rules == []
        assert result.has_missing()

    def test_empty_optional_field_skipped(self):
        """Test rules do not run on empty optional fields"""
        rules = RuleConfigBuilder().add_to_datetime("end", PATTERN).build()

        result = RuleEngine(rules).validate_submission(submission(end=""))

        assert result.passed is True
        assert "end" not in result.valid
        assert result.passed_rules == []

    def test_last_coerced_value_wins(self):
        """Test a later passing rule replaces the stored value"""
        rules = RuleConfigBuilder() \
            .add_to_datetime("start", PATTERN) \
            .add_to_mysql_date("start", PATTERN) \
            .build()

        result = RuleEngine(rules).validate_submission(submission(start="02/17/2005"))

        assert result.valid["start"] == "2005-02-17"

    def test_one_failure_invalidates_field(self):
        """Test a field stays invalid even if a later rule passes"""
        rules = RuleConfigBuilder() \
            .add_before_datetime("start", PATTERN, "01/01/2005") \
            .add_to_datetime("start", PATTERN) \
            .build()

        result = RuleEngine(rules).validate_submission(submission(start="02/17/2005"))

        assert result.invalid == ["start"]
        assert "start" not in result.valid
        assert result.passed_rules == ["start_to_datetime"]

    def test_ymd_rule(self):
        """Test year/month/day fields combine into one value"""
        rules = RuleConfigBuilder() \
            .add_ymd_to_datetime("birth_year", field_ref("birth_month"), field_ref("birth_day")) \
            .build()

        engine = RuleEngine(rules)

        ok = engine.validate_submission(submission(birth_year="2005", birth_month="2", birth_day="17"))
        bad = engine.validate_submission(submission(birth_year="2005", birth_month="2", birth_day="31"))

        assert ok.valid["birth_year"] == datetime(2005, 2, 17)
        assert bad.invalid == ["birth_year"]

    def test_relative_to_today_with_fixed_date(self):
        """Test before_today/after_today with a configured date"""
        rules = RuleConfigBuilder() \
            .add_before_today("born", PATTERN, today="2005-02-17") \
            .add_after_today("due", PATTERN, today="2005-02-17") \
            .build()

        result = RuleEngine(rules).validate_submission(submission(born="02/17/2005", due="02/16/2005"))

        assert "born" in result.valid
        assert result.invalid == ["due"]

    def test_between_datetimes_rule(self):
        """Test between_datetimes through the engine"""
        rules = RuleConfigBuilder() \
            .add_between_datetimes("event", PATTERN, field_ref("opens"), field_ref("closes")) \
            .build()

        engine = RuleEngine(rules)
        fields = {"opens": "01/01/2005", "closes": "03/01/2005"}

        assert engine.validate_submission(submission(event="02/17/2005", **fields)).passed is True
        assert engine.validate_submission(submission(event="03/01/2005", **fields)).passed is False

    def test_database_rules(self, all_formats):
        """Test database rules produce formatted strings"""
        rules = RuleConfigBuilder() \
            .add_to_mysql_datetime("a") \
            .add_to_mysql_timestamp("b") \
            .add_to_pg_datetime("c", PATTERN) \
            .build()

        result = RuleEngine(rules, formats=all_formats).validate_submission(
            submission(a="2005-02-17 00:00:00", b="2005-02-17 00:00:00", c="02/17/2005")
        )

        assert result.valid == {
            "a": "2005-02-17 00:00:00",
            "b": "20050217000000",
            "c": "2005-02-17 00:00:00",
        }

    def test_missing_format_fails_at_construction(self, mysql_only):
        """Test a rule needing a disabled format stops the engine from building"""
        rules = RuleConfigBuilder().add_to_pg_datetime("created").build()

        with pytest.raises(ConfigurationError):
            RuleEngine(rules, formats=mysql_only)

    def test_validate_batch(self):
        """Test batch validation"""
        rules = RuleConfigBuilder().add_to_datetime("d", PATTERN).build()
        engine = RuleEngine(rules)

        submissions = [
            FormSubmission(submission_id="S1", fields={"d": "02/17/2005"}),
            FormSubmission(submission_id="S2", fields={"d": "02/30/2005"}),
        ]
        results = engine.validate_batch(submissions)

        assert [r.submission_id for r in results] == ["S1", "S2"]
        assert results[0].passed is True
        assert results[1].passed is False

    def test_disabled_rules_skipped(self):
        """Test that disabled rules are skipped"""
        rules = [
            {
                "rule_name": "d_check",
                "rule_type": "to_datetime",
                "field_name": "d",
                "parameters": {"pattern": PATTERN},
                "severity": "error",
                "enabled": False
            }
        ]

        result = RuleEngine(rules).validate_submission(submission(d="not a date"))
        assert result.passed is True

    def test_warning_severity_does_not_fail_submission(self):
        """Test that warning severity keeps the raw value and passes"""
        rules = [
            {
                "rule_name": "d_soft_check",
                "rule_type": "to_datetime",
                "field_name": "d",
                "parameters": {"pattern": PATTERN},
                "severity": "warning",
            }
        ]

        result = RuleEngine(rules).validate_submission(submission(d="not a date"))

        assert result.passed is True
        assert result.warnings == ["d_soft_check"]
        assert result.valid["d"] == "not a date"

    def test_get_rule_summary(self):
        """Test rule summary statistics"""
        rules = RuleConfigBuilder() \
            .add_to_datetime("start", PATTERN) \
            .add_after_datetime("end", PATTERN, field_ref("start")) \
            .add_to_mysql_timestamp("stamp") \
            .build()

        summary = RuleEngine(rules, required=["start"]).get_rule_summary()

        assert summary["total_rules"] == 3
        assert summary["rules_by_type"]["after_datetime"] == 1
        assert summary["rules_by_severity"] == {"error": 3}
        assert summary["required_fields"] == ["start"]
        assert summary["referenced_fields"] == ["start"]

    def test_invalid_rule_type_raises_error(self):
        """Test that invalid rule type raises ValueError"""
        rules = [
            {
                "rule_name": "invalid_rule",
                "rule_type": "unknown_type",
                "field_name": "field",
                "parameters": {},
            }
        ]

        with pytest.raises(ValueError) as exc_info:
            RuleEngine(rules)

        assert "unknown rule type" in str(exc_info.value).lower()

    def test_missing_parameter_raises_error(self):
        """Test a rule without its required parameters is rejected"""
        rules = [{"rule_name": "no_pattern", "rule_type": "to_datetime", "field_name": "d"}]

        with pytest.raises(ValueError) as exc_info:
            RuleEngine(rules)

        assert "no_pattern" in str(exc_info.value)

    def test_invalid_severity_raises_error(self):
        """Test model validation of rule dictionaries"""
        rules = [
            {
                "rule_name": "bad_severity",
                "rule_type": "to_datetime",
                "field_name": "d",
                "parameters": {"pattern": PATTERN},
                "severity": "fatal",
            }
        ]

        with pytest.raises(ValueError):
            RuleEngine(rules)


class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    def test_load_rules_from_yaml(self, profile_path):
        """Test loading rules from YAML file"""
        loader = RuleConfigLoader(profile_path)
        rules = loader.load_rules()

        assert len(rules) == 4
        assert rules[0]["rule_type"] == "to_datetime"
        assert rules[0]["rule_name"] == "start_date_to_datetime_0"
        assert rules[1]["parameters"]["target"] == {"field": "start_date"}
        assert rules[2]["rule_type"] == "to_mysql_datetime"
        assert rules[2]["parameters"] == {}
        assert loader.load_required() == ["start_date"]

    def test_profile_end_to_end(self, profile_path):
        """Test a YAML profile drives the engine"""
        loader = RuleConfigLoader(profile_path)
        engine = RuleEngine(loader.load_rules(), required=loader.load_required())

        result = engine.validate_submission(submission(
            start_date="02/17/2005",
            end_date="03/01/2005",
            created_at="2005-02-17 10:00:00",
            birth_year="1980",
            birth_month="7",
            birth_day="4",
        ))

        assert result.passed is True
        assert result.valid["birth_year"] == datetime(1980, 7, 4)
        assert result.valid["created_at"] == "2005-02-17 10:00:00"

    def test_unquoted_yaml_date_as_today(self, tmp_path):
        """Test YAML dates are accepted for the 'today' parameter"""
        path = tmp_path / "today.yaml"
        path.write_text(
            "rules:\n"
            "  born:\n"
            "    - type: before_today\n"
            "      params:\n"
            "        pattern: '%Y-%m-%d'\n"
            "        today: 2005-02-17\n"
        )

        rules = RuleConfigLoader(path).load_rules()
        assert rules[0]["parameters"]["today"] == date(2005, 2, 17)

        result = RuleEngine(rules).validate_submission(submission(born="2005-02-18"))
        assert result.invalid == ["born"]

    def test_missing_file(self, tmp_path):
        """Test a missing profile raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader(tmp_path / "nope.yaml")

    def test_missing_rules_section(self, tmp_path):
        """Test a profile without 'rules' is rejected"""
        path = tmp_path / "empty.yaml"
        path.write_text("required: [a]\n")

        with pytest.raises(ValueError) as exc_info:
            RuleConfigLoader(path).load_rules()

        assert "rules" in str(exc_info.value)

    def test_invalid_severity(self, tmp_path):
        """Test invalid severity values are rejected"""
        path = tmp_path / "bad.yaml"
        path.write_text("rules:\n  d:\n    - type: to_mysql_date\n      severity: fatal\n")

        with pytest.raises(ValueError) as exc_info:
            RuleConfigLoader(path).load_rules()

        assert "severity" in str(exc_info.value).lower()

    def test_rules_must_be_list(self, tmp_path):
        """Test a field's rules must be a list"""
        path = tmp_path / "bad.yaml"
        path.write_text("rules:\n  d:\n    type: to_mysql_date\n")

        with pytest.raises(ValueError):
            RuleConfigLoader(path).load_rules()


class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_none_parameters_dropped(self):
        """Test optional parameters left as None are not emitted"""
        rules = RuleConfigBuilder().add_to_mysql_datetime("d").build()

        assert rules[0]["parameters"] == {}
        assert rules[0]["rule_name"] == "d_to_mysql_datetime"

    def test_field_ref(self):
        """Test field_ref produces a sibling reference"""
        assert field_ref("start") == {"field": "start"}
