"""
Resolution of rule parameters against a submission.

A parameter is either a literal or a reference to another field of the
same submission, written {"field": "<name>"}. Resolution happens before a
rule runs; rules only ever see the resolved values.
"""

from typing import Any


def is_field_reference(parameter: Any) -> bool:
    return isinstance(parameter, dict) and set(parameter) == {"field"}


def resolve_parameter(parameter: Any, record: dict[str, Any]) -> Any:
    """
    Resolve one parameter.

    Args:
        parameter: Literal value or {"field": name}
        record: Raw values of the submission

    Returns:
        The literal, or the referenced field's raw value (None if absent).
        Numbers are returned as strings, the form they are submitted in.
    """
    if is_field_reference(parameter):
        parameter = record.get(parameter["field"])

    if isinstance(parameter, (int, float)) and not isinstance(parameter, bool):
        return str(parameter)
    return parameter


def referenced_fields(parameters: dict[str, Any]) -> list[str]:
    """Names of sibling fields a parameter mapping depends on."""
    return [p["field"] for p in parameters.values() if is_field_reference(p)]
