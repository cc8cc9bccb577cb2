"""Value construction, validation and comparison per variable type."""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import TypeMismatchError
from .proficiency import parse_rank
from .types import (
    AttributeValue,
    ProficiencyValue,
    Variable,
    VariableType,
    VariableValue,
)


def zero_value(variable_type: VariableType) -> VariableValue:
    """Get the value a new variable of this type starts with."""
    match variable_type:
        case VariableType.NUM:
            return 0
        case VariableType.STR:
            return ""
        case VariableType.BOOL:
            return False
        case VariableType.LIST_STR:
            return ()
        case VariableType.ATTR:
            return AttributeValue()
        case VariableType.PROF:
            return ProficiencyValue()


def unique_strings(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates, keeping the first occurrence of each string."""
    return tuple(dict.fromkeys(values))


def parse_int(value: Any) -> int | None:
    """Read an integer from an int or an integer string; bools are not numbers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_string_list(value: Any) -> tuple[str, ...] | None:
    """Read a list of strings from an iterable or a JSON array string."""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return None
        if not isinstance(value, list):
            return None
    if isinstance(value, Mapping) or not isinstance(value, Iterable):
        return None
    items = list(value)
    if not all(isinstance(item, str) for item in items):
        return None
    return unique_strings(items)


def coerce_value(
    variable_type: VariableType,
    value: Any,
    name: str = "",
    current: VariableValue | None = None,
) -> VariableValue:
    """
    Validate a replacement value against a variable type.

    Args:
        variable_type: Type of the variable receiving the value
        value: The raw value supplied by the caller
        name: Variable name used in error messages
        current: The value being replaced; a proficiency keeps its attribute
            link when the new value does not carry one

    Returns:
        The value in its stored form

    Raises:
        TypeMismatchError: If the value does not fit the type
    """
    result: VariableValue | None = None

    match variable_type:
        case VariableType.NUM:
            result = parse_int(value)
        case VariableType.STR:
            if isinstance(value, str):
                result = value
        case VariableType.BOOL:
            if isinstance(value, bool):
                result = value
        case VariableType.LIST_STR:
            result = parse_string_list(value)
        case VariableType.ATTR:
            result = _coerce_attribute(value)
        case VariableType.PROF:
            result = _coerce_proficiency(value, current)

    if result is None:
        raise TypeMismatchError(name, f"Invalid value for variable: {name}, {value!r}")
    return result


def _coerce_attribute(value: Any) -> AttributeValue | None:
    if isinstance(value, AttributeValue):
        return value
    if not isinstance(value, Mapping):
        return None

    score = parse_int(value.get("score", value.get("value")))
    partial = value.get("partial")
    if partial is None:
        partial = False
    if score is None or not isinstance(partial, bool):
        return None
    return AttributeValue(score=score, partial=partial)


def _coerce_proficiency(value: Any, current: VariableValue | None) -> ProficiencyValue | None:
    kept_attribute = current.attribute if isinstance(current, ProficiencyValue) else None

    if isinstance(value, ProficiencyValue):
        if value.attribute is None:
            return ProficiencyValue(rank=value.rank, attribute=kept_attribute)
        return value

    if isinstance(value, Mapping):
        raw_rank = value.get("rank", value.get("value"))
        attribute = value.get("attribute")
    else:
        raw_rank = value
        attribute = None

    if attribute is not None and not isinstance(attribute, str):
        return None
    try:
        rank = parse_rank(raw_rank)
    except ValueError:
        return None
    return ProficiencyValue(rank=rank, attribute=attribute or kept_attribute)


def new_variable(
    variable_type: VariableType | str,
    name: str,
    default_value: Any = None,
) -> Variable:
    """
    Create a variable, seeding it with a default value if one is given.

    Args:
        variable_type: Type of the variable ("num", "attr", ...)
        name: Variable name
        default_value: Optional starting value; the type's zero value otherwise

    Returns:
        The new Variable

    Raises:
        TypeMismatchError: If the type is unknown or the default does not fit it
    """
    try:
        variable_type = VariableType(variable_type)
    except ValueError:
        raise TypeMismatchError(name, f"Unknown variable type: {variable_type!r}") from None

    if default_value is None:
        value = zero_value(variable_type)
    else:
        value = coerce_value(variable_type, default_value, name, zero_value(variable_type))
    return Variable(name=name, type=variable_type, value=value)


def values_equal(
    variable_type: VariableType, a: VariableValue | None, b: VariableValue | None
) -> bool:
    """
    Compare two values of a variable by value.

    Lists are compared as sets since their order carries no meaning.
    """
    if variable_type == VariableType.LIST_STR and isinstance(a, tuple) and isinstance(b, tuple):
        return set(a) == set(b)
    return a == b
