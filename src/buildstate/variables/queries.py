"""Typed family queries over a store.

Each helper scans every variable in the store and keeps the ones whose name
starts with the family prefix and whose type matches the family's type.
Results keep the store's insertion order and are typed by the family's
value type.
"""

from collections.abc import Callable
from typing import TypeGuard

from .store import VariableStore
from .types import (
    AttributeValue,
    AttributeVariable,
    NumVariable,
    ProficiencyValue,
    ProficiencyVariable,
    ValueT,
    Variable,
    VariableType,
)


def find_variables(
    store: VariableStore,
    variable_type: VariableType,
    matches: Callable[[str], bool],
) -> list[Variable]:
    """
    Get the variables of a type whose names pass a filter.

    Args:
        store: Store to scan
        variable_type: Required variable type
        matches: Predicate on the variable name

    Returns:
        Matching variables in store order
    """
    return [
        variable
        for variable in store.get_variables().values()
        if variable.type == variable_type and matches(variable.name)
    ]


def has_value_type(variable: Variable, value_class: type[ValueT]) -> TypeGuard[Variable[ValueT]]:
    """Check that a variable holds a value of the given class."""
    return isinstance(variable.value, value_class)


def _family(
    store: VariableStore,
    variable_type: VariableType,
    value_class: type[ValueT],
    matches: Callable[[str], bool],
) -> list[Variable[ValueT]]:
    return [
        variable
        for variable in find_variables(store, variable_type, matches)
        if has_value_type(variable, value_class)
    ]


def _prefixed(prefix: str, excluded: str | None = None) -> Callable[[str], bool]:
    def matches(name: str) -> bool:
        if excluded and name.startswith(excluded):
            return False
        return name.startswith(prefix)

    return matches


def get_all_skill_variables(store: VariableStore) -> list[ProficiencyVariable]:
    """Get the skill proficiencies, lore skills included."""
    return _family(store, VariableType.PROF, ProficiencyValue, _prefixed("SKILL_"))


def get_all_save_variables(store: VariableStore) -> list[ProficiencyVariable]:
    """Get the saving throw proficiencies."""
    return _family(store, VariableType.PROF, ProficiencyValue, _prefixed("SAVE_"))


def get_all_attribute_variables(store: VariableStore) -> list[AttributeVariable]:
    """Get the attribute scores."""
    return _family(store, VariableType.ATTR, AttributeValue, _prefixed("ATTRIBUTE_"))


def get_all_weapon_group_variables(store: VariableStore) -> list[ProficiencyVariable]:
    """Get proficiencies in weapon groups (axe, bow, ...)."""
    return _family(store, VariableType.PROF, ProficiencyValue, _prefixed("WEAPON_GROUP_"))


def get_all_armor_group_variables(store: VariableStore) -> list[ProficiencyVariable]:
    """Get proficiencies in armor groups."""
    return _family(store, VariableType.PROF, ProficiencyValue, _prefixed("ARMOR_GROUP_"))


def get_all_weapon_variables(store: VariableStore) -> list[ProficiencyVariable]:
    """Get proficiencies in specific weapons, leaving out weapon groups."""
    return _family(
        store, VariableType.PROF, ProficiencyValue, _prefixed("WEAPON_", excluded="WEAPON_GROUP_")
    )


def get_all_armor_variables(store: VariableStore) -> list[ProficiencyVariable]:
    """Get proficiencies in specific armor, leaving out armor groups."""
    return _family(
        store, VariableType.PROF, ProficiencyValue, _prefixed("ARMOR_", excluded="ARMOR_GROUP_")
    )


def get_all_speed_variables(store: VariableStore) -> list[NumVariable]:
    """Get the land speed and every special speed (fly, climb, ...)."""
    return _family(
        store, VariableType.NUM, int, lambda name: name == "SPEED" or name.startswith("SPEED_")
    )
