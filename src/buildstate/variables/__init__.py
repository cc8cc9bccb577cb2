"""Typed character build variables and their stores."""

from .attributes import PARTIAL_BOOST_THRESHOLD, apply_attribute_delta
from .defaults import load_default_registry
from .errors import (
    DefaultRegistryError,
    ErrorKind,
    InvalidAdjustmentError,
    TypeMismatchError,
    UnknownVariableError,
    VariableError,
)
from .ledger import BonusEntry, HistoryEntry
from .manager import VariableManager
from .naming import is_variable_name, label_to_variable_name
from .proficiency import max_rank, next_rank, prev_rank
from .queries import (
    get_all_armor_group_variables,
    get_all_armor_variables,
    get_all_attribute_variables,
    get_all_save_variables,
    get_all_skill_variables,
    get_all_speed_variables,
    get_all_weapon_group_variables,
    get_all_weapon_variables,
)
from .store import MutationResult, VariableStore
from .types import (
    AttributeValue,
    AttributeVariable,
    NumVariable,
    ProficiencyRank,
    ProficiencyValue,
    ProficiencyVariable,
    Variable,
    VariableType,
    VariableValue,
)
from .values import new_variable

__all__ = [
    "PARTIAL_BOOST_THRESHOLD",
    "AttributeValue",
    "AttributeVariable",
    "BonusEntry",
    "DefaultRegistryError",
    "ErrorKind",
    "HistoryEntry",
    "InvalidAdjustmentError",
    "MutationResult",
    "NumVariable",
    "ProficiencyRank",
    "ProficiencyValue",
    "ProficiencyVariable",
    "TypeMismatchError",
    "UnknownVariableError",
    "Variable",
    "VariableError",
    "VariableManager",
    "VariableStore",
    "VariableType",
    "VariableValue",
    "apply_attribute_delta",
    "get_all_armor_group_variables",
    "get_all_armor_variables",
    "get_all_attribute_variables",
    "get_all_save_variables",
    "get_all_skill_variables",
    "get_all_speed_variables",
    "get_all_weapon_group_variables",
    "get_all_weapon_variables",
    "is_variable_name",
    "label_to_variable_name",
    "load_default_registry",
    "max_rank",
    "new_variable",
    "next_rank",
    "prev_rank",
]
