"""Variable types for the character build store.

A variable is a named, typed value slot. Its type is chosen from a closed set
of variants when it is created and never changes afterwards. All values are
immutable, so a variable read from a store can be handed out freely.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeAlias, TypeVar


class VariableType(StrEnum):
    """Closed set of variable variants."""

    NUM = "num"
    STR = "str"
    BOOL = "bool"
    LIST_STR = "list-str"
    ATTR = "attr"
    PROF = "prof"


class ProficiencyRank(StrEnum):
    """Proficiency ranks, stored as the letter codes used by content data."""

    UNTRAINED = "U"
    TRAINED = "T"
    EXPERT = "E"
    MASTER = "M"
    LEGENDARY = "L"

    @property
    def label(self) -> str:
        """Display name of the rank (e.g., "Expert")."""
        return self.name.capitalize()


@dataclass(frozen=True)
class AttributeValue:
    """An attribute under the boost/flaw rule.

    ``partial`` is set when a boost has been banked at or above the
    partial boost threshold and is waiting for a second one.
    """

    score: int = 0
    partial: bool = False


@dataclass(frozen=True)
class ProficiencyValue:
    """A proficiency rank, optionally tied to an attribute variable by name."""

    rank: ProficiencyRank = ProficiencyRank.UNTRAINED
    attribute: str | None = None


VariableValue: TypeAlias = int | str | bool | tuple[str, ...] | AttributeValue | ProficiencyValue


ValueT = TypeVar("ValueT", bound=VariableValue)


@dataclass(frozen=True)
class Variable(Generic[ValueT]):
    """A named variable with a fixed type.

    Parameterized by its value type where that is known, e.g.
    ``Variable[ProficiencyValue]`` for a proficiency.
    """

    name: str
    type: VariableType
    value: ValueT


NumVariable: TypeAlias = Variable[int]
AttributeVariable: TypeAlias = Variable[AttributeValue]
ProficiencyVariable: TypeAlias = Variable[ProficiencyValue]
