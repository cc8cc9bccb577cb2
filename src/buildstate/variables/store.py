"""Variable store for one character build.

A store owns three mappings keyed by variable name: the variables
themselves, a bonus ledger and a history ledger. It is seeded from the
default registry when created. Values are immutable, so reads hand out the
stored objects inside fresh containers and callers cannot change the store
through them.

Each store guards its own state with a lock; the operation interpreter is
expected to drive a store from one thread at a time anyway.
"""

import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from buildstate.config import Settings, get_settings

from .attributes import apply_attribute_delta
from .defaults import load_default_registry
from .errors import (
    ErrorKind,
    InvalidAdjustmentError,
    TypeMismatchError,
    UnknownVariableError,
    VariableError,
)
from .ledger import BonusEntry, HistoryEntry
from .proficiency import is_rank, max_rank, parse_rank, parse_rank_step, step_rank
from .types import (
    AttributeValue,
    ProficiencyValue,
    Variable,
    VariableType,
    VariableValue,
)
from .values import coerce_value, new_variable, parse_int, unique_strings, values_equal

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a non-raising set or adjust call."""

    ok: bool
    variable: Variable | None = None
    error: ErrorKind | None = None
    message: str | None = None


class VariableStore:
    """Typed variables, bonuses and history for one store ID."""

    def __init__(
        self,
        store_id: str,
        registry: Mapping[str, Variable] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.store_id = store_id
        self._settings = settings or get_settings()
        if registry is None:
            registry = load_default_registry(self._settings.default_registry_path)
        self._registry = registry
        self._lock = threading.RLock()

        self._variables: dict[str, Variable] = dict(registry)
        self._bonuses: dict[str, list[BonusEntry]] = {}
        self._history: dict[str, list[HistoryEntry]] = {}

    # ------------------------------------------------------------------
    # Registry

    def add_variable(
        self,
        variable_type: VariableType | str,
        name: str,
        default_value: Any = None,
        source: str | None = None,
    ) -> Variable:
        """
        Add a variable, replacing any existing variable with the same name.

        Args:
            variable_type: Type of the new variable
            name: Variable name
            default_value: Optional starting value, checked against the type
            source: What created the variable, for logging

        Returns:
            The new Variable

        Raises:
            TypeMismatchError: If the type is unknown or the default does not fit it
        """
        variable = new_variable(variable_type, name, default_value)
        with self._lock:
            self._variables[name] = variable

        logger.debug(
            "variable_added",
            store_id=self.store_id,
            name=name,
            type=variable.type.value,
            source=source or "Created",
        )
        return variable

    def remove_variable(self, name: str) -> None:
        """Remove a variable; does nothing if it is not registered."""
        with self._lock:
            self._variables.pop(name, None)

    def get_variables(self) -> dict[str, Variable]:
        """Get a snapshot of all variables."""
        with self._lock:
            return dict(self._variables)

    def get_variable(self, name: str) -> Variable | None:
        """Get a variable by name, or None if it is not registered."""
        with self._lock:
            return self._variables.get(name)

    def clear(self) -> None:
        """Drop all variables, bonuses and history and reseed from the registry."""
        with self._lock:
            self._variables = dict(self._registry)
            self._bonuses = {}
            self._history = {}

    # ------------------------------------------------------------------
    # Mutation

    def set_variable(self, name: str, value: Any, source: str | None = None) -> Variable:
        """
        Replace a variable's value.

        Args:
            name: Variable name
            value: New value; must fit the variable's type
            source: History label, defaults to the configured set label

        Returns:
            The updated Variable

        Raises:
            UnknownVariableError: If the variable is not registered
            TypeMismatchError: If the value does not fit the variable's type
        """
        with self._lock:
            variable = self._require(name)
            new_value = coerce_value(variable.type, value, name, variable.value)
            updated = self._write(variable, new_value, source or self._settings.default_set_source)

        logger.debug("variable_set", store_id=self.store_id, name=name, value=new_value)
        return updated

    def adj_variable(self, name: str, amount: Any, source: str | None = None) -> Variable:
        """
        Merge an amount into a variable's value.

        - num: added
        - str: appended
        - bool: AND-ed, so a false variable stays false
        - list-str: unioned, keeping first-occurrence order
        - attr: applied as a boost (1), flaw (-1) or no-op (0)
        - prof: an absolute rank never downgrades; "+1"/"-1" step the rank

        Args:
            name: Variable name
            amount: Amount to merge; its shape depends on the variable's type
            source: History label, defaults to the configured adjust label

        Returns:
            The updated Variable

        Raises:
            UnknownVariableError: If the variable is not registered
            InvalidAdjustmentError: If the amount is malformed for the variable's type
        """
        with self._lock:
            variable = self._require(name)
            new_value = self._adjusted_value(variable, amount)
            updated = self._write(
                variable, new_value, source or self._settings.default_adjust_source
            )

        logger.debug("variable_adjusted", store_id=self.store_id, name=name, amount=amount)
        return updated

    def try_set_variable(self, name: str, value: Any, source: str | None = None) -> MutationResult:
        """Like set_variable, but report failure in the result instead of raising."""
        return self._attempt(self.set_variable, name, value, source)

    def try_adj_variable(self, name: str, amount: Any, source: str | None = None) -> MutationResult:
        """Like adj_variable, but report failure in the result instead of raising."""
        return self._attempt(self.adj_variable, name, amount, source)

    # ------------------------------------------------------------------
    # Ledgers

    def add_variable_bonus(
        self,
        name: str,
        value: int | float | None,
        bonus_type: str | None,
        text: str,
        source: str,
    ) -> BonusEntry:
        """
        Record a bonus for a variable.

        The variable does not have to exist, and bonuses are never combined.

        Args:
            name: Variable name the bonus applies to
            value: Bonus amount, or None for a non-numeric bonus
            bonus_type: Bonus type such as "status" or "item"; None when untyped
            text: Description of the bonus
            source: What granted the bonus

        Returns:
            The recorded BonusEntry

        Raises:
            TypeMismatchError: If the value is not a number
        """
        if value is not None and (isinstance(value, bool) or not isinstance(value, int | float)):
            raise TypeMismatchError(name, f"Invalid bonus value for variable: {name}, {value!r}")

        entry = BonusEntry(value=value, type=bonus_type, text=text, source=source)
        with self._lock:
            self._bonuses.setdefault(name, []).append(entry)
        return entry

    def get_variable_bonuses(self, name: str) -> tuple[BonusEntry, ...]:
        """Get the bonuses recorded for a variable, oldest first."""
        with self._lock:
            return tuple(self._bonuses.get(name, ()))

    def get_variable_history(self, name: str) -> tuple[HistoryEntry, ...]:
        """Get the value changes recorded for a variable, oldest first."""
        with self._lock:
            return tuple(self._history.get(name, ()))

    # ------------------------------------------------------------------
    # Internals

    def _require(self, name: str) -> Variable:
        variable = self._variables.get(name)
        if variable is None:
            raise UnknownVariableError(name)
        return variable

    def _write(self, variable: Variable, new_value: VariableValue, source: str) -> Variable:
        updated = Variable(name=variable.name, type=variable.type, value=new_value)
        self._variables[variable.name] = updated

        if not values_equal(variable.type, variable.value, new_value):
            self._history.setdefault(variable.name, []).append(
                HistoryEntry(to=new_value, from_=variable.value, source=source)
            )
        return updated

    def _attempt(
        self,
        operation: Callable[[str, Any, str | None], Variable],
        name: str,
        value: Any,
        source: str | None,
    ) -> MutationResult:
        try:
            variable = operation(name, value, source)
        except VariableError as e:
            logger.warning(
                "variable_mutation_failed",
                store_id=self.store_id,
                name=name,
                error=e.kind.value,
                message=str(e),
            )
            return MutationResult(ok=False, error=e.kind, message=str(e))
        return MutationResult(ok=True, variable=variable)

    def _adjusted_value(self, variable: Variable, amount: Any) -> VariableValue:
        name = variable.name
        current = variable.value

        match variable.type:
            case VariableType.NUM:
                delta = parse_int(amount)
                if delta is not None:
                    return current + delta
            case VariableType.STR:
                if isinstance(amount, str):
                    return current + amount
            case VariableType.BOOL:
                if isinstance(amount, bool):
                    return current and amount
            case VariableType.LIST_STR:
                items = _string_items(amount)
                if items is not None:
                    return unique_strings((*current, *items))
            case VariableType.ATTR:
                return _adjust_attribute(name, current, amount)
            case VariableType.PROF:
                return _adjust_proficiency(name, current, amount)

        raise InvalidAdjustmentError(
            name, f"Invalid adjust amount for variable: {name}, {amount!r}"
        )

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"VariableStore({self.store_id!r}, variables={len(self._variables)})"


def _string_items(amount: Any) -> tuple[str, ...] | None:
    if isinstance(amount, str):
        return (amount,)
    if isinstance(amount, Mapping) or not isinstance(amount, Iterable):
        return None
    items = tuple(amount)
    if not all(isinstance(item, str) for item in items):
        return None
    return items


def _adjust_attribute(name: str, current: AttributeValue, amount: Any) -> AttributeValue:
    if isinstance(amount, Mapping):
        raw_delta = amount.get("score", amount.get("value", 0))
        partial = amount.get("partial")
    else:
        raw_delta = amount
        partial = None

    delta = parse_int(raw_delta) if isinstance(raw_delta, str) else raw_delta
    if partial is not None and not isinstance(partial, bool):
        raise InvalidAdjustmentError(name, f"Invalid partial flag for attribute: {partial!r}")
    return apply_attribute_delta(current, delta, partial=partial, name=name)


def _adjust_proficiency(name: str, current: ProficiencyValue, amount: Any) -> ProficiencyValue:
    if isinstance(amount, ProficiencyValue):
        raw_rank: Any = amount.rank
        attribute = amount.attribute
    elif isinstance(amount, Mapping):
        raw_rank = amount.get("rank", amount.get("value"))
        attribute = amount.get("attribute")
    else:
        raw_rank = amount
        attribute = None

    if attribute is not None and not isinstance(attribute, str):
        raise InvalidAdjustmentError(name, f"Invalid attribute for prof: {name}, {attribute!r}")

    if raw_rank is None and attribute is not None:
        rank = current.rank
    elif is_rank(raw_rank):
        rank = max_rank(current.rank, parse_rank(raw_rank))
    else:
        try:
            step = parse_rank_step(raw_rank)
        except ValueError:
            raise InvalidAdjustmentError(
                name, f"Invalid adjust amount for prof: {name}, {amount!r}"
            ) from None
        rank = step_rank(current.rank, step)

    return ProficiencyValue(rank=rank, attribute=attribute or current.attribute)
