"""Proficiency rank lattice.

Ranks are totally ordered: Untrained < Trained < Expert < Master < Legendary.
Stepping past either end of the lattice is a no-op.
"""

from .types import ProficiencyRank

RANK_ORDER: tuple[ProficiencyRank, ...] = (
    ProficiencyRank.UNTRAINED,
    ProficiencyRank.TRAINED,
    ProficiencyRank.EXPERT,
    ProficiencyRank.MASTER,
    ProficiencyRank.LEGENDARY,
)

# Relative step tokens accepted in proficiency adjustments
STEP_UP_TOKENS = ("+1", "1")
STEP_DOWN_TOKENS = ("-1",)


def rank_order(rank: ProficiencyRank) -> int:
    """Position of a rank in the lattice (Untrained is 0, Legendary is 4)."""
    return RANK_ORDER.index(rank)


def max_rank(a: ProficiencyRank, b: ProficiencyRank) -> ProficiencyRank:
    """
    Get the higher of two ranks.

    Used to grant a proficiency without ever downgrading one.

    Examples:
        >>> max_rank(ProficiencyRank.EXPERT, ProficiencyRank.TRAINED)
        <ProficiencyRank.EXPERT: 'E'>
    """
    return a if rank_order(a) >= rank_order(b) else b


def next_rank(rank: ProficiencyRank) -> ProficiencyRank:
    """Get the rank one step above, or the same rank at Legendary."""
    index = rank_order(rank)
    if index >= len(RANK_ORDER) - 1:
        return rank
    return RANK_ORDER[index + 1]


def prev_rank(rank: ProficiencyRank) -> ProficiencyRank:
    """Get the rank one step below, or the same rank at Untrained."""
    index = rank_order(rank)
    if index <= 0:
        return rank
    return RANK_ORDER[index - 1]


def parse_rank(value: object) -> ProficiencyRank:
    """
    Parse a proficiency rank.

    Args:
        value: A ProficiencyRank, a letter code ("T") or a full name ("trained")

    Returns:
        The matching ProficiencyRank

    Raises:
        ValueError: If the value does not name a rank
    """
    if isinstance(value, ProficiencyRank):
        return value
    if isinstance(value, str):
        text = value.strip().upper()
        for rank in RANK_ORDER:
            if text in (rank.value, rank.name):
                return rank
    raise ValueError(f"Unknown proficiency rank: {value!r}")


def is_rank(value: object) -> bool:
    """Check whether a value names a proficiency rank."""
    try:
        parse_rank(value)
    except ValueError:
        return False
    return True


def parse_rank_step(value: object) -> int:
    """
    Parse a relative rank step token.

    Args:
        value: "+1" or "1" to step up; "-1" to step down

    Returns:
        1 or -1

    Raises:
        ValueError: If the value is not a recognized step token
    """
    if isinstance(value, str):
        token = value.strip()
        if token in STEP_UP_TOKENS:
            return 1
        if token in STEP_DOWN_TOKENS:
            return -1
    raise ValueError(f"Unknown proficiency step: {value!r}")


def step_rank(rank: ProficiencyRank, step: int) -> ProficiencyRank:
    """Move a rank one step up (step=1) or down (step=-1), clamped at the ends."""
    return next_rank(rank) if step > 0 else prev_rank(rank)
