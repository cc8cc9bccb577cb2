"""Attribute boost and flaw accumulation.

Attributes follow the partial boost rule: below the threshold a boost adds a
full point. At or above it, a boost is banked as a partial boost and the next
one turns both into a single point. Flaws always subtract a full point and
never touch the partial flag.
"""

from dataclasses import replace

from .errors import InvalidAdjustmentError
from .types import AttributeValue

# Score at which boosts have to be paired
PARTIAL_BOOST_THRESHOLD = 4

BOOST = 1
FLAW = -1


def apply_attribute_delta(
    current: AttributeValue,
    delta: int,
    partial: bool | None = None,
    name: str = "",
) -> AttributeValue:
    """
    Apply a boost, flaw or no-op to an attribute.

    Args:
        current: The attribute value before the adjustment
        delta: 1 for a boost, -1 for a flaw, 0 for no change
        partial: If given, overwrites the partial flag after the delta is applied
        name: Variable name used in error messages

    Returns:
        The new attribute value

    Raises:
        InvalidAdjustmentError: If delta is not one of -1, 0 or 1

    Examples:
        >>> apply_attribute_delta(AttributeValue(score=4), 1)
        AttributeValue(score=4, partial=True)
        >>> apply_attribute_delta(AttributeValue(score=4, partial=True), 1)
        AttributeValue(score=5, partial=False)
    """
    if isinstance(delta, bool) or not isinstance(delta, int) or delta not in (FLAW, 0, BOOST):
        raise InvalidAdjustmentError(
            name,
            f"Invalid variable adjustment amount for attribute: {delta!r} (must be 0, 1, or -1)",
        )

    result = current
    if delta == BOOST and current.score >= PARTIAL_BOOST_THRESHOLD:
        if current.partial:
            result = AttributeValue(score=current.score + 1, partial=False)
        else:
            result = replace(current, partial=True)
    elif delta != 0:
        result = replace(current, score=current.score + delta)

    if partial is not None:
        result = replace(result, partial=partial)

    return result
