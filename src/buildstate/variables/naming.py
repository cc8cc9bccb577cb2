"""Variable naming conventions.

Names are upper-case and underscore-delimited (e.g., ``SKILL_ARCANA``). The
store itself accepts any name; content tools use these helpers.
"""

import re

VARIABLE_NAME_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")


def label_to_variable_name(label: str) -> str:
    """
    Turn a label typed into a content editor into a variable name.

    Examples:
        >>> label_to_variable_name("lore skill")
        'LORE_SKILL'
    """
    return re.sub(r"\s+", "_", label.strip()).upper()


def is_variable_name(name: str) -> bool:
    """Check whether a name follows the variable naming convention."""
    return bool(VARIABLE_NAME_PATTERN.match(name))
