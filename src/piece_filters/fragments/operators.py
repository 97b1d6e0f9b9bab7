from enum import Enum


class FragmentOperator(str, Enum):
    """Operators a query fragment may carry."""

    # Comparison
    EQ = "="
    IN = "in"

    # String operations
    ICONTAINS = "icontains"

    # Logical operators
    AND = "and"
    OR = "or"


LOGICAL_OPERATORS: frozenset[FragmentOperator] = frozenset(
    {FragmentOperator.AND, FragmentOperator.OR}
)
