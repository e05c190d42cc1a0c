"""Type definitions for linkedlists."""

from typing import TypeAlias, TypeVar

# Generic type variable for list values
T = TypeVar("T")

# Values held by singly-linked merge nodes
Number: TypeAlias = int | float
