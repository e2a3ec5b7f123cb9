"""
Capability types for the numeric traversals.

max_value and has_strictly_increasing_path only need values that can be
ordered against each other, so they are constrained by a protocol rather than
by a numeric base class.

Types:
    Comparable - Protocol for values supporting < and >
    C          - TypeVar bound to Comparable
"""

from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """Values that can be strictly ordered against each other."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


C = TypeVar("C", bound=Comparable)


__all__ = ["Comparable", "C"]
