"""Protocols and enums for the grouping system.

This module defines the abstractions shared by the grouper, its history
sources and the editor features that consume its output.
"""

from enum import Enum, auto
from typing import Iterable, List, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .segmenter import Group


class GroupType(Enum):
    """Kind of a segmentation group.

    The highlighting layer colors each kind differently.
    """
    MATCH = auto()      # Run covered by previously seen text
    REMAINDER = auto()  # Trailing run that was never seen before


@runtime_checkable
class ItemGrouper(Protocol):
    """Protocol for objects that split activity text into groups."""

    def segments(self, text: str) -> List['Group']:
        """Return the groups of ``text``, left to right, covering it exactly."""
        ...


@runtime_checkable
class ExpansionProvider(Protocol):
    """Protocol for objects that suggest completions for typed text."""

    def expansions(self, text: str) -> List[str]:
        """Return continuations that may be appended to ``text``.

        Order is not significant. Unknown text yields an empty list.
        """
        ...


@runtime_checkable
class HistorySource(Protocol):
    """Protocol for the provider of previously recorded activities."""

    def activities(self) -> Iterable[str]:
        """Yield every known activity description.

        The sequence is finite, unordered and consumed once.
        """
        ...
