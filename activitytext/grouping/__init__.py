"""Prefix-tree grouping of activity descriptions.

This package indexes previously recorded activity texts in a character
trie and uses it for two editor features:

- Segmentation: split typed text into known runs and a novel remainder
  (for highlighting).
- Expansion: suggest continuations of typed text (for completion).

Example:
    from activitytext.grouping import CommonPrefixGrouper, StaticHistory

    grouper = CommonPrefixGrouper(StaticHistory(["group one", "group two"]))
    grouper.segments("group three")
    grouper.expansions("group t")   # ['wo']
"""

from .protocols import GroupType, ItemGrouper, ExpansionProvider, HistorySource
from .trie import PrefixTrie, TrieNode
from .segmenter import Group, Segmenter, MINIMUM_GROUP_LENGTH
from .expansion import (
    collect_expansions,
    common_prefix,
    longest_common_expansion,
    expand_text,
)
from .engine import CommonPrefixGrouper, InitializationError
from activitytext.history import StaticHistory

__all__ = [
    # Protocols and enums
    'GroupType',
    'ItemGrouper',
    'ExpansionProvider',
    'HistorySource',
    # Data structures
    'PrefixTrie',
    'TrieNode',
    'Group',
    # Algorithms
    'Segmenter',
    'MINIMUM_GROUP_LENGTH',
    'collect_expansions',
    'common_prefix',
    'longest_common_expansion',
    'expand_text',
    # Main engine
    'CommonPrefixGrouper',
    'InitializationError',
    'StaticHistory',
]
