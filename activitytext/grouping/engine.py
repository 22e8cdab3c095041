"""Grouper that learns common prefixes of recorded activities.

The CommonPrefixGrouper owns one PrefixTrie. It is filled lazily, exactly
once, from the history source and the configured baseline strings, and then
serves both segmentation (for highlighting) and expansion (for completion).
"""

import logging
import threading
import time
from typing import Iterable, List

from .expansion import collect_expansions
from .protocols import HistorySource
from .segmenter import Group, MINIMUM_GROUP_LENGTH, Segmenter
from .trie import PrefixTrie, require_text

logger = logging.getLogger(__name__)


class InitializationError(Exception):
    """Error loading the history into the grouper."""
    pass


class CommonPrefixGrouper:
    """Learns common prefixes and uses them to determine groups.

    Text is split at whitespace unless the resulting group would be shorter
    than ``min_group_length`` characters, in which case the group is
    extended to the next whitespace.

    Implements both the ItemGrouper and ExpansionProvider protocols.

    Example:
        grouper = CommonPrefixGrouper(StaticHistory(["group one", "group two"]))

        grouper.expansions("gr")       # ['oup ']
        grouper.segments("group one")  # [Group(MATCH, 'group', 0, 5), ...]
    """

    def __init__(
        self,
        history: HistorySource,
        baseline: Iterable[str] = (),
        min_group_length: int = MINIMUM_GROUP_LENGTH,
    ):
        """Initialize grouper; nothing is read until the first query.

        Args:
            history: Source of previously recorded activity descriptions.
            baseline: Seed strings inserted after the history.
            min_group_length: Shortest group that may end at whitespace.

        Raises:
            TypeError: If history or baseline is None.
            ValueError: If min_group_length is less than 1.
        """
        if history is None:
            raise TypeError("history must not be None")
        if baseline is None:
            raise TypeError("baseline must not be None")
        if min_group_length < 1:
            raise ValueError(
                f"min_group_length must be at least 1, got {min_group_length}"
            )
        self._history = history
        self._baseline = tuple(baseline)
        self._min_group_length = min_group_length
        self._trie = PrefixTrie()
        self._initialized = False
        self._init_lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        """Whether history and baseline have been loaded."""
        return self._initialized

    @property
    def trie(self) -> PrefixTrie:
        """The underlying trie (read-only use)."""
        return self._trie

    def initialize(self) -> None:
        """Load history and baseline now, if not done yet.

        Queries call this implicitly. Calling it eagerly on one thread
        before concurrent queries start avoids doing the load on a
        request path.

        Raises:
            InitializationError: If a source fails. Nothing is inserted in
                that case and the next call tries again.
        """
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            self._load()
            self._initialized = True

    def _load(self) -> None:
        started = time.perf_counter()
        try:
            activities: List[str] = list(self._history.activities())
            baseline: List[str] = list(self._baseline)
        except Exception as e:
            logger.error("Loading activity history failed: %s", e)
            raise InitializationError(
                f"Could not load activity history: {e}"
            ) from e

        for text in activities + baseline:
            if not isinstance(text, str):
                raise InitializationError(
                    f"Activities must be str, got {type(text).__name__}"
                )

        for text in activities:
            self._trie.insert(text)
        for text in baseline:
            self._trie.insert(text)

        logger.info(
            "Item grouper indexed %d activities and %d baseline entries "
            "(%d distinct) in %.1f ms",
            len(activities), len(baseline), len(self._trie),
            (time.perf_counter() - started) * 1000,
        )

    def insert(self, text: str) -> None:
        """Add one string to the index.

        Raises:
            TypeError: If text is not a str.
        """
        self._trie.insert(text)

    def segments(self, text: str) -> List[Group]:
        """Split ``text`` into known MATCH runs and a novel REMAINDER.

        Returns:
            Groups in text order. Only whitespace lies between consecutive
            groups. An empty text yields no groups.

        Raises:
            TypeError: If text is not a str.
            InitializationError: If the lazy load fails.
        """
        require_text(text)
        self.initialize()
        return Segmenter(
            text, self._trie.root, min_group_length=self._min_group_length
        ).parse()

    def expansions(self, text: str) -> List[str]:
        """Return possible continuations of ``text``.

        Raises:
            TypeError: If text is not a str.
            InitializationError: If the lazy load fails.
        """
        require_text(text)
        self.initialize()
        return collect_expansions(self._trie, text)

    def __repr__(self) -> str:
        state = 'initialized' if self._initialized else 'pending'
        return f"CommonPrefixGrouper({state}, {len(self._trie)} entries)"
