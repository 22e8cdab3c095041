"""Segmentation of activity text into known and novel runs.

The scan walks the trie alongside the text. A run ends where the trie
branches, but is pushed on to the next whitespace so that no run is shorter
than ``MINIMUM_GROUP_LENGTH`` characters. Whatever cannot be followed in the
trie becomes one trailing REMAINDER group.

Example:
    trie = PrefixTrie()
    trie.insert("group subgroup one")
    trie.insert("group subgroup two")

    [g.content for g in Segmenter("group subgroup one", trie.root).parse()]
    # ['group subgroup', 'one']
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .protocols import GroupType
from .trie import TrieNode

MINIMUM_GROUP_LENGTH = 3


@dataclass(frozen=True)
class Group:
    """A labelled run of the segmented text.

    Attributes:
        type: MATCH for a run seen before, REMAINDER for the novel tail.
        content: The covered substring, ``text[start:end]``.
        start: Offset of the first character.
        end: Offset one past the last character.
    """
    type: GroupType
    content: str
    start: int
    end: int

    @property
    def span(self) -> Tuple[int, int]:
        """Half-open ``(start, end)`` range within the original text."""
        return (self.start, self.end)

    @property
    def is_match(self) -> bool:
        return self.type is GroupType.MATCH


@dataclass
class Segmenter:
    """Single-use scanner producing the groups of one text.

    The three steps of a scan are separate methods so each can be driven
    on its own: ``advance_to_branch``, ``extend_to_boundary`` and
    ``skip_whitespace``.

    Attributes:
        text: The text being segmented.
        node: Current trie node; None once the trie path is broken.
        min_group_length: Shortest run that may end at whitespace.
        pos: Offset of the next character to feed to the trie.
        start: Offset where the current group begins.
        cut: Offset where the current group will end.
    """
    text: str
    node: Optional[TrieNode]
    min_group_length: int = MINIMUM_GROUP_LENGTH
    pos: int = 0
    start: int = 0
    cut: int = 0
    groups: List[Group] = field(default_factory=list)

    def parse(self) -> List[Group]:
        """Run the scan and return the groups, left to right."""
        n = len(self.text)
        while self.pos < n and self.node is not None:
            # Text whose first character was never seen is all novel
            if self.start == 0 and self.node.child(self.text[0]) is None:
                break
            self.cut = self.start
            self.advance_to_branch()
            self.extend_to_boundary()
            self.pos = max(self.pos, self.cut)
            self.skip_whitespace()
            self._emit(GroupType.MATCH, self.start, self.cut)
            self.start = self.pos

        if self.start < n:
            self._emit(GroupType.REMAINDER, self.start, n)
        return self.groups

    def advance_to_branch(self) -> None:
        """Follow the trie until it branches, breaks or the text ends.

        Consumes at least one character. Afterwards ``cut`` is the offset
        of the last non-whitespace character consumed.
        """
        text = self.text
        n = len(text)
        while True:
            if not text[self.pos].isspace():
                self.cut = self.pos
            self.node = self.node.child(text[self.pos])
            self.pos += 1
            if self.pos >= n or self.node is None or self.node.fanout > 1:
                break

    def extend_to_boundary(self) -> None:
        """Move ``cut`` forward to the next whitespace.

        Whitespace only ends the group once it is at least
        ``min_group_length`` characters long. Characters beyond ``pos`` are
        fed to the trie so the walk stays in step with ``cut``.
        """
        text = self.text
        n = len(text)
        while True:
            if self.cut >= self.pos and self.node is not None:
                self.node = self.node.child(text[self.cut])
            self.cut += 1
            if self.cut >= n:
                break
            if text[self.cut].isspace() and self.cut - self.start >= self.min_group_length:
                break

    def skip_whitespace(self) -> None:
        """Consume the whitespace run at ``pos``, keeping the trie in step."""
        text = self.text
        n = len(text)
        while self.pos < n and text[self.pos].isspace():
            if self.node is not None:
                self.node = self.node.child(text[self.pos])
            self.pos += 1

    def _emit(self, group_type: GroupType, start: int, end: int) -> None:
        self.groups.append(Group(group_type, self.text[start:end], start, end))
