"""Character-level prefix trie over activity descriptions.

Each edge is labelled with one character. The end of an inserted string is
recorded with an explicit flag on the node instead of a sentinel child, so
the character domain stays untouched.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class TrieNode:
    """Node in a prefix trie.

    Attributes:
        children: Child nodes keyed by character, in insertion order.
        is_terminal: Whether an inserted string ends at this node.
    """
    children: Dict[str, 'TrieNode'] = field(default_factory=dict)
    is_terminal: bool = False

    def child(self, char: str) -> Optional['TrieNode']:
        """Return the child reached over ``char``, or None."""
        return self.children.get(char)

    @property
    def child_count(self) -> int:
        """Number of real (character) children."""
        return len(self.children)

    @property
    def fanout(self) -> int:
        """Number of ways a path can continue from here.

        An inserted string ending at this node counts as one way, next to
        every character child.
        """
        return len(self.children) + (1 if self.is_terminal else 0)

    def any_child_key(self) -> Optional[str]:
        """Return the key of one child, or None for a leaf.

        For an unambiguous node this is its only key. With several
        children the first one inserted is returned.
        """
        for key in self.children:
            return key
        return None


def require_text(text, name: str = 'text') -> str:
    """Return ``text`` if it is a str, raise TypeError otherwise."""
    if not isinstance(text, str):
        raise TypeError(
            f"{name} must be a str, got {type(text).__name__}"
        )
    return text


class PrefixTrie:
    """Mutable character trie, grown by insertion only.

    Example:
        trie = PrefixTrie()
        trie.insert("group one")
        trie.insert("group two")

        trie.lookup("group ").child_count   # 2
        trie.lookup("other")                # None
        "group one" in trie                 # True
    """

    def __init__(self):
        self._root = TrieNode()
        self._size = 0

    @property
    def root(self) -> TrieNode:
        """The root node; the empty prefix resolves to it."""
        return self._root

    def insert(self, text: str) -> None:
        """Insert ``text`` character by character.

        Shared prefixes reuse existing nodes. Inserting a string twice is a
        no-op. The empty string marks the root itself as terminal.

        Raises:
            TypeError: If text is not a str.
        """
        require_text(text)
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def lookup(self, prefix: str) -> Optional[TrieNode]:
        """Return the node reached by consuming all of ``prefix``.

        Returns:
            The node, or None as soon as a character has no matching child.

        Raises:
            TypeError: If prefix is not a str.
        """
        require_text(prefix, 'prefix')
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def contains(self, text: str) -> bool:
        """Check if ``text`` itself was inserted (not just a prefix of it)."""
        node = self.lookup(text)
        return node is not None and node.is_terminal

    def __contains__(self, text) -> bool:
        return isinstance(text, str) and self.contains(text)

    def __len__(self) -> int:
        """Return number of distinct inserted strings."""
        return self._size
