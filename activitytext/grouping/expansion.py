"""Completion suggestions drawn from the trie.

Every edge leaving the node reached by the typed text yields one suggestion:
the edge's character followed by the chain of single-child nodes after it.
The editor inserts the longest common prefix of all suggestions at the
caret.
"""

from typing import Iterable, List

from .protocols import ExpansionProvider
from .trie import PrefixTrie, TrieNode


def collect_expansions(trie: PrefixTrie, text: str) -> List[str]:
    """Return one suggestion per edge leaving the node reached by ``text``.

    Args:
        trie: The trie to read.
        text: Typed text; must be a prefix of an inserted string to match.

    Returns:
        Suggestions in child insertion order, or an empty list when no
        inserted string starts with ``text``.

    Example:
        After inserting "group subgroup one" and "group subgroup two",
        ``collect_expansions(trie, "gr")`` is ``["oup subgroup "]``.
    """
    node = trie.lookup(text)
    if node is None:
        return []
    return [_follow_chain(char, child) for char, child in node.children.items()]


def _follow_chain(first: str, node: TrieNode) -> str:
    """Extend ``first`` while the path below it cannot branch or end."""
    chars = [first]
    while node.fanout == 1 and node.child_count == 1:
        char = node.any_child_key()
        chars.append(char)
        node = node.children[char]
    return ''.join(chars)


def common_prefix(a: str, b: str) -> str:
    """Return the longest string both ``a`` and ``b`` start with."""
    i = 0
    limit = min(len(a), len(b))
    while i < limit and a[i] == b[i]:
        i += 1
    return a[:i]


def longest_common_expansion(expansions: Iterable[str]) -> str:
    """Return the text that is safe to insert for a set of suggestions.

    Returns:
        The longest common prefix of all suggestions, "" if there are none.
    """
    result = None
    for expansion in expansions:
        result = expansion if result is None else common_prefix(result, expansion)
        if not result:
            return ''
    return result or ''


def expand_text(text: str, providers: Iterable[ExpansionProvider]) -> str:
    """Gather suggestions from all providers and return what to insert.

    Args:
        text: Text from the start of the input up to the caret.
        providers: Objects implementing the ExpansionProvider protocol.

    Returns:
        Longest common prefix of every provider's suggestions.
    """
    suggestions: List[str] = []
    for provider in providers:
        suggestions.extend(provider.expansions(text))
    return longest_common_expansion(suggestions)
