"""
History trie: command lines are stored token by token, each edge counting how
many recorded lines passed through it.
"""
import threading
from dataclasses import dataclass, field
from typing import Optional

from histcomplete.core.fuzzy import fuzzy_match
from histcomplete.core.tokenizer import tokenize, split_input


@dataclass(frozen=True)
class Suggestion:
    value: str
    space: bool  # True when more typing is expected after the value
    full_command: bool = field(default=False, compare=False)

    @property
    def text(self) -> str:
        """The string an editor splices in when the suggestion is accepted."""
        return self.value + " " if self.space else self.value


class TrieNode:
    """
    State of having typed a sequence of complete tokens.

    `frequency` belongs to the edge leading into this node.
    """

    __slots__ = ("children", "frequency")

    def __init__(self):
        self.children: dict[str, "TrieNode"] = {}
        self.frequency = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def child(self, token: str) -> "TrieNode":
        """Returns the child for token, creating it if needed."""
        node = self.children.get(token)
        if node is None:
            node = TrieNode()
            self.children[token] = node
        return node


class HistoryTrie:
    def __init__(self):
        self.root = TrieNode()
        self._lines = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self._lines

    def add(self, line: str):
        """Records a command line. Blank lines are ignored."""
        tokens = tokenize(line)
        if not tokens:
            return

        with self._lock:
            node = self.root
            for token in tokens:
                node = node.child(token)
                node.frequency += 1
            self._lines += 1

    def node_for(self, tokens: list[str]) -> Optional[TrieNode]:
        """Follows exact-token edges from the root. None if any edge is missing."""
        node = self.root
        for token in tokens:
            node = node.children.get(token)
            if node is None:
                return None
        return node

    def get_continuations_for(self, input_line: str) -> list[Suggestion]:
        """
        Suggests continuations of a partially typed command line.

        Children of the fork node (reached through all complete tokens) are
        matched against the partial word: exact prefix first, fuzzy sub-token
        matching only when nothing matches exactly. Results are ordered by
        edge frequency, ties keeping discovery order.
        """
        complete_tokens, partial = split_input(input_line)
        if not complete_tokens and not partial:
            return []

        with self._lock:
            fork = self.node_for(complete_tokens)
            if fork is None:
                return []

            candidates = [(token, node) for token, node in fork.children.items() if token.startswith(partial)]
            if not candidates:
                candidates = [(token, node) for token, node in fork.children.items() if fuzzy_match(partial, token)]

            groups = []
            for token, node in candidates:
                group = [Suggestion(value=token, space=not node.is_leaf)]
                if len(candidates) == 1:
                    chain = _unique_chain(node)
                    if chain:
                        group.append(Suggestion(value=" ".join([token] + chain), space=False, full_command=True))
                groups.append((node.frequency, group))

        # sorted() is stable, so equal frequencies keep discovery order
        groups = sorted(groups, key=lambda item: -item[0])
        return [suggestion for _, group in groups for suggestion in group]


def _unique_chain(node: TrieNode) -> list[str]:
    """
    Tokens along the single-child path from node down to a leaf.

    Empty when node is already a leaf or the path forks before reaching one.
    """
    chain = []
    while len(node.children) == 1:
        token, node = next(iter(node.children.items()))
        chain.append(token)
    if not node.is_leaf:
        return []
    return chain
