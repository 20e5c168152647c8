from typing import Generic, Optional, TypeVar

V = TypeVar("V")

class TrieNode(Generic[V]):
    __slots__ = ["label", "children", "values"]

    def __init__(self, label: Optional[str] = None):
        self.label = label
        self.children: dict[str, "TrieNode[V]"] = {}
        self.values: list[V] = []

    def __repr__(self):
        return f"TrieNode {self.label}, keys: {tuple(self.children.keys())}, values: {len(self.values)}"

class ApproximateTrie(Generic[V]):
    """
    Prefix tree mapping keys to every value inserted under them.

    Lookups can tolerate a single substituted symbol anywhere but the first
    position of the key.
    """

    def __init__(self):
        self._root: TrieNode[V] = TrieNode()

    def reset(self):
        self._root = TrieNode()

    def insert(self, key: str, value: V):
        current = self._root
        for symbol in key:
            child = current.children.get(symbol)
            if child is None:
                child = TrieNode(symbol)
                current.children[symbol] = child
            current = child
        current.values.append(value)

    def find(self, key: str, exact_match_only: bool) -> list[V]:
        """
        Collects the values of every node whose path from the root spells out `key`.

        When `exact_match_only` is false, a path may also differ from `key` at
        one position, as long as that position is not the first.
        """
        results: list[V] = []
        # (node, symbols of key consumed, substitution already spent)
        pending = [(self._root, 0, exact_match_only)]
        while pending:
            current, depth, substitution_spent = pending.pop()
            if depth == len(key):
                results.extend(current.values)
                continue
            symbol = key[depth]
            for label, child in current.children.items():
                if label == symbol:
                    pending.append((child, depth + 1, substitution_spent))
                elif not substitution_spent and current is not self._root:
                    pending.append((child, depth + 1, True))
        return results
