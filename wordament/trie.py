from __future__ import annotations

LETTER_A = ord("a")
ALPHABET_SIZE = 26


def _slot(ch: str) -> int:
    """Index of a lowercase letter in a branch table, or -1 if it is not a-z."""
    if len(ch) != 1:
        return -1
    i = ord(ch) - LETTER_A
    return i if 0 <= i < ALPHABET_SIZE else -1


class Branch:
    """A node that can be extended. `can_end` marks a complete word."""

    __slots__ = ("children", "can_end")

    def __init__(self, can_end: bool = False):
        self.children: list[Branch | Terminal | None] = [None] * ALPHABET_SIZE
        self.can_end: bool = can_end

    def __repr__(self):
        letters = "".join(chr(LETTER_A + i) for i, child in enumerate(self.children) if child)
        return f"<Branch can_end={self.can_end} [{letters}]>"


class Terminal:
    """End of a word with nothing after it. Saves allocating a 26-slot table."""

    __slots__ = ()

    def __repr__(self):
        return "<Terminal>"


Node = Branch | Terminal


class Trie:
    def __init__(self):
        self._root = Branch()
        self._size = 0

    @property
    def root(self) -> Branch:
        return self._root

    def insert(self, word: str):
        """Add `word` (case-insensitive). Inserting the same word twice is harmless."""
        word = word.lower()
        if not word:
            return
        slots = [_slot(ch) for ch in word]
        if -1 in slots:
            bad = word[slots.index(-1)]
            raise ValueError(f"Cannot insert {word!r}: {bad!r} is not a letter a-z")

        parent: Branch | None = None
        last = -1
        node: Node | None = self._root
        for i in slots:
            if isinstance(node, Terminal):
                # Promote: a longer word now passes through this position
                node = Branch(can_end=True)
                parent.children[last] = node
            elif node is None:
                node = Branch()
                parent.children[last] = node
            parent, last = node, i
            node = node.children[i]

        if isinstance(node, Branch):
            if not node.can_end:
                node.can_end = True
                self._size += 1
        elif node is None:
            parent.children[last] = Terminal()
            self._size += 1

    @staticmethod
    def transition(node: Node, letter: str) -> Node | None:
        if isinstance(node, Terminal):
            return None
        i = _slot(letter.lower())
        if i < 0:
            return None
        return node.children[i]

    @staticmethod
    def may_terminate(node: Node) -> bool:
        if isinstance(node, Terminal):
            return True
        return node.can_end

    def __contains__(self, word: str) -> bool:
        node = self._root
        for ch in word:
            node = self.transition(node, ch)
            if node is None:
                return False
        return bool(word) and self.may_terminate(node)

    def __len__(self) -> int:
        return self._size
