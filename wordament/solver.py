from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass

from sortedcontainers import SortedDict

from wordament.cards import Card, CardType, parse_grid
from wordament.metrics import StageTimer
from wordament.trie import Node, Trie

logger = logging.getLogger("wordament")


@dataclass(frozen=True)
class Sequence:
    """A word found on the grid together with the cells that spell it."""

    rows: tuple[int, ...]
    cols: tuple[int, ...]
    word: str
    total_value: int = 0

    @property
    def path(self) -> list[tuple[int, int]]:
        return list(zip(self.rows, self.cols))

    @property
    def length(self) -> int:
        return len(self.rows)

    def rank(self) -> tuple[int, int]:
        # Equal values keep the path using more cells
        return self.total_value, len(self.rows)


def default_scores(grid: list[list[str]], normal_value: int = 1, special_value: int = 8) -> list[list[int]]:
    """Score a plain single-letter cell `normal_value` and anything longer `special_value`."""
    return [[special_value if len(cell) > 1 else normal_value for cell in row] for row in grid]


class _Search:
    """Transient state of a single solve call."""

    def __init__(self, trie: Trie, cards: list[list[list[Card]]], scores: list[list[int]] | None):
        self.trie = trie
        self.cards = cards
        self.scores = scores
        n_rows = len(cards)
        n_cols = len(cards[0]) if cards else 0
        self.total_cells = n_rows * n_cols

        self.used: set[tuple[int, int]] = set()
        self.rows: list[int] = []
        self.cols: list[int] = []
        # Alternative in effect on each cell of the current path
        self.active: list[Card] = []
        self.found: SortedDict = SortedDict()

        # Precompute king-move neighbours
        self.neighbors: dict[tuple[int, int], list[tuple[int, int]]] = {}
        for r in range(n_rows):
            for c in range(n_cols):
                adj = []
                for dr in (-1, 0, 1):
                    for dc in (-1, 0, 1):
                        if dr == 0 and dc == 0:
                            continue
                        nr, nc = r + dr, c + dc
                        if 0 <= nr < n_rows and 0 <= nc < n_cols:
                            adj.append((nr, nc))
                self.neighbors[r, c] = adj

    @contextmanager
    def visit(self, row: int, col: int, card: Card):
        """Put a cell on the path for the duration of the block."""
        self.rows.append(row)
        self.cols.append(col)
        self.active.append(card)
        self.used.add((row, col))
        try:
            yield
        finally:
            self.used.discard((row, col))
            self.active.pop()
            self.cols.pop()
            self.rows.pop()

    def step(self, row: int, col: int, card: Card, node: Node):
        if card.kind is CardType.HEAD and self.rows:
            return

        for ch in card.letters:
            node = self.trie.transition(node, ch)
            if node is None:
                return

        can_end = self.trie.may_terminate(node)
        if card.kind is CardType.TAIL and not can_end:
            return

        with self.visit(row, col, card):
            if can_end:
                self.record()
            elif len(self.rows) == self.total_cells:
                return

            if card.kind is CardType.TAIL:
                return

            for nr, nc in self.neighbors[row, col]:
                if (nr, nc) in self.used:
                    continue
                for alternative in self.cards[nr][nc]:
                    self.step(nr, nc, alternative, node)

    def record(self):
        word = "".join(card.letters for card in self.active)
        value = 0
        if self.scores is not None:
            value = sum(self.scores[r][c] for r, c in zip(self.rows, self.cols))

        seq = Sequence(tuple(self.rows), tuple(self.cols), word, value)
        existing = self.found.get(word)
        # A word scores once, keep only its best path
        if existing is None or seq.rank() > existing.rank():
            self.found[word] = seq


class Solver:
    def __init__(self, trie: Trie):
        self.trie = trie

    def solve(
        self,
        grid: list[list[str]],
        scores: list[list[int]] | None = None,
        timer: StageTimer | None = None,
    ) -> list[Sequence]:
        """Find every dictionary word that can be traced on `grid`.

        Cells are joined by king moves and each cell is used at most once per
        word. A cell may hold several letters ("qu"), a head card ("un-") that
        must start the word, a tail card ("-ing") that must end it, or several
        "/"-separated alternatives. Raises InvalidCellError before searching if
        any cell cannot be parsed.

        Time spent is recorded on `timer` under "parse", "search" and "rank".

        Returns one Sequence per distinct word, highest total value first, then
        longest path, then alphabetical.
        """
        if timer is None:
            timer = StageTimer()

        with timer.stage("parse"):
            cards = parse_grid(grid, scores)

        with timer.stage("search"):
            search = _Search(self.trie, cards, scores)
            for r, row in enumerate(cards):
                for c, alternatives in enumerate(row):
                    for card in alternatives:
                        search.step(r, c, card, self.trie.root)

        with timer.stage("rank"):
            # found iterates in word order and sorted() is stable
            result = sorted(search.found.values(), key=Sequence.rank, reverse=True)

        logger.info(
            "Solved %dx%d grid: %d words (parse=%.1fms search=%.1fms rank=%.1fms)",
            len(cards), len(cards[0]) if cards else 0, len(result),
            timer.timings["parse"], timer.timings["search"], timer.timings["rank"],
        )
        return result
