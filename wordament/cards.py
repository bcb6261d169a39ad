from __future__ import annotations

from enum import Enum
from typing import NamedTuple

MARKER = "-"
ALTERNATIVE_SEP = "/"


class CardType(Enum):
    NORMAL = "normal"  # letters can go anywhere in the word
    HEAD = "head"      # letters must start the word
    TAIL = "tail"      # letters must end the word


class Card(NamedTuple):
    kind: CardType
    letters: str


class InvalidCellError(ValueError):
    """Raised for cell content the solver cannot interpret."""

    def __init__(self, row: int, col: int, content: str, reason: str):
        self.row = row
        self.col = col
        self.content = content
        super().__init__(f"Invalid cell ({row}, {col}) {content!r}: {reason}")


def parse_card(text: str) -> Card:
    """Split one alternative into its placement and the letters it contributes.

    "-ing" is a tail card, "un-" a head card, anything else is normal.
    A leading marker takes precedence over a trailing one.
    """
    if text.startswith(MARKER):
        return Card(CardType.TAIL, text[1:].lower())
    if text.endswith(MARKER):
        return Card(CardType.HEAD, text[:-1].lower())
    return Card(CardType.NORMAL, text.lower())


def parse_cell(content: str, row: int = 0, col: int = 0) -> list[Card]:
    """Parse raw cell content such as "qu", "-ing" or "a/b" into its alternatives."""
    if not content:
        raise InvalidCellError(row, col, content, "empty cell")

    cards = []
    for alternative in content.split(ALTERNATIVE_SEP):
        if not alternative:
            raise InvalidCellError(row, col, content, "empty alternative")
        card = parse_card(alternative)
        if not card.letters:
            raise InvalidCellError(row, col, content, "marker without letters")
        if not (card.letters.isascii() and card.letters.isalpha()):
            raise InvalidCellError(row, col, content, f"{card.letters!r} is not made of letters a-z")
        cards.append(card)
    return cards


def parse_grid(grid: list[list[str]], scores: list[list[int]] | None = None) -> list[list[list[Card]]]:
    """Validate a grid (and optional scores) up front and parse every cell.

    Rows must all have the same length and `scores` must match the grid shape.
    """
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("Grid is not rectangular")
    if scores is not None:
        if len(scores) != len(grid) or any(len(s) != len(g) for s, g in zip(scores, grid)):
            raise ValueError("Scores do not match the grid shape")

    return [
        [parse_cell(content, r, c) for c, content in enumerate(row)]
        for r, row in enumerate(grid)
    ]
