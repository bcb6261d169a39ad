"""
Solve a Wordament grid from the command line.

Usage:
    python -m scripts.solve_grid ROW [ROW ...] [--scores ROW ...]

Each ROW is a comma-separated list of cards. A card is one or more letters,
optionally marked as a head ("un-") or tail ("-ing") card, or several
alternatives separated by "/".

Examples:
    python -m scripts.solve_grid c,a,t,s r,e,p,o b,o,n,e d,i,g,s
    python -m scripts.solve_grid qu,i,t -ing,s,a --scores 8,1,1 8,1,1
    python -m scripts.solve_grid a/e,t,s un-,d,o --dictionary words.txt --limit 20
"""
import argparse
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordament.settings import settings
from wordament.dictionary import load_trie
from wordament.solver import Solver, default_scores


def parse_rows(rows: list[str]) -> list[list[str]]:
    return [[card.strip() for card in row.split(",")] for row in rows]


def main():
    parser = argparse.ArgumentParser(description="Wordament Grid Solver")
    parser.add_argument("rows", nargs="+", help="Grid rows, cards separated by commas")
    parser.add_argument("--scores", nargs="+", default=None,
                        help="Score rows, values separated by commas (same shape as the grid)")
    parser.add_argument("--auto-score", action="store_true",
                        help=f"Score single letters {settings.NORMAL_CELL_VALUE} "
                             f"and other cards {settings.SPECIAL_CELL_VALUE}")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help=f"Word list to load (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Shortest word to report (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--limit", type=int, default=settings.MAX_RESULTS,
                        help=f"Maximum words to print, 0 for all (default: {settings.MAX_RESULTS})")
    args = parser.parse_args()

    dict_path = Path(args.dictionary)
    if not dict_path.exists():
        print(f"Error: {dict_path} does not exist")
        sys.exit(1)

    grid = parse_rows(args.rows)
    scores = None
    if args.scores:
        try:
            scores = [[int(v) for v in row] for row in parse_rows(args.scores)]
        except ValueError:
            print("Error: scores must be integers")
            sys.exit(1)
    elif args.auto_score:
        scores = default_scores(grid, settings.NORMAL_CELL_VALUE, settings.SPECIAL_CELL_VALUE)

    trie = load_trie(str(dict_path), args.min_length)
    try:
        found = Solver(trie).solve(grid, scores)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    found = [seq for seq in found if len(seq.word) >= args.min_length]
    shown = found[:args.limit] if args.limit > 0 else found

    print("Grid:")
    for row in grid:
        print("  " + " ".join(f"{card:>4}" for card in row))
    print()
    print(f"{len(found)} words found")
    for seq in shown:
        path = " ".join(f"({r},{c})" for r, c in seq.path)
        print(f"  {seq.word:<16} value={seq.total_value:<4} {path}")


if __name__ == "__main__":
    main()
