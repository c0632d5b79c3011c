"""Text output for boards and word lists."""

from typing import Iterable, Literal

SortOrder = Literal["alpha", "longest", "shortest"]


def format_grid(grid: str, w: int, h: int) -> str:
    """Draw a board in a box, e.g.

    +---+---+
    | Qu| A |
    +---+---+
    | E | T |
    +---+---+
    """
    assert len(grid) == w * h
    hline = "+" + "---+" * w
    lines = [hline]
    for y in range(h):
        row = grid[y * w : (y + 1) * w].upper()
        cells = ["Qu" if c == "Q" else c + " " for c in row]
        lines.append("|" + "|".join(f" {c}" for c in cells) + "|")
        lines.append(hline)
    return "\n".join(lines)


def sort_words(words: Iterable[str], order: SortOrder = "alpha") -> list[str]:
    out = sorted(words)
    # sorted() is stable, so words of the same length stay alphabetical.
    if order == "longest":
        out.sort(key=len, reverse=True)
    elif order == "shortest":
        out.sort(key=len)
    elif order != "alpha":
        raise ValueError(order)
    return out


def format_columns(words: list[str], num_columns=4, column_width=18) -> str:
    rows = []
    for i in range(0, len(words), num_columns):
        row = words[i : i + num_columns]
        rows.append(" ".join(w.ljust(column_width) for w in row).rstrip())
    return "\n".join(rows)
