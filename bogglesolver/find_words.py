#!/usr/bin/env python
"""Find all the words on Boggle boards and print them.

Boards are entered interactively or read from a file, one per line, as a string
of width*height letters from top left to bottom right. Use "q" for "qu". For
example, "qadfetriihkriflv" is the 4x4 board:

  +---+---+---+---+
  | Qu| A | D | F |
  +---+---+---+---+
  | E | T | R | I |
  +---+---+---+---+
  | I | H | K | R |
  +---+---+---+---+
  | I | F | L | V |
  +---+---+---+---+

The dictionary is loaded once and reused for every board.
"""

import argparse
import logging
import sys
import time
from typing import Callable

from bogglesolver.args import add_standard_args, get_config_from_args
from bogglesolver.config import ConfigError
from bogglesolver.display import format_columns, format_grid, sort_words
from bogglesolver.solver import BoggleSolver


def read_grid_from_user(board_size: int, read_line: Callable[[str], str] | None = None):
    """Prompt until board_size letters have been entered.

    Returns None on an empty line or end of input.
    """
    read_line = read_line or input
    prompt = f"\nEnter {board_size} letters from boggle grid: "
    chars = ""
    while len(chars) < board_size:
        try:
            line = read_line(prompt)
        except EOFError:
            return None
        line = "".join(line.split())
        if not line:
            return None
        chars += line
        prompt = f"\n{board_size - len(chars)} more letters needed: "
    return chars[:board_size]


def read_grids_from_file(filename: str) -> list[str]:
    with open(filename) as f:
        return [line.strip() for line in f if line.strip()]


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="find_words",
        description="Find all the words on Boggle boards and display them.",
    )
    add_standard_args(parser)
    order = parser.add_mutually_exclusive_group()
    order.add_argument(
        "-l",
        "--longest",
        dest="order",
        action="store_const",
        const="longest",
        help="Sort words longest-first.",
    )
    order.add_argument(
        "-s",
        "--shortest",
        dest="order",
        action="store_const",
        const="shortest",
        help="Sort words shortest-first.",
    )
    parser.set_defaults(order="alpha")
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Don't display the grid. Repeat (-qq) to hide the words as well.",
    )
    parser.add_argument(
        "-f",
        "--input_file",
        type=str,
        help="Read boards from this file, one per line, instead of prompting.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        config = get_config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    solver = BoggleSolver.from_config(config)
    if solver.load_dictionary(args.dictionary) is None:
        sys.stderr.write(f"Unable to load dictionary {args.dictionary}\n")
        return 1

    w, h = config.dims
    n = solver.board_size()

    if args.input_file:
        try:
            grids = read_grids_from_file(args.input_file)
        except OSError as e:
            sys.stderr.write(f"Unable to read boards from {args.input_file}: {e.strerror}\n")
            return 1
    else:
        grids = iter(lambda: read_grid_from_user(n), None)

    for grid in grids:
        start_s = time.perf_counter()
        words = solver.solve(grid)
        elapsed_ms = 1000 * (time.perf_counter() - start_s)
        if words is None:
            continue

        print(f"\nFound {len(words)} solutions for {w}x{h} grid in {elapsed_ms:.2f} msec:")
        if args.quiet < 2:
            if args.quiet < 1:
                print(format_grid(grid, w, h))
            print(format_columns(sort_words(words, args.order)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
