#!/usr/bin/env python
"""I/O-free performance test.

$ python -m bogglesolver.perf --random_seed 808813 --num_boards 10000 wordlists/enable2k.txt
"""

import argparse
import itertools
import logging
import random
import string
import sys
import time

from tqdm import tqdm

from bogglesolver.args import add_standard_args, get_solver_from_args
from bogglesolver.config import ConfigError
from bogglesolver.trie import LETTER_A


def random_board(n: int) -> str:
    return "".join(chr(LETTER_A + random.randint(0, 25)) for _ in range(n))


def alphabet_board(n: int) -> str:
    """The letters a-z, repeated as needed to fill n cells."""
    return "".join(itertools.islice(itertools.cycle(string.ascii_lowercase), n))


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="bogglesolver perf test",
        description="Measure the speed of board solving, free from I/O.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "--alphabet",
        action="store_true",
        help="Solve the same a-z board repeatedly instead of random boards.",
    )
    parser.add_argument(
        "--num_boards",
        type=int,
        help="Number of boards to solve",
        default=10_000,
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    try:
        solver = get_solver_from_args(args)
    except ConfigError as e:
        parser.error(str(e))
    if solver is None:
        sys.stderr.write(f"Unable to load dictionary {args.dictionary}\n")
        return 1
    n = solver.board_size()
    w, h = solver.config.dims

    if args.alphabet:
        boards = [alphabet_board(n)] * args.num_boards
    else:
        print(f"Generating {args.num_boards} {w}x{h} boards...")
        boards = [random_board(n) for _ in range(args.num_boards)]

    total_words = 0
    start_s = time.perf_counter()
    # smoothing=0 means to show the average pace so far, which is the best estimator.
    for board in tqdm(boards, smoothing=0):
        total_words += len(solver.solve(board))
    end_s = time.perf_counter()

    elapsed_s = end_s - start_s
    pace = len(boards) / elapsed_s if elapsed_s > 0 else float("inf")

    print(f"{total_words=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")
    return 0


if __name__ == "__main__":
    sys.exit(main())
