"""Standard command-line arguments shared across tools."""

import argparse

from bogglesolver.config import BoardConfig
from bogglesolver.solver import BoggleSolver

DEFAULT_WORDS = "boggle_dict.txt.gz"


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "-x",
        "--width",
        type=int,
        default=4,
        help="Width (X-length) of the board.",
    )
    parser.add_argument(
        "-y",
        "--height",
        type=int,
        default=4,
        help="Height (Y-length) of the board.",
    )
    parser.add_argument(
        "--min_length",
        type=int,
        default=3,
        help="Words must have at least this many letters.",
    )
    parser.add_argument(
        "--max_length",
        type=int,
        default=None,
        help="Words must have at most this many letters. Defaults to the number of cells.",
    )
    parser.add_argument(
        "dictionary",
        type=str,
        nargs="?",
        default=DEFAULT_WORDS,
        help="Path to dictionary file with one word per line, optionally gzipped.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_config_from_args(args: argparse.Namespace) -> BoardConfig:
    return BoardConfig(args.width, args.height, args.max_length, args.min_length)


def get_solver_from_args(args: argparse.Namespace) -> BoggleSolver | None:
    """A solver with the dictionary loaded, or None if it couldn't be read."""
    solver = BoggleSolver.from_config(get_config_from_args(args))
    if solver.load_dictionary(args.dictionary) is None:
        return None
    return solver
