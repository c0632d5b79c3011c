import logging
from collections import deque
from typing import Iterable, Iterator, NamedTuple

from bogglesolver.config import BoardConfig
from bogglesolver.neighbors import get_neighbors
from bogglesolver.trie import (
    LETTER_A,
    DictionaryLoadError,
    Trie,
    bogglify_word,
    make_trie,
    unbogglify_word,
)

logger = logging.getLogger(__name__)


class SearchPath(NamedTuple):
    """A partial word on the board: the cells it used, its letters and its trie node."""

    seen: tuple[int, ...]
    prefix: str
    node: Trie | None


class BoggleSolver:
    """Finds all the dictionary words on boards of a fixed size.

    The dictionary is loaded once and then reused by every call to solve().
    A Trie may also be passed in directly, in which case it should already be
    "bogglified" and it may be shared between solvers.
    """

    config: BoardConfig
    _trie: Trie

    def __init__(
        self,
        width=4,
        height=4,
        max_length: int | None = None,
        min_length=3,
        trie: Trie | None = None,
    ):
        self.config = BoardConfig(width, height, max_length, min_length)
        self._n = self.config.num_cells
        self._neighbors = get_neighbors(width, height)
        self._trie = trie if trie is not None else Trie()
        assert not self._trie.is_word()

    @staticmethod
    def from_config(config: BoardConfig, trie: Trie | None = None) -> "BoggleSolver":
        return BoggleSolver(
            config.width, config.height, config.max_length, config.min_length, trie
        )

    @property
    def trie(self) -> Trie:
        return self._trie

    def board_size(self) -> int:
        return self._n

    def load_words(self, words: Iterable[str]) -> int:
        """Filter a word list and replace the dictionary with it.

        Returns the number of words accepted.
        """
        cfg = self.config
        t = Trie()
        n = 0
        for word in words:
            word = bogglify_word(word, cfg.min_length, cfg.max_length)
            if word is not None:
                t.add_word(word)
                n += 1
        self._trie = t
        return n

    def load_dictionary(self, path: str) -> int | None:
        """Load a (possibly gzipped) word list and return the number of words in it.

        Returns None if the file can't be read, which leaves an empty dictionary.
        An empty but readable file returns 0.
        """
        logger.info("Creating dictionary from %s...", path)
        cfg = self.config
        try:
            self._trie = make_trie(path, cfg.min_length, cfg.max_length)
        except DictionaryLoadError as e:
            logger.error("%s (%s)", e, e.__cause__)
            self._trie = Trie()
            return None
        return self._trie.size()

    def parse_board(self, grid: str) -> str | None:
        if len(grid) != self._n:
            logger.error(
                "Invalid board: expected %d letters, got %d", self._n, len(grid)
            )
            return None
        bd = grid.lower()
        for let in bd:
            if not "a" <= let <= "z":
                logger.error("Invalid board: %r is not a letter", let)
                return None
        return bd

    def search(self, bd: str) -> Iterator[SearchPath]:
        """Yield every path on a parsed board that spells a dictionary word.

        A word may be yielded once for each path that spells it.
        """
        t = self._trie
        q: deque[SearchPath] = deque()
        for start in range(0, self._n):
            c = bd[start]
            q.append(SearchPath((start,), c, t.descend(ord(c) - LETTER_A)))
            while q:
                seen, prefix, node = q.popleft()
                if node is None:
                    continue
                for idx in self._neighbors[seen[-1]]:
                    if idx in seen:
                        continue
                    cc = bd[idx]
                    d = node.descend(ord(cc) - LETTER_A)
                    if d is None:
                        continue
                    path = SearchPath((*seen, idx), prefix + cc, d)
                    q.append(path)
                    if d.is_word():
                        yield path

    def solve_paths(self, grid: str) -> dict[str, tuple[int, ...]] | None:
        """Map each word on the board to the first sequence of cells that spells it.

        Returns None for an invalid board.
        """
        bd = self.parse_board(grid)
        if bd is None:
            return None
        min_length = self.config.min_length
        out: dict[str, tuple[int, ...]] = {}
        for path in self.search(bd):
            word = unbogglify_word(path.prefix)
            if len(word) >= min_length and word not in out:
                out[word] = path.seen
        return out

    def solve(self, grid: str) -> set[str] | None:
        """Find all the words on a board.

        grid is a string of width*height letters, from top left to bottom right,
        with "q" standing for "qu". Returns None for an invalid board, which is
        distinct from the empty set for a board with no words on it.
        """
        bd = self.parse_board(grid)
        if bd is None:
            return None
        min_length = self.config.min_length
        words = set()
        for path in self.search(bd):
            word = unbogglify_word(path.prefix)
            if len(word) >= min_length:
                words.add(word)
        return words
