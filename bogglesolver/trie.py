import gzip
import logging
from typing import Iterable, Iterator, Self

LETTER_A = ord("a")

logger = logging.getLogger(__name__)


class DictionaryLoadError(OSError):
    """The word list could not be opened or read."""


def letter_indices(word: str) -> list[int]:
    idxs = [ord(let) - LETTER_A for let in word]
    for let, i in zip(word, idxs):
        if not 0 <= i < 26:
            raise ValueError(f"Invalid letter {let!r} in {word!r}")
    return idxs


class Trie:
    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * 26

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return self._is_word

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        """Insert word, creating nodes as needed, and return its terminal node."""
        t = self
        for i in letter_indices(word):
            child = t._children[i]
            if child is None:
                child = t._children[i] = Trie()
            t = child
        t.set_is_word()
        return t

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)

    def find_word(self, word: str):
        """The node reached by spelling word, or None. It need not be a word itself."""
        t = self
        for let in word:
            i = ord(let) - LETTER_A
            if not 0 <= i < 26:
                return None
            t = t.descend(i)
            if t is None:
                return None
        return t

    def contains(self, word: str):
        t = self.find_word(word)
        return t is not None and t.is_word()

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """words should already be "bogglified"."""
        trie = Trie()
        for word in words:
            trie.add_word(word)
        return trie


def is_boggle_word(word: str, min_length: int, max_length: int):
    size = len(word)
    if size < min_length or size > max_length:
        return False
    for i, let in enumerate(word):
        if let < "a" or let > "z":
            return False
        if let == "q" and (i + 1 >= size or word[i + 1] != "u"):
            return False
    return True


def bogglify_word(word: str, min_length=3, max_length=16) -> str | None:
    if not is_boggle_word(word, min_length, max_length):
        return None
    return word.replace("qu", "q")


def unbogglify_word(word: str) -> str:
    return word.replace("q", "qu")


def read_words(path: str) -> Iterator[str]:
    """Yield the stripped lines of a word list, which may be gzipped."""
    try:
        if path.endswith(".gz"):
            f = gzip.open(path, "rt")
        else:
            f = open(path)
    except OSError as e:
        raise DictionaryLoadError(f"unable to open dictionary file: {path}") from e
    with f:
        try:
            for line in f:
                yield line.strip()
        except (OSError, EOFError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"cannot read dictionary file: {path}") from e


def make_trie(path: str, min_length=3, max_length=16) -> Trie:
    t = Trie()
    n = 0
    for word in read_words(path):
        word = bogglify_word(word, min_length, max_length)
        if word is not None:
            t.add_word(word)
            n += 1
    logger.info("Loaded %d words from %s", n, path)
    return t
