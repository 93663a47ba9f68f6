import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from .alphabet import casefold
from .errors import InvalidBlocklistEntryError

LOG = logging.getLogger(__name__)

_BLOCKLIST_FILEPATH = Path(__file__).parent / 'blocklist.txt'

MIN_WORD_LENGTH = 3


def _parse_words(text: str) -> frozenset:
    words = set()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        words.add(line)
    return frozenset(words)


def load_blocklist_file(filepath) -> frozenset:
    text = Path(filepath).read_text(encoding='utf-8')
    return _parse_words(text)


class DefaultBlocklist:
    def __init__(self, filepath: Path = _BLOCKLIST_FILEPATH) -> None:
        self._filepath = filepath
        self._words: frozenset = None

    def get(self) -> frozenset:
        if self._words is None:
            self._words = load_blocklist_file(self._filepath)
        return self._words


DEFAULT_BLOCKLIST = DefaultBlocklist()


class Blocklist:
    """
    Lower-cased words which identifiers must never match.

    >>> blocklist = Blocklist(['Sex', 'ab', '1234', 'x-y'], alphabet='abcdefghijklmnopqrstuvwxyz0123456789')
    >>> sorted(blocklist)
    ['1234', 'sex']
    >>> blocklist.is_blocked('SEX')
    True
    >>> blocklist.is_blocked('aasexa')
    True
    >>> blocklist.is_blocked('a1234b')
    False
    >>> blocklist.is_blocked('1234b')
    True
    """

    def __init__(self, words: Iterable, alphabet: str) -> None:
        if isinstance(words, (str, bytes, bytearray, Mapping)) \
                or not isinstance(words, Iterable):
            raise InvalidBlocklistEntryError(
                f'blocklist must be a collection of words, got {type(words).__name__}')
        alphabet_chars = set(casefold(alphabet))
        kept = set()
        num_dropped = 0
        for word in words:
            if not isinstance(word, str):
                raise InvalidBlocklistEntryError(f'invalid blocklist word {word!r}')
            if len(word) < MIN_WORD_LENGTH:
                num_dropped += 1
                continue
            try:
                folded = casefold(word)
            except ValueError:
                num_dropped += 1
                continue
            if not alphabet_chars.issuperset(folded):
                num_dropped += 1
                continue
            kept.add(folded)
        self._words = frozenset(kept)
        LOG.debug('blocklist keep %d words, drop %d words', len(kept), num_dropped)

    @property
    def words(self) -> frozenset:
        return self._words

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word):
        return word in self._words

    def __repr__(self):
        return f'<{type(self).__name__} {len(self)} words>'

    def is_blocked(self, candidate: str) -> bool:
        try:
            candidate = casefold(candidate)
        except ValueError:
            # kept words are single-byte, nothing can match
            return False
        size = len(candidate)
        for word in self._words:
            if len(word) > size:
                continue
            if size <= 3:
                if word == candidate:
                    return True
            elif word.isdigit():
                if candidate.startswith(word) or candidate.endswith(word):
                    return True
            elif word in candidate:
                return True
        return False
