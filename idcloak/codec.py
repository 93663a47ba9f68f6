"""
IdCloak Encode and Decode

>>> cloak = IdCloak(alphabet='abc', blocklist=[])
>>> cloak.encode([0, 1])
'abca'
>>> cloak.decode('abca')
[0, 1]
>>> cloak.encode([])
''
"""
import logging
import typing

from validr import T, Compiler, Invalid

from .alphabet import DEFAULT_ALPHABET, validate_alphabet, shuffle
from .blocklist import DEFAULT_BLOCKLIST, Blocklist
from .numeral import to_id, to_number
from .errors import (
    IdCloakEncodeError,
    InvalidOptionError,
    InvalidMinLengthError,
    InvalidNumberError,
    MaxAttemptsExceededError,
    InvalidIdentifierError,
)

LOG = logging.getLogger(__name__)

OPTION_KEYS = ('alphabet', 'min_length', 'blocklist')

_validate_min_length = Compiler().compile(T.int.min(0).desc('minimum id length'))


def default_options() -> dict:
    return dict(
        alphabet=DEFAULT_ALPHABET,
        min_length=0,
        blocklist=DEFAULT_BLOCKLIST.get(),
    )


class IdCloak:
    """
    Immutable codec instance, safe to share between threads.

    Args:
        alphabet: symbols of the identifier, default a-z A-Z 0-9
        min_length: pad identifiers to at least this length
        blocklist: words identifiers must not match, default the bundled list
    """

    __slots__ = ('_alphabet', '_alphabet_chars', '_min_length', '_blocklist', '_n')

    def __init__(
        self,
        alphabet: str = None,
        min_length: int = 0,
        blocklist: typing.Iterable[str] = None,
    ):
        if alphabet is None:
            alphabet = DEFAULT_ALPHABET
        alphabet = validate_alphabet(alphabet)
        if min_length is None:
            min_length = 0
        if isinstance(min_length, bool) or not isinstance(min_length, int):
            raise InvalidMinLengthError(
                f'invalid min_length {min_length!r}, expect integer')
        try:
            min_length = _validate_min_length(min_length)
        except Invalid as ex:
            raise InvalidMinLengthError(str(ex)) from ex
        if blocklist is None:
            blocklist = DEFAULT_BLOCKLIST.get()
        self._blocklist = Blocklist(blocklist, alphabet)
        self._alphabet = shuffle(alphabet)
        self._alphabet_chars = frozenset(alphabet)
        self._min_length = min_length
        self._n = len(alphabet)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def blocklist(self) -> frozenset:
        return self._blocklist.words

    @property
    def n(self) -> int:
        return self._n

    def __repr__(self):
        type_name = type(self).__name__
        return (f'<{type_name} alphabet={self._n} min_length={self._min_length} '
                f'blocklist={len(self._blocklist)}>')

    def is_blocked(self, id: str) -> bool:
        return self._blocklist.is_blocked(id)

    @staticmethod
    def _check_numbers(numbers) -> list:
        try:
            numbers = list(numbers)
        except TypeError:
            raise InvalidNumberError('numbers must be a sequence of integers') from None
        for number in numbers:
            if isinstance(number, bool) or not isinstance(number, int):
                raise InvalidNumberError(f'invalid number {number!r}, expect integer')
            if number < 0:
                raise InvalidNumberError(f'negative number {number} not allowed')
        return numbers

    def _base_offset(self, numbers: list) -> int:
        alphabet, n = self._alphabet, self._n
        offset = len(numbers)
        for i, number in enumerate(numbers):
            offset += ord(alphabet[number % n]) + i
        return offset % n

    def _working_alphabet(self, offset: int) -> typing.Tuple[str, str]:
        """Rotate left by offset, return prefix and the reversed alphabet"""
        rotated = self._alphabet[offset:] + self._alphabet[:offset]
        return rotated[0], rotated[::-1]

    def _encode_numbers(self, numbers: list, offset: int) -> str:
        prefix, alphabet = self._working_alphabet(offset)
        parts = [prefix]
        last = len(numbers) - 1
        for i, number in enumerate(numbers):
            parts.append(to_id(number, alphabet[1:]))
            if i < last:
                parts.append(alphabet[0])
                alphabet = shuffle(alphabet)
        id = ''.join(parts)
        if self._min_length > len(id):
            id += alphabet[0]
            while self._min_length > len(id):
                alphabet = shuffle(alphabet)
                id += alphabet[:min(self._min_length - len(id), self._n)]
        return id

    def encode(self, numbers: typing.Iterable[int]) -> str:
        numbers = self._check_numbers(numbers)
        if not numbers:
            return ''
        base_offset = self._base_offset(numbers)
        for increment in range(self._n + 1):
            offset = (base_offset + increment) % self._n
            id = self._encode_numbers(numbers, offset)
            if not self._blocklist.is_blocked(id):
                return id
            LOG.debug('id %r is blocked, retry with increment=%d', id, increment + 1)
        raise MaxAttemptsExceededError(
            f'reached max attempts ({self._n + 1}) to re-generate the id')

    def decode(self, id: str) -> typing.List[int]:
        if not isinstance(id, str):
            raise InvalidIdentifierError(f'invalid id {id!r}, expect str')
        if not id:
            return []
        unknown = set(id) - self._alphabet_chars
        if unknown:
            chars = ''.join(sorted(unknown))
            raise InvalidIdentifierError(f'id {id!r} contains invalid characters {chars!r}')
        offset = self._alphabet.index(id[0])
        __, alphabet = self._working_alphabet(offset)
        numbers = []
        remain = id[1:]
        while remain:
            chunk, separator, remain = remain.partition(alphabet[0])
            if not chunk:
                break
            numbers.append(to_number(chunk, alphabet[1:]))
            if separator:
                alphabet = shuffle(alphabet)
        if not numbers:
            raise InvalidIdentifierError(f'id {id!r} contains no number')
        try:
            expect = self.encode(numbers)
        except IdCloakEncodeError as ex:
            raise InvalidIdentifierError(f'invalid id {id!r}') from ex
        if expect != id:
            raise InvalidIdentifierError(f'id {id!r} is not canonical')
        return numbers


def new(options: dict = None, **kwargs) -> IdCloak:
    """
    >>> new(alphabet='abc', blocklist=[])
    <IdCloak alphabet=3 min_length=0 blocklist=0>
    """
    options = dict(options or {}, **kwargs)
    unknown = set(options) - set(OPTION_KEYS)
    if unknown:
        keys = ','.join(sorted(unknown))
        raise InvalidOptionError(f'unknown options {keys}')
    return IdCloak(**options)
