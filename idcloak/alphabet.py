"""
Alphabet validate and shuffle

>>> shuffle('abc')
'abc'
>>> shuffle('cba')
'bca'
>>> sorted(shuffle(DEFAULT_ALPHABET)) == sorted(DEFAULT_ALPHABET)
True
"""
import string

from .errors import InvalidAlphabetError

DEFAULT_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

MIN_ALPHABET_LENGTH = 3


def _is_single_byte(text: str) -> bool:
    return len(text.encode('utf-8')) == len(text)


def validate_alphabet(alphabet: str) -> str:
    if not isinstance(alphabet, str):
        raise InvalidAlphabetError(f'alphabet must be str, got {type(alphabet).__name__}')
    if not _is_single_byte(alphabet):
        raise InvalidAlphabetError('alphabet cannot contain multibyte characters')
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise InvalidAlphabetError(
            f'alphabet length must be at least {MIN_ALPHABET_LENGTH}')
    if len(set(alphabet)) != len(alphabet):
        raise InvalidAlphabetError('alphabet must contain unique characters')
    return alphabet


def shuffle(alphabet: str) -> str:
    """
    Deterministic permutation of alphabet, keyed by the characters themselves.
    """
    chars = list(alphabet)
    size = len(chars)
    i, j = 0, size - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % size
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1
    return ''.join(chars)


def casefold(text: str) -> str:
    """
    >>> casefold('AbC')
    'abc'
    """
    if not _is_single_byte(text):
        raise ValueError(f'can not casefold multibyte text {text!r}')
    return text.lower()
