"""
Number <-> symbols in base len(alphabet)

>>> to_id(0, 'ab')
'a'
>>> to_id(5, 'ab')
'bab'
>>> to_number('bab', 'ab')
5
>>> to_number(to_id(2 ** 64, 'xyz'), 'xyz') == 2 ** 64
True
"""
from .errors import InvalidSymbolError


def to_id(number: int, alphabet: str) -> str:
    base = len(alphabet)
    digits = []
    while True:
        number, remainder = divmod(number, base)
        digits.append(alphabet[remainder])
        if number <= 0:
            break
    return ''.join(reversed(digits))


def to_number(id_slice: str, alphabet: str) -> int:
    base = len(alphabet)
    number = 0
    for char in id_slice:
        index = alphabet.find(char)
        if index < 0:
            raise InvalidSymbolError(f"invalid character {char!r}")
        number = number * base + index
    return number
