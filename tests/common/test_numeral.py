import pytest

from idcloak.alphabet import DEFAULT_ALPHABET
from idcloak.numeral import to_id, to_number
from idcloak.errors import InvalidSymbolError, InvalidIdentifierError


def test_to_id():
    assert to_id(0, 'ab') == 'a'
    assert to_id(1, 'ab') == 'b'
    assert to_id(2, 'ab') == 'ba'
    assert to_id(255, '0123456789abcdef') == 'ff'
    assert to_id(61, DEFAULT_ALPHABET) == '9'
    assert to_id(62, DEFAULT_ALPHABET) == 'ba'


def test_to_number():
    assert to_number('a', 'ab') == 0
    assert to_number('ba', 'ab') == 2
    assert to_number('ff', '0123456789abcdef') == 255
    assert to_number('ba', DEFAULT_ALPHABET) == 62


@pytest.mark.parametrize('alphabet', ['ab', 'xyz', DEFAULT_ALPHABET[1:]])
@pytest.mark.parametrize('number', [0, 1, 2, 7, 61, 62, 1000, 2 ** 32 - 1, 2 ** 64, 10 ** 30])
def test_round_trip(number, alphabet):
    assert to_number(to_id(number, alphabet), alphabet) == number


def test_to_number_invalid_symbol():
    with pytest.raises(InvalidSymbolError):
        to_number('abc', 'ab')
    with pytest.raises(InvalidIdentifierError):
        to_number('x', 'ab')
