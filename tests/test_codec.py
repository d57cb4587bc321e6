import pytest

from solidpod.codec import decode, encode


def test_encode():
    assert encode(['one', 2, True]) == 'one\n2\nTrue\n'


def test_encode_empty():
    assert encode([]) == ''


def test_encode_generator():
    assert encode(str(n) for n in range(3)) == '0\n1\n2\n'


def test_decode():
    assert decode('a\nb\nc\n') == ['a', 'b', 'c']


def test_decode_without_trailing_newline():
    assert decode('a\nb\nc') == ['a', 'b', 'c']


def test_decode_empty_string():
    assert decode('') == ['']


def test_decode_only_newlines():
    assert decode('\n\n') == []


def test_decode_keeps_interior_empty_values():
    assert decode('a\n\nb\n') == ['a', '', 'b']


@pytest.mark.parametrize(
    'values',
    [
        ['x'],
        ['a', 'b', 'c'],
        ['', 'leading empty value'],
        ['with spaces', '  padded  ', 'tab\tseparated'],
        ['ünïcödé', '🙂'],
    ]
)
def test_decode_reverses_encode(values):
    assert decode(encode(values)) == values


def test_trailing_empty_values_are_lost():
    assert decode(encode(['a', '', ''])) == ['a']


def test_embedded_newline_splits_value():
    assert decode(encode(['a\nb'])) == ['a', 'b']
