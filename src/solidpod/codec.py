"""Line-delimited text encoding for data arrays stored in pod resources."""

from typing import Any, Iterable

DELIMITER = '\n'


def encode(values: Iterable[Any]) -> str:
    """Render each value with `str()` and terminate it with a newline,
    including the last one. An empty sequence encodes to the empty string.

    ```pycon
    >>> encode(['one', 2, True])
    'one\\n2\\nTrue\\n'

    >>> encode([])
    ''
    ```

    Values whose string form contains a newline are not escaped, and will
    decode as more than one value.
    """
    return ''.join(str(value) + DELIMITER for value in values)


def decode(body: str) -> list[str]:
    """Split `body` on newlines. Trailing empty strings are dropped, so the
    final newline written by `encode()` does not produce an extra empty value;
    empty strings in the interior are kept. The empty string is a special
    case: it decodes to a list holding one empty string.

    ```pycon
    >>> decode('one\\n2\\nTrue\\n')
    ['one', '2', 'True']

    >>> decode('a\\n\\nb')
    ['a', '', 'b']

    >>> decode('')
    ['']

    >>> decode('\\n\\n')
    []
    ```
    """
    if body == '':
        return ['']
    values = body.split(DELIMITER)
    while values and values[-1] == '':
        values.pop()
    return values
