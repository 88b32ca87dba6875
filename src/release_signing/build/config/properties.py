"""
Reading and writing of .properties files.

Follows the line-oriented format read by java.util.Properties, which is
what Gradle uses for key.properties:

- lines starting with '#' or '!' (after leading whitespace) are comments
- the key ends at the first unescaped '=', ':' or whitespace
- whitespace around the separator is ignored
- an odd number of trailing backslashes continues the logical line
- backslash escapes: \\t \\n \\r \\f \\uXXXX, any other char stands for itself
"""
import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .exceptions import MalformedPropertiesError

_WHITESPACE = ' \t\f'
_SEPARATORS = '=:'
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
# Only CR, LF and CRLF end a line; str.splitlines() would also split on \f
_LINE_BREAK = re.compile(r'\r\n|\r|\n')
_HEX4 = re.compile(r'[0-9a-fA-F]{4}')


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, logical_line) pairs, joining continuation lines."""
    pending: Optional[List[str]] = None
    start = 0
    for number, raw in enumerate(_LINE_BREAK.split(text), start=1):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in '#!':
                continue
            start = number
            pending = []
        trailing = len(line) - len(line.rstrip('\\'))
        if trailing % 2 == 1:
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield start, ''.join(pending)
        pending = None
    if pending is not None:
        # Continuation on the last line of the file
        yield start, ''.join(pending)


def _unescape(value: str, line_number: int) -> str:
    out = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != '\\' or i + 1 >= len(value):
            out.append(ch)
            i += 1
            continue
        nxt = value[i + 1]
        if nxt == 'u':
            digits = value[i + 2:i + 6]
            if not _HEX4.fullmatch(digits):
                raise MalformedPropertiesError(
                    f"Malformed \\uXXXX encoding: '\\u{digits}'", line_number=line_number)
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return ''.join(out)


def _split_key_value(line: str) -> Tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value."""
    i = 0
    length = len(line)
    while i < length:
        ch = line[i]
        if ch == '\\':
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]

    # Skip whitespace, at most one '=' or ':' separator, then whitespace again
    while i < length and line[i] in _WHITESPACE:
        i += 1
    if i < length and line[i] in _SEPARATORS:
        i += 1
        while i < length and line[i] in _WHITESPACE:
            i += 1
    return key, line[i:]


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse properties text into a dictionary.

    Later duplicate keys override earlier ones.

    Raises:
        MalformedPropertiesError: If a \\uXXXX escape is invalid
    """
    result: Dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_key_value(line)
        result[_unescape(raw_key, line_number)] = _unescape(raw_value, line_number)
    return result


def _escape(text: str, is_key: bool) -> str:
    out = []
    for index, ch in enumerate(text):
        if ch == '\\':
            out.append('\\\\')
        elif ch in '\t\n\r\f':
            out.append('\\' + {'\t': 't', '\n': 'n', '\r': 'r', '\f': 'f'}[ch])
        elif ch in '=:':
            out.append('\\' + ch)
        elif ch in '#!' and index == 0:
            out.append('\\' + ch)
        elif ch == ' ' and (is_key or index == 0):
            out.append('\\ ')
        else:
            out.append(ch)
    return ''.join(out)


def dump_properties(mapping: Mapping[str, str], comments: Optional[Iterable[str]] = None) -> str:
    """Render a mapping as properties text that parse_properties reads back unchanged."""
    lines = [f"# {comment}" for comment in (comments or [])]
    for key, value in mapping.items():
        lines.append(f"{_escape(key, True)}={_escape(value, False)}")
    return '\n'.join(lines) + '\n'
