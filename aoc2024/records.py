import re
from typing import List, Optional, Tuple

_INT_RE = re.compile(r"[+-]?[0-9]+")
# Unicode White_Space; the ASCII information separators \x1c-\x1f are not included
_SPACE_RE = re.compile(r"[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def split_tokens(line: str) -> List[str]:
    # Runs of whitespace count as a single separator
    return [token for token in _SPACE_RE.split(line) if token]


def parse_int(token: str) -> Optional[int]:
    """Parse a signed 64-bit ASCII integer token, returning None when it isn't one."""
    if not _INT_RE.fullmatch(token):
        return None
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def pair_tokens(line: str) -> Optional[Tuple[str, str]]:
    tokens = split_tokens(line)
    if len(tokens) != 2:
        return None
    return tokens[0], tokens[1]


def parse_left(line: str) -> Optional[int]:
    pair = pair_tokens(line)
    if pair is None:
        return None
    return parse_int(pair[0])


def parse_right(line: str) -> Optional[int]:
    pair = pair_tokens(line)
    if pair is None:
        return None
    return parse_int(pair[1])


def parse_record(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse a full two-column record.

    Returns (left, right) only when the line has exactly two tokens and
    both are integers; otherwise None.
    """
    pair = pair_tokens(line)
    if pair is None:
        return None
    left, right = parse_int(pair[0]), parse_int(pair[1])
    if left is None or right is None:
        return None
    return left, right


def parse_levels(line: str) -> List[int]:
    """Integer tokens of a report line, dropping anything that isn't one."""
    levels = []
    for token in split_tokens(line):
        value = parse_int(token)
        if value is not None:
            levels.append(value)
    return levels
