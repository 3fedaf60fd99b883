"""
Safety checks for reactor reports.

A report is one line of whitespace-separated levels. It is safe when the
levels are strictly increasing or strictly decreasing and every adjacent
step differs by at least 1 and at most 3.
"""

from typing import Iterable, Sequence, Union

from .logger import get_logger
from .records import parse_levels, split_tokens
from .source import PathLike, iter_lines, open_source, text_lines

MIN_STEP = 1
MAX_STEP = 3


def is_safe(levels: Sequence[int]) -> bool:
    """
    Check whether a report's levels follow the safety rules.

    The first step fixes the direction; sequences shorter than two levels
    are trivially safe.
    """
    if len(levels) < 2:
        return True

    first = levels[1] - levels[0]
    if first == 0 or abs(first) > MAX_STEP:
        return False
    increasing = first > 0

    for prev, cur in zip(levels[1:], levels[2:]):
        step = cur - prev
        if increasing and not (MIN_STEP <= step <= MAX_STEP):
            return False
        if not increasing and not (-MAX_STEP <= step <= -MIN_STEP):
            return False
    return True


def count_safe_reports(source: Union[str, Iterable[str]]) -> int:
    """Count safe reports. Blank lines are not reports."""
    if isinstance(source, str):
        source = text_lines(source)

    logger = get_logger()
    safe = 0
    with logger.timed("validate"):
        for line in source:
            logger.record_line()
            if not split_tokens(line):
                logger.record_skipped(line, "validate")
                continue
            logger.record_parsed()
            if is_safe(parse_levels(line)):
                safe += 1
    return safe


def safe_reports_from_file(path: PathLike) -> int:
    """
    Count the safe reports in a file.

    Raises:
        InputOpenError: If the file cannot be opened
        InputReadError: If a read fails
    """
    with open_source(path) as handle:
        safe = count_safe_reports(iter_lines(handle, path))

    get_logger().info("Safe reports counted", path=str(path), safe=safe)
    return safe
