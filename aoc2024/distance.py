"""Total distance between the two columns once each is sorted."""

from typing import Iterable, List, Tuple, Union

from .logger import get_logger
from .records import parse_record
from .source import PathLike, iter_lines, open_source, text_lines


def collect_columns(lines: Iterable[str]) -> Tuple[List[int], List[int]]:
    """Split valid records into left and right columns of equal length."""
    logger = get_logger()
    left: List[int] = []
    right: List[int] = []
    for line in lines:
        logger.record_line()
        record = parse_record(line)
        if record is None:
            logger.record_skipped(line, "parse")
            continue
        logger.record_parsed()
        left.append(record[0])
        right.append(record[1])
    return left, right


def total_distance(left: List[int], right: List[int]) -> int:
    logger = get_logger()
    with logger.timed("sort"):
        left = sorted(left)
        right = sorted(right)
    with logger.timed("distance"):
        return sum(abs(a - b) for a, b in zip(left, right))


def compute_total_distance(source: Union[str, Iterable[str]]) -> int:
    """
    Sum of |left - right| over the pairs of the independently sorted columns.

    Only lines with exactly two integer tokens take part.
    """
    if isinstance(source, str):
        source = text_lines(source)
    with get_logger().timed("parse"):
        left, right = collect_columns(source)
    return total_distance(left, right)


def total_distance_from_file(path: PathLike) -> int:
    """
    Compute the total distance of a file in a single read.

    Raises:
        InputOpenError: If the file cannot be opened
        InputReadError: If a read fails
    """
    logger = get_logger()
    with open_source(path) as handle:
        with logger.timed("parse"):
            left, right = collect_columns(iter_lines(handle, path))

    distance = total_distance(left, right)
    logger.info("Total distance computed", path=str(path), pairs=len(left), distance=distance)
    return distance
