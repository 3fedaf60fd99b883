"""
Similarity score between the two columns of a puzzle input.

The score is the sum, over every left-column value, of that value times
the number of times it appears in the right-hand column. It is computed in
two passes: the first builds a frequency table of the right column, the
second walks the left column and scores each value against that table.
"""

from collections import Counter
from collections.abc import Sequence
from typing import Iterable, Union

from .logger import get_logger
from .records import parse_left, parse_right
from .source import PathLike, iter_lines, open_source, rewind, text_lines


def build_frequency_table(lines: Iterable[str]) -> Counter:
    """
    Count occurrences of each right-column value.

    Lines without exactly two tokens, or whose second token is not an
    integer, are skipped.
    """
    logger = get_logger()
    table: Counter = Counter()
    for line in lines:
        logger.record_line()
        right = parse_right(line)
        if right is None:
            logger.record_skipped(line, "frequency_pass")
            continue
        logger.record_parsed()
        table[right] += 1
    return table


def score_against(lines: Iterable[str], table: Counter) -> int:
    """
    Sum left * table[left] over every line with a valid left value.

    The table is only read; values absent from it score zero.
    """
    logger = get_logger()
    score = 0
    for line in lines:
        logger.record_line()
        left = parse_left(line)
        if left is None:
            logger.record_skipped(line, "scoring_pass")
            continue
        logger.record_parsed()
        score += left * table.get(left, 0)
    return score


def compute_similarity_score(source: Union[str, Iterable[str]]) -> int:
    """
    Compute the similarity score of in-memory lines.

    Args:
        source: Lines of input, or a whole text blob. One-shot iterables
            are buffered so both passes see the same lines.

    Returns:
        The similarity score (0 for empty or fully malformed input)
    """
    if isinstance(source, str):
        lines = text_lines(source)
    elif isinstance(source, Sequence):
        lines = source
    else:
        lines = list(source)

    logger = get_logger()
    with logger.timed("frequency_pass"):
        table = build_frequency_table(lines)
    with logger.timed("scoring_pass"):
        return score_against(lines, table)


def similarity_score_from_file(path: PathLike) -> int:
    """
    Compute the similarity score of a file, streaming it twice.

    The file is opened once and rewound between passes.

    Raises:
        InputOpenError: If the file cannot be opened
        InputReadError: If a read fails during either pass
    """
    logger = get_logger()
    with open_source(path) as handle:
        with logger.timed("frequency_pass"):
            table = build_frequency_table(iter_lines(handle, path))
        rewind(handle, path)
        with logger.timed("scoring_pass"):
            score = score_against(iter_lines(handle, path), table)

    logger.info(
        "Similarity score computed",
        path=str(path),
        distinct_values=len(table),
        score=score,
    )
    return score
