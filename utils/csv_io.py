"""
Line-based reader and writer for delimited snapshot files.

Each record is one line of delimiter-separated numbers with no header.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"


def read_line(
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
    line_number: int = 0,
) -> List[str]:
    """
    Read one line of a delimited file and split it into tokens.

    Args:
        path: File to read
        delimiter: Field separator
        line_number: Zero-based index of the line to return

    Returns:
        Raw string tokens, or an empty list if the line does not exist.
        A trailing delimiter does not produce an empty last token.
    """
    # Undecodable bytes become U+FFFD so the token is rejected by the parser
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for i, line in enumerate(f):
            if i == line_number:
                break
        else:
            logger.debug(f"No line {line_number} in {path}")
            return []

    line = line.rstrip("\r\n")
    if not line:
        return []
    tokens = line.split(delimiter)
    if tokens and tokens[-1].strip() == "":
        tokens.pop()
    return tokens


def write_line(
    path: Union[str, Path],
    values: Iterable[float],
    append: bool = True,
    delimiter: str = DEFAULT_DELIMITER,
) -> None:
    """
    Write values as one delimited line.

    Floats are written with ``repr`` so that reading them back yields the
    identical double.

    Args:
        path: Target file; created if missing
        values: Numbers to write
        append: Append to an existing file instead of truncating it
        delimiter: Field separator
    """
    line = delimiter.join(repr(float(v)) for v in values)
    with open(path, "a" if append else "w", encoding="utf-8") as f:
        f.write(line + "\n")
