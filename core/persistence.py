"""
Load and save ADM1 state snapshots as delimited text lines.

A snapshot file holds one state vector per line, ``;``-separated, with no
header and no schema tag. Reading accepts the legacy (26/28 values) and
extended (42 values) layouts; writing always emits all 42 values.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from core.exceptions import ParseError, SchemaError
from core.schema import detect_layout
from core.state import ADM1StateVariables
from core.utils import to_float
from utils.csv_io import read_line, write_line

logger = logging.getLogger(__name__)

DELIMITER = ";"


def parse_tokens(tokens: Sequence[str], path: Optional[str] = None) -> List[float]:
    """
    Parse raw tokens into floats.

    Raises:
        ParseError: naming the first token that is not a float literal.
    """
    values = []
    for index, token in enumerate(tokens):
        value = to_float(token)
        if value is None:
            raise ParseError(token, index, path)
        values.append(value)
    return values


def load_state(
    path: Union[str, Path],
    state: Optional[ADM1StateVariables] = None,
) -> ADM1StateVariables:
    """
    Read the first line of ``path`` into a state.

    Args:
        path: Snapshot file
        state: Existing instance to populate in place; a new one if omitted

    Returns:
        The populated state

    Raises:
        ParseError: a token is not numeric
        SchemaError: fewer than 26 values on the line
        OSError: the file cannot be read
    """
    path_str = str(path)
    tokens = read_line(path, delimiter=DELIMITER)

    try:
        values = parse_tokens(tokens, path_str)
        layout = detect_layout(len(values))
    except ParseError as e:
        logger.error(f"Failed to parse state snapshot: {e}")
        raise
    except SchemaError as e:
        logger.error(f"Unsupported state snapshot {path_str}: {e.length} values")
        raise SchemaError(e.length, e.minimum, path_str) from e

    if state is None:
        state = ADM1StateVariables()
    state.set_var(values)

    logger.info(
        f"Loaded {type(layout).__name__} state ({len(values)} values) from {path_str}"
    )
    return state


def save_state(
    state: ADM1StateVariables,
    path: Union[str, Path],
    append: bool = True,
) -> None:
    """
    Write ``state`` as one 42-value line.

    Appends to ``path`` (creating it if needed) unless ``append`` is False.
    """
    values = state.to_array()
    write_line(path, values, append=append, delimiter=DELIMITER)
    logger.debug(f"Wrote {len(values)} state values to {path}")
