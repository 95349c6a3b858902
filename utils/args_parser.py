"""
Constructor Argument Parser
Turns the --args flag into a list of constructor arguments
"""

import json
from typing import Any, List, Optional

from loguru import logger

from .errors import ConstructorArgsError


def parse_constructor_args(text: Optional[str]) -> List[Any]:
    """
    Parse a JSON array of constructor arguments

    Values are passed through as decoded by json (strings, numbers, bools,
    nested lists/objects for array and tuple params). Nothing is evaluated.

    Args:
        text: Raw --args value, e.g. '["My Token", "MTK", 1000]'

    Returns:
        List of arguments (empty for None or blank input)
    """
    if text is None or not text.strip():
        return []

    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConstructorArgsError(
            f"--args must be a JSON array, got {text!r}: {e}"
        ) from e

    if not isinstance(value, list):
        raise ConstructorArgsError(
            f"--args must be a JSON array, got {type(value).__name__}"
        )

    logger.debug(f"Constructor args: {value}")
    return value
