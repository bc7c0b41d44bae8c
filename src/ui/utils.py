"""Utility functions for the Streamlit UI."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def format_price(yen: int) -> str:
    """Format a price for display.

    Args:
        yen: Price in yen.

    Returns:
        Price with thousands separator and unit, e.g. "1,100円".
    """
    return f"{yen:,}円"


def split_into_columns(options: Sequence[T], columns: int) -> list[list[T]]:
    """Distribute options row by row across a fixed number of columns.

    Args:
        options: Options in display order.
        columns: Number of columns.

    Returns:
        One list per column; reading the grid row by row restores the input order.
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")
    return [list(options[i::columns]) for i in range(columns)]
