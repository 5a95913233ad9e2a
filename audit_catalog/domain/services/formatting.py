"""Display formatting for remote-discovered audit files."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

DEFAULT_DOCUMENT_EXTENSION: Final[str] = ".pdf"

KIB: Final[int] = 1024
MIB: Final[int] = 1024 * 1024

_SEPARATORS = re.compile(r"[-_]")
_WORD_START = re.compile(r"\b\w", re.ASCII)
_ONE_DECIMAL = Decimal("0.1")


def format_audit_name(
    file_name: str, extension: str = DEFAULT_DOCUMENT_EXTENSION
) -> str:
    """Build a display title from a report file name.

    Strips the extension, turns "-" and "_" into spaces and upper-cases
    the first ASCII letter or digit of every word. The rest of each word is
    left as is.

    Example:
        >>> format_audit_name("lemonad-core-security-audit.pdf")
        'Lemonad Core Security Audit'

    Args:
        file_name: File name as returned by the listing.
        extension: Document extension to strip.

    Returns:
        The human readable title.
    """
    stem = file_name
    if extension and stem.endswith(extension):
        stem = stem[: -len(extension)]
    spaced = _SEPARATORS.sub(" ", stem)
    return _WORD_START.sub(lambda match: match.group(0).upper(), spaced)


def format_file_size(size: int) -> str:
    """Format a byte count as B, KB or MB.

    Below 1024 the exact byte count is shown; above that one decimal,
    with halves rounded up.

    Args:
        size: Size in bytes.

    Returns:
        Size label such as "500 B", "2.0 KB" or "5.0 MB".

    Raises:
        ValueError: If size is negative.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size < KIB:
        return f"{size} B"
    if size < MIB:
        return f"{_one_decimal(size, KIB)} KB"
    return f"{_one_decimal(size, MIB)} MB"


def _one_decimal(size: int, unit: int) -> Decimal:
    return (Decimal(size) / unit).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
